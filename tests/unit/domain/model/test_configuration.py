"""Tests for domain/model/configuration.py."""

import pytest

from ordercheck.application.rules.descriptors import (
    MEMBER_ORDER_BY_SCOPE,
    MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED,
)
from ordercheck.domain.model.configuration import AnalyzerConfig
from ordercheck.domain.model.enums import Severity


class TestAnalyzerConfigDefaults:
    """Tests for default configuration."""

    def test_everything_enabled(self) -> None:
        config = AnalyzerConfig()

        assert config.is_enabled(MEMBER_ORDER_BY_SCOPE)
        assert config.severity_for(MEMBER_ORDER_BY_SCOPE) is Severity.WARNING
        assert config.analyze_generated is False
        assert config.jobs == 1
        assert config.rule_ids == frozenset()


class TestAnalyzerConfigOverrides:
    """Tests for disabling and severity overrides."""

    def test_disabled(self) -> None:
        config = AnalyzerConfig(disabled_rules=frozenset({"VCT0010"}))

        assert not config.is_enabled(MEMBER_ORDER_BY_SCOPE)
        assert config.is_enabled(MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED)

    def test_severity_override(self) -> None:
        config = AnalyzerConfig(severity_overrides={"VCT0010": Severity.ERROR})

        assert config.severity_for(MEMBER_ORDER_BY_SCOPE) is Severity.ERROR
        assert config.severity_for(MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED) is Severity.WARNING

    def test_overrides_are_read_only(self) -> None:
        source = {"VCT0010": Severity.ERROR}
        config = AnalyzerConfig(severity_overrides=source)
        source["VCT0011"] = Severity.INFO

        assert "VCT0011" not in config.severity_overrides
        with pytest.raises(TypeError):
            config.severity_overrides["VCT0001"] = Severity.INFO  # type: ignore[index]

    def test_rule_ids(self) -> None:
        config = AnalyzerConfig(
            disabled_rules=frozenset({"VCT0001"}),
            severity_overrides={"VCT0010": Severity.INFO},
        )

        assert config.rule_ids == frozenset({"VCT0001", "VCT0010"})


class TestAnalyzerConfigFailFirst:
    """Tests for FAIL-FIRST validation."""

    def test_jobs_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="jobs must be >= 1"):
            AnalyzerConfig(jobs=0)

    def test_empty_disabled_id_raises(self) -> None:
        with pytest.raises(ValueError, match="disabled_rules"):
            AnalyzerConfig(disabled_rules=frozenset({""}))

    def test_non_severity_value_raises(self) -> None:
        with pytest.raises(TypeError, match="must be Severity"):
            AnalyzerConfig(severity_overrides={"VCT0010": "error"})  # type: ignore[dict-item]


class TestAnalyzerConfigMerged:
    """Tests for merged()."""

    def test_disabled_accumulate(self) -> None:
        base = AnalyzerConfig(disabled_rules=frozenset({"VCT0001"}))
        other = AnalyzerConfig(disabled_rules=frozenset({"VCT0002"}))

        assert base.merged(other).disabled_rules == frozenset({"VCT0001", "VCT0002"})

    def test_other_severity_wins(self) -> None:
        base = AnalyzerConfig(severity_overrides={"VCT0010": Severity.INFO})
        other = AnalyzerConfig(severity_overrides={"VCT0010": Severity.ERROR})

        assert base.merged(other).severity_overrides["VCT0010"] is Severity.ERROR

    def test_jobs_kept_without_explicit_value(self) -> None:
        base = AnalyzerConfig(jobs=4)

        assert base.merged(AnalyzerConfig()).jobs == 4
        assert base.merged(AnalyzerConfig(jobs=2)).jobs == 4

    @pytest.mark.parametrize("jobs", [1, 2, 8])
    def test_explicit_jobs_replace_base(self, jobs: int) -> None:
        base = AnalyzerConfig(jobs=4)

        assert base.merged(AnalyzerConfig(), jobs=jobs).jobs == jobs

    def test_exclude_deduplicated(self) -> None:
        base = AnalyzerConfig(exclude=("build/*",))
        other = AnalyzerConfig(exclude=("build/*", "gen/*"))

        assert base.merged(other).exclude == ("build/*", "gen/*")
