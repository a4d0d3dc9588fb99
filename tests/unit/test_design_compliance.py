"""Design compliance tests.

- FAIL-FIRST validation of domain values
- Immutability of domain values
- Layer boundaries: domain <- infrastructure, domain <- application <- presentation
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

from ordercheck.application.rules.descriptors import MEMBER_ORDER_BY_KIND
from ordercheck.domain.exceptions import (
    ConfigurationError,
    OrderCheckError,
    ParsingError,
    UnknownRuleError,
)
from ordercheck.domain.model import (
    AnalysisReport,
    AnalyzerConfig,
    Argument,
    ClassifiedMember,
    Diagnostic,
    FileResult,
    MemberKind,
    SourceSpan,
    VisibilityScope,
)

PACKAGE_ROOT = Path(__file__).parent.parent.parent / "src" / "ordercheck"

# Layer -> layers it may import from
ALLOWED_IMPORTS = {
    "domain": {"domain"},
    "infrastructure": {"domain", "infrastructure"},
    "application": {"domain", "application", "infrastructure"},
    "presentation": {"domain", "application", "infrastructure", "presentation"},
}


def span() -> SourceSpan:
    return SourceSpan(file=Path("m.py"), line=1, column=0)


# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid domain values raise at construction, never fall back."""

    def test_span_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line"):
            SourceSpan(file=Path("m.py"), line=0, column=0)

    def test_positional_argument_with_name_raises(self) -> None:
        with pytest.raises(ValueError):
            Argument(is_named=False, span=span(), name="x")

    def test_diagnostic_single_label_raises(self) -> None:
        with pytest.raises(ValueError, match="labels"):
            Diagnostic(
                rule_id="VCT0011",
                message="m",
                span=span(),
                labels=("Field",),
                severity=MEMBER_ORDER_BY_KIND.default_severity,
                category=MEMBER_ORDER_BY_KIND.category,
            )

    def test_config_zero_jobs_raises(self) -> None:
        with pytest.raises(ValueError, match="jobs"):
            AnalyzerConfig(jobs=0)

    def test_skipped_file_with_diagnostics_raises(self) -> None:
        diagnostic = Diagnostic.create(MEMBER_ORDER_BY_KIND, span(), "Field", "Method")
        with pytest.raises(ValueError, match="skipped"):
            FileResult(path=Path("m.py"), diagnostics=(diagnostic,), skipped=True)


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Domain values are frozen."""

    def test_span_frozen(self) -> None:
        value = span()
        with pytest.raises(AttributeError):
            value.line = 2  # type: ignore[misc]

    def test_member_frozen(self) -> None:
        member = ClassifiedMember(VisibilityScope.PUBLIC, MemberKind.FIELD, span())
        with pytest.raises(AttributeError):
            member.scope = VisibilityScope.PRIVATE  # type: ignore[misc]

    def test_diagnostic_frozen(self) -> None:
        diagnostic = Diagnostic.create(MEMBER_ORDER_BY_KIND, span(), "Field", "Method")
        with pytest.raises(AttributeError):
            diagnostic.message = "other"  # type: ignore[misc]

    def test_descriptor_frozen(self) -> None:
        with pytest.raises(AttributeError):
            MEMBER_ORDER_BY_KIND.id = "X"  # type: ignore[misc]

    def test_config_overrides_read_only(self) -> None:
        config = AnalyzerConfig()
        with pytest.raises(TypeError):
            config.severity_overrides["VCT0001"] = MEMBER_ORDER_BY_KIND.default_severity  # type: ignore[index]

    def test_report_frozen(self) -> None:
        report = AnalysisReport.empty()
        with pytest.raises(AttributeError):
            report.files = ()  # type: ignore[misc]


# =============================================================================
# Error hierarchy
# =============================================================================


class TestErrorHierarchy:
    """All failures share one base so callers can catch them together."""

    @pytest.mark.parametrize("error_type", [ParsingError, ConfigurationError, UnknownRuleError])
    def test_errors_are_ordercheck_errors(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, OrderCheckError)

    def test_unknown_rule_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise UnknownRuleError("VCT9999")


# =============================================================================
# Layer boundaries
# =============================================================================


def _ordercheck_imports(path: Path) -> set[str]:
    """Layers imported by a module (second component of ordercheck.* imports)."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    layers: set[str] = set()
    for node in ast.walk(tree):
        match node:
            case ast.ImportFrom(module=str(module)) if module.startswith("ordercheck."):
                layers.add(module.split(".")[1])
            case ast.Import(names=names):
                layers.update(
                    a.name.split(".")[1] for a in names if a.name.startswith("ordercheck.")
                )
    return layers


LAYER_MODULES = [
    (layer, path)
    for layer in ALLOWED_IMPORTS
    for path in sorted((PACKAGE_ROOT / layer).rglob("*.py"))
]


class TestLayerBoundaries:
    """Inner layers never import outer ones."""

    @pytest.mark.parametrize(
        ("layer", "path"),
        LAYER_MODULES,
        ids=[str(p.relative_to(PACKAGE_ROOT)) for _, p in LAYER_MODULES],
    )
    def test_imports_allowed(self, layer: str, path: Path) -> None:
        forbidden = _ordercheck_imports(path) - ALLOWED_IMPORTS[layer]

        assert not forbidden, f"{path.name} imports {sorted(forbidden)}"

    def test_all_layers_present(self) -> None:
        assert {layer for layer, _ in LAYER_MODULES} == set(ALLOWED_IMPORTS)
