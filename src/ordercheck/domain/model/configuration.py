"""Analyzer configuration.

The only tunables are per-rule: enabled/disabled and severity.
Everything else controls which files are analyzed and how.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ordercheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from ordercheck.domain.model.descriptor import DiagnosticDescriptor


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    Rule ids are not checked against the registry here; the loader and
    the engine do that, so this module stays free of application imports.

    Attributes:
        disabled_rules: Rule ids that never report
        severity_overrides: Rule id -> severity replacing the default
        analyze_generated: Analyze files marked as generated
        exclude: Glob patterns of paths skipped during discovery
        jobs: Worker threads for multi-file analysis (>= 1)
    """

    disabled_rules: frozenset[str] = frozenset()
    severity_overrides: Mapping[str, Severity] = field(
        default_factory=lambda: MappingProxyType({})
    )
    analyze_generated: bool = False
    exclude: tuple[str, ...] = ()
    jobs: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {self.jobs}")

        for rule_id in self.disabled_rules:
            if not rule_id:
                raise ValueError("disabled_rules must not contain empty ids")

        for rule_id, severity in self.severity_overrides.items():
            if not rule_id:
                raise ValueError("severity_overrides must not contain empty ids")
            if not isinstance(severity, Severity):
                raise TypeError(
                    f"severity for {rule_id} must be Severity, got {type(severity).__name__}"
                )

        # Freeze caller-supplied dict
        if not isinstance(self.severity_overrides, MappingProxyType):
            object.__setattr__(
                self, "severity_overrides", MappingProxyType(dict(self.severity_overrides))
            )

    @property
    def rule_ids(self) -> frozenset[str]:
        """All rule ids mentioned by this configuration."""
        return self.disabled_rules | frozenset(self.severity_overrides)

    def is_enabled(self, descriptor: DiagnosticDescriptor) -> bool:
        """Check if rule reports under this configuration."""
        if descriptor.id in self.disabled_rules:
            return False
        return descriptor.enabled_by_default

    def severity_for(self, descriptor: DiagnosticDescriptor) -> Severity:
        """Effective severity for rule."""
        return self.severity_overrides.get(descriptor.id, descriptor.default_severity)

    def merged(self, other: AnalyzerConfig, *, jobs: int | None = None) -> AnalyzerConfig:
        """Overlay other on top of self.

        Disabled ids and exclude patterns accumulate, severities from
        other win, analyze_generated is on if either side turns it on.
        The worker count stays self.jobs unless jobs is given.
        """
        return AnalyzerConfig(
            disabled_rules=self.disabled_rules | other.disabled_rules,
            severity_overrides={**self.severity_overrides, **other.severity_overrides},
            analyze_generated=self.analyze_generated or other.analyze_generated,
            exclude=self.exclude + tuple(p for p in other.exclude if p not in self.exclude),
            jobs=self.jobs if jobs is None else jobs,
        )
