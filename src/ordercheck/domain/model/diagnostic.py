"""Diagnostic entity: one reported rule violation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordercheck.domain.model.descriptor import DiagnosticDescriptor
    from ordercheck.domain.model.enums import RuleCategory, Severity
    from ordercheck.domain.model.span import SourceSpan


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Rule violation anchored at a source span.

    Attributes:
        rule_id: Identifier of the descriptor that produced it
        message: Rendered message
        span: Anchoring location
        labels: Interpolated labels (empty, or exactly two)
        severity: Effective severity
        category: Category tag
    """

    rule_id: str
    message: str
    span: SourceSpan
    labels: tuple[str, ...]
    severity: Severity
    category: RuleCategory

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if len(self.labels) not in (0, 2):
            raise ValueError(f"labels must be empty or a pair, got {len(self.labels)}")

    @classmethod
    def create(
        cls,
        descriptor: DiagnosticDescriptor,
        span: SourceSpan,
        *labels: str,
    ) -> Diagnostic:
        """Create diagnostic from descriptor defaults.

        Args:
            descriptor: Rule metadata
            span: Anchoring location
            labels: Values for the message template

        Returns:
            Diagnostic with the descriptor's default severity
        """
        return cls(
            rule_id=descriptor.id,
            message=descriptor.format(*labels),
            span=span,
            labels=tuple(labels),
            severity=descriptor.default_severity,
            category=descriptor.category,
        )

    def with_severity(self, severity: Severity) -> Diagnostic:
        """Copy with a different severity."""
        if severity is self.severity:
            return self
        return replace(self, severity=severity)

    def __str__(self) -> str:
        """Format as file:line:column: ID [SEVERITY] message."""
        return f"{self.span}: {self.rule_id} [{self.severity.name}] {self.message}"
