"""Diagnostic descriptor: fixed metadata of one rule id."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordercheck.domain.model.enums import RuleCategory, Severity


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """Immutable rule metadata.

    Attributes:
        id: Stable rule identifier (e.g. VCT0010)
        title: Short title
        message_format: Message template with positional placeholders ({0}, {1})
        category: Category tag
        default_severity: Severity used unless overridden
        enabled_by_default: Whether the rule runs without configuration
        description: Longer explanation
    """

    id: str
    title: str
    message_format: str
    category: RuleCategory
    default_severity: Severity
    enabled_by_default: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.title:
            raise ValueError("title must not be empty")
        if not self.message_format:
            raise ValueError("message_format must not be empty")

    @property
    def label_count(self) -> int:
        """Number of placeholders in message_format."""
        fields = {
            name
            for _, name, _, _ in string.Formatter().parse(self.message_format)
            if name is not None
        }
        return len(fields)

    def format(self, *labels: str) -> str:
        """Render message_format with labels.

        Raises:
            ValueError: If label count does not match placeholders
        """
        if len(labels) != self.label_count:
            raise ValueError(
                f"{self.id} expects {self.label_count} labels, got {len(labels)}"
            )
        return self.message_format.format(*labels)
