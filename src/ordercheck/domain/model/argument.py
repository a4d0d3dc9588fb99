"""Call-site argument value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordercheck.domain.model.span import SourceSpan


@dataclass(frozen=True, slots=True)
class Argument:
    """One argument of a call expression.

    Satisfies ArgumentNode, so hosts may hand these straight to the rules.

    Attributes:
        is_named: True if bound explicitly by parameter name
        span: Location of the argument
        name: Bound parameter name, if any
    """

    is_named: bool
    span: SourceSpan
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.span is None:
            raise TypeError("span must not be None")
        if self.name is not None and not self.is_named:
            raise ValueError(f"positional argument must not carry a name, got '{self.name}'")
