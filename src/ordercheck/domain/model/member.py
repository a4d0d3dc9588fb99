"""Classified member value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordercheck.domain.model.enums import MemberKind, VisibilityScope
    from ordercheck.domain.model.span import SourceSpan


@dataclass(frozen=True, slots=True)
class ClassifiedMember:
    """Member declaration reduced to what ordering cares about.

    Attributes:
        scope: Visibility scope (UNKNOWN if no recognizable modifier)
        kind: Member kind (UNKNOWN for unrecognized forms)
        span: Location of the declaration
    """

    scope: VisibilityScope
    kind: MemberKind
    span: SourceSpan
