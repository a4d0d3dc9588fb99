"""Member classification.

Total functions: every input yields a value, UNKNOWN for anything
unrecognized. Nothing here raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordercheck.domain.model.enums import MemberKind, Modifier, NodeKind, VisibilityScope
from ordercheck.domain.model.member import ClassifiedMember

if TYPE_CHECKING:
    from ordercheck.domain.ports.syntax import SyntaxNode

# Checked in this order; internal before protected.
_SCOPE_MODIFIERS: tuple[tuple[Modifier, VisibilityScope], ...] = (
    (Modifier.PUBLIC, VisibilityScope.PUBLIC),
    (Modifier.INTERNAL, VisibilityScope.INTERNAL),
    (Modifier.PROTECTED, VisibilityScope.PROTECTED),
    (Modifier.PRIVATE, VisibilityScope.PRIVATE),
)

MEMBER_NODE_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.FIELD,
        NodeKind.PROPERTY,
        NodeKind.METHOD,
        NodeKind.EVENT,
        NodeKind.CONSTRUCTOR,
    }
)


def is_member(node: SyntaxNode) -> bool:
    """True if node is one of the five recognized member forms."""
    return node.kind in MEMBER_NODE_KINDS


def classify_scope(node: SyntaxNode) -> VisibilityScope:
    """First matching access modifier decides the scope.

    Args:
        node: Member node

    Returns:
        VisibilityScope, UNKNOWN if no access modifier present
    """
    for modifier, scope in _SCOPE_MODIFIERS:
        if node.has_modifier(modifier):
            return scope
    return VisibilityScope.UNKNOWN


def classify_kind(node: SyntaxNode) -> MemberKind:
    """Map declaration form to member kind.

    Args:
        node: Member node

    Returns:
        MemberKind, UNKNOWN for any other form
    """
    match node.kind:
        case NodeKind.FIELD:
            return MemberKind.FIELD
        case NodeKind.PROPERTY:
            return MemberKind.PROPERTY
        case NodeKind.METHOD:
            return MemberKind.METHOD
        case NodeKind.EVENT:
            return MemberKind.EVENT
        case NodeKind.CONSTRUCTOR:
            return MemberKind.CONSTRUCTOR
    return MemberKind.UNKNOWN


def classify_member(node: SyntaxNode) -> ClassifiedMember:
    """Classify member into (scope, kind, span)."""
    return ClassifiedMember(
        scope=classify_scope(node),
        kind=classify_kind(node),
        span=node.span,
    )
