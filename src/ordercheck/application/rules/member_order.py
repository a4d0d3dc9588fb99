"""Member order rule (VCT0010, VCT0011).

Walks the direct members of a type declaration in source order and
reports members whose kind, or whose scope within a run of one kind,
ranks before the member preceding it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordercheck.application.rules._base import BaseRule
from ordercheck.application.rules.classification import classify_member, is_member
from ordercheck.application.rules.descriptors import MEMBER_ORDER_BY_KIND, MEMBER_ORDER_BY_SCOPE
from ordercheck.domain.model.diagnostic import Diagnostic
from ordercheck.domain.model.enums import MemberKind, NodeKind, VisibilityScope

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ordercheck.domain.ports.syntax import SyntaxNode


class MemberOrderRule(BaseRule):
    """Class members grouped by kind, then by scope.

    Required order:
        kind:  Field, Event, Constructor, Property, Method
        scope: Public, Protected, Internal, Private (within one kind)
    """

    node_kind = NodeKind.TYPE_DECLARATION
    supported_diagnostics = (MEMBER_ORDER_BY_SCOPE, MEMBER_ORDER_BY_KIND)

    def analyze(self, node: SyntaxNode) -> tuple[Diagnostic, ...]:
        """Check member order of one type declaration.

        Args:
            node: Type declaration node

        Returns:
            Diagnostics in member order
        """
        members = getattr(node, "members", None)
        if not members:
            return ()
        return self.check_members(members)

    def check_members(self, members: Iterable[SyntaxNode]) -> tuple[Diagnostic, ...]:
        """Check an ordered member sequence.

        Non-member nodes are skipped and leave the baseline untouched.
        The baseline is replaced after every member, including members
        classified as UNKNOWN.

        Args:
            members: Direct members in source order

        Returns:
            Diagnostics in member order
        """
        diagnostics: list[Diagnostic] = []
        last_scope = VisibilityScope.UNKNOWN
        last_kind = MemberKind.UNKNOWN

        for member in members:
            if not is_member(member):
                continue

            current = classify_member(member)

            if current.kind is last_kind and current.scope.precedes(last_scope):
                diagnostics.append(
                    Diagnostic.create(
                        MEMBER_ORDER_BY_SCOPE,
                        current.span,
                        current.scope.label,
                        last_scope.label,
                    )
                )

            if current.kind.precedes(last_kind):
                diagnostics.append(
                    Diagnostic.create(
                        MEMBER_ORDER_BY_KIND,
                        current.span,
                        current.kind.label,
                        last_kind.label,
                    )
                )

            last_scope = current.scope
            last_kind = current.kind

        return tuple(diagnostics)
