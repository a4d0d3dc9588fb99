"""Tests for application/rules/classification.py."""

import pytest

from ordercheck.application.rules.classification import (
    MEMBER_NODE_KINDS,
    classify_kind,
    classify_member,
    classify_scope,
    is_member,
)
from ordercheck.domain.model.enums import MemberKind, NodeKind, VisibilityScope
from tests.factories import field_, make_call, make_member, other


class TestClassifyScope:
    """Tests for scope classification."""

    @pytest.mark.parametrize(
        ("modifier", "expected"),
        [
            ("public", VisibilityScope.PUBLIC),
            ("protected", VisibilityScope.PROTECTED),
            ("internal", VisibilityScope.INTERNAL),
            ("private", VisibilityScope.PRIVATE),
        ],
    )
    def test_single_access_modifier(self, modifier: str, expected: VisibilityScope) -> None:
        assert classify_scope(field_(modifier)) is expected

    def test_no_modifier_is_unknown(self) -> None:
        assert classify_scope(field_()) is VisibilityScope.UNKNOWN

    def test_non_access_modifiers_are_unknown(self) -> None:
        assert classify_scope(field_("static", "readonly")) is VisibilityScope.UNKNOWN

    def test_internal_checked_before_protected(self) -> None:
        assert classify_scope(field_("protected", "internal")) is VisibilityScope.INTERNAL

    def test_public_wins_over_everything(self) -> None:
        assert classify_scope(field_("private", "public")) is VisibilityScope.PUBLIC

    def test_protected_before_private(self) -> None:
        assert classify_scope(field_("private", "protected")) is VisibilityScope.PROTECTED


class TestClassifyKind:
    """Tests for kind classification."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NodeKind.FIELD, MemberKind.FIELD),
            (NodeKind.EVENT, MemberKind.EVENT),
            (NodeKind.CONSTRUCTOR, MemberKind.CONSTRUCTOR),
            (NodeKind.PROPERTY, MemberKind.PROPERTY),
            (NodeKind.METHOD, MemberKind.METHOD),
        ],
    )
    def test_member_forms(self, kind: NodeKind, expected: MemberKind) -> None:
        assert classify_kind(make_member(kind)) is expected

    @pytest.mark.parametrize("kind", [NodeKind.OTHER, NodeKind.INVOCATION, NodeKind.TYPE_DECLARATION])
    def test_other_forms_are_unknown(self, kind: NodeKind) -> None:
        assert classify_kind(make_member(kind)) is MemberKind.UNKNOWN


class TestIsMember:
    """Tests for member form detection."""

    def test_five_member_forms(self) -> None:
        assert len(MEMBER_NODE_KINDS) == 5

    def test_field_is_member(self) -> None:
        assert is_member(field_("public"))

    def test_other_is_not_member(self) -> None:
        assert not is_member(other())

    def test_invocation_is_not_member(self) -> None:
        assert not is_member(make_call())


class TestClassifyMember:
    """Tests for full classification."""

    def test_triple(self) -> None:
        node = make_member(NodeKind.PROPERTY, "protected", line=7)

        member = classify_member(node)

        assert member.scope is VisibilityScope.PROTECTED
        assert member.kind is MemberKind.PROPERTY
        assert member.span == node.span

    def test_never_raises_for_odd_nodes(self) -> None:
        member = classify_member(make_call("pos"))

        assert member.scope is VisibilityScope.UNKNOWN
        assert member.kind is MemberKind.UNKNOWN
