"""Tests for application/rules/member_order.py."""

from ordercheck.application.rules.member_order import MemberOrderRule
from ordercheck.domain.model.enums import NodeKind
from tests.factories import (
    constructor,
    event,
    field_,
    make_type,
    method,
    other,
    property_,
)

SCOPE = "VCT0010"
KIND = "VCT0011"


def check(*members):
    """Run the rule over a synthetic type."""
    return MemberOrderRule().analyze(make_type(*members))


class TestMemberOrderRuleRegistration:
    """Tests for rule metadata."""

    def test_registers_for_type_declarations(self) -> None:
        assert MemberOrderRule.node_kind is NodeKind.TYPE_DECLARATION

    def test_supports_scope_and_kind_ids(self) -> None:
        ids = [d.id for d in MemberOrderRule.supported_diagnostics]
        assert ids == [SCOPE, KIND]


class TestScopeOrdering:
    """Tests for scope order within a run of one kind."""

    def test_correct_scope_order_no_diagnostics(self) -> None:
        diagnostics = check(
            field_("public", line=1),
            field_("protected", line=2),
            field_("internal", line=3),
            field_("private", line=4),
        )

        assert diagnostics == ()

    def test_repeated_scope_no_diagnostics(self) -> None:
        diagnostics = check(
            field_("public", line=1),
            field_("public", line=2),
            field_("private", line=3),
            field_("private", line=4),
        )

        assert diagnostics == ()

    def test_public_after_private_field(self) -> None:
        """public int X; private int Y; public int Z;"""
        diagnostics = check(
            field_("public", line=1),
            field_("private", line=2),
            field_("public", line=3),
        )

        assert len(diagnostics) == 1
        (diagnostic,) = diagnostics
        assert diagnostic.rule_id == SCOPE
        assert diagnostic.span.line == 3
        assert diagnostic.labels == ("Public", "Private")
        assert diagnostic.message == "`Public` should appear before `Private`"

    def test_private_before_public_reports_later_member(self) -> None:
        diagnostics = check(field_("private", line=1), field_("public", line=2))

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 2)]

    def test_internal_after_private(self) -> None:
        diagnostics = check(method("private", line=1), method("internal", line=2))

        assert [d.labels for d in diagnostics] == [("Internal", "Private")]

    def test_scope_not_checked_across_kinds(self) -> None:
        diagnostics = check(
            field_("private", line=1),
            constructor("public", line=2),
        )

        assert diagnostics == ()

    def test_scope_run_restarts_after_kind_change(self) -> None:
        diagnostics = check(
            field_("private", line=1),
            property_("private", line=2),
            property_("public", line=3),
        )

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 3)]

    def test_every_regression_reported(self) -> None:
        diagnostics = check(
            method("private", line=1),
            method("public", line=2),
            method("private", line=3),
            method("protected", line=4),
        )

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 2), (SCOPE, 4)]

    def test_extra_modifiers_ignored(self) -> None:
        diagnostics = check(
            field_("private", "static", "readonly", line=1),
            field_("static", "public", line=2),
        )

        assert [d.labels for d in diagnostics] == [("Public", "Private")]


class TestKindOrdering:
    """Tests for kind order regardless of scope."""

    def test_correct_kind_order_no_diagnostics(self) -> None:
        diagnostics = check(
            field_("private", line=1),
            event("public", line=2),
            constructor("public", line=3),
            property_("public", line=4),
            method("public", line=5),
        )

        assert diagnostics == ()

    def test_field_after_method(self) -> None:
        diagnostics = check(method("public", line=1), field_("public", line=2))

        assert len(diagnostics) == 1
        (diagnostic,) = diagnostics
        assert diagnostic.rule_id == KIND
        assert diagnostic.span.line == 2
        assert diagnostic.labels == ("Field", "Method")
        assert diagnostic.message == "`Field` should appear before `Method`"

    def test_compares_with_immediate_predecessor_only(self) -> None:
        diagnostics = check(
            method("public", line=1),
            property_("public", line=2),
            constructor("public", line=3),
        )

        assert [(d.labels, d.span.line) for d in diagnostics] == [
            (("Property", "Method"), 2),
            (("Constructor", "Property"), 3),
        ]

    def test_event_after_constructor(self) -> None:
        diagnostics = check(constructor("public", line=1), event("public", line=2))

        assert [d.labels for d in diagnostics] == [("Event", "Constructor")]

    def test_kind_reported_regardless_of_scope(self) -> None:
        diagnostics = check(property_("public", line=1), field_("private", line=2))

        assert [d.rule_id for d in diagnostics] == [KIND]


class TestUnknownSentinels:
    """Tests for members without a recognizable scope or form."""

    def test_unknown_scope_is_not_reported(self) -> None:
        diagnostics = check(field_("public", line=1), field_(line=2))

        assert diagnostics == ()

    def test_unknown_scope_resets_baseline(self) -> None:
        """Private -> (no modifier) -> Public: the regression is masked."""
        diagnostics = check(
            field_("private", line=1),
            field_(line=2),
            field_("public", line=3),
        )

        assert diagnostics == ()

    def test_violation_after_unknown_baseline_member(self) -> None:
        diagnostics = check(
            field_(line=1),
            field_("private", line=2),
            field_("public", line=3),
        )

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 3)]

    def test_first_member_never_reported(self) -> None:
        assert check(method("private", line=1)) == ()


class TestSkippedNodes:
    """Tests for nodes that are not members."""

    def test_other_nodes_do_not_touch_baseline(self) -> None:
        diagnostics = check(
            field_("private", line=1),
            other(line=2),
            field_("public", line=3),
        )

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 3)]

    def test_type_with_no_members(self) -> None:
        assert check() == ()

    def test_only_other_nodes(self) -> None:
        assert check(other(line=1), other(line=2)) == ()

    def test_node_without_members_attribute(self) -> None:
        from tests.factories import make_call

        assert MemberOrderRule().analyze(make_call("pos")) == ()


class TestBothChecks:
    """Tests for scope and kind firing on one member."""

    def test_scope_and_kind_fire_independently(self) -> None:
        """Scope needs an unchanged kind, kind needs a regressed one."""
        rule = MemberOrderRule()
        diagnostics = rule.check_members(
            [
                field_("public", line=1),
                method("private", line=2),
                method("public", line=3),
                field_("public", line=4),
            ]
        )

        assert [(d.rule_id, d.span.line) for d in diagnostics] == [(SCOPE, 3), (KIND, 4)]

    def test_diagnostics_in_source_order(self) -> None:
        diagnostics = check(
            method("public", line=1),
            field_("private", line=2),
            field_("public", line=3),
            constructor("public", line=4),
            field_("public", line=5),
        )

        lines = [d.span.line for d in diagnostics]
        assert lines == sorted(lines)
        assert [d.rule_id for d in diagnostics] == [KIND, SCOPE, KIND]


class TestIdempotence:
    """Tests for repeated analysis."""

    def test_same_result_twice(self) -> None:
        node = make_type(
            method("public", line=1),
            field_("private", line=2),
            field_("public", line=3),
        )
        rule = MemberOrderRule()

        assert rule.analyze(node) == rule.analyze(node)
