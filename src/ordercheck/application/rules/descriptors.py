"""Diagnostic descriptor registry.

Process-wide immutable rule metadata, built once at import.
One descriptor per diagnostic kind, four in total.
"""

from __future__ import annotations

from types import MappingProxyType

from ordercheck.domain.exceptions.configuration import UnknownRuleError
from ordercheck.domain.model.descriptor import DiagnosticDescriptor
from ordercheck.domain.model.enums import RuleCategory, Severity

MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED = DiagnosticDescriptor(
    id="VCT0001",
    title="Named arguments required",
    message_format=(
        "This argument should be named. For method calls with multiple arguments, "
        "the arguments should all be named."
    ),
    category=RuleCategory.STYLE,
    default_severity=Severity.WARNING,
    enabled_by_default=True,
    description="For method calls with multiple arguments, the arguments should all be named.",
)

SINGLE_ARGUMENT_SHOULD_NOT_BE_NAMED = DiagnosticDescriptor(
    id="VCT0002",
    title="Argument should not be named",
    message_format=(
        "This argument should not be named. For method calls with only one argument, "
        "the argument should not be named."
    ),
    category=RuleCategory.STYLE,
    default_severity=Severity.WARNING,
    enabled_by_default=True,
    description="For method calls with only one argument, the argument should not be named.",
)

MEMBER_ORDER_BY_SCOPE = DiagnosticDescriptor(
    id="VCT0010",
    title="Class members are not in the correct order",
    message_format="`{0}` should appear before `{1}`",
    category=RuleCategory.ORDERING,
    default_severity=Severity.WARNING,
    enabled_by_default=True,
    description=(
        "Enforces ordering of class members by scope (public, protected, internal, private)."
    ),
)

MEMBER_ORDER_BY_KIND = DiagnosticDescriptor(
    id="VCT0011",
    title="Class members are not in the correct order",
    message_format="`{0}` should appear before `{1}`",
    category=RuleCategory.ORDERING,
    default_severity=Severity.WARNING,
    enabled_by_default=True,
    description=(
        "Enforces ordering of class members by kind "
        "(fields, events, constructors, properties, methods)."
    ),
)

# Registry - tuple for immutability, ordered by id
ALL_DESCRIPTORS: tuple[DiagnosticDescriptor, ...] = (
    MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED,
    SINGLE_ARGUMENT_SHOULD_NOT_BE_NAMED,
    MEMBER_ORDER_BY_SCOPE,
    MEMBER_ORDER_BY_KIND,
)

_BY_ID = MappingProxyType({d.id: d for d in ALL_DESCRIPTORS})


def get_descriptor(rule_id: str) -> DiagnosticDescriptor:
    """Look up descriptor by id.

    Raises:
        UnknownRuleError: If id is not registered
    """
    try:
        return _BY_ID[rule_id]
    except KeyError:
        raise UnknownRuleError(rule_id) from None


def is_known_rule(rule_id: str) -> bool:
    """Check if id is registered."""
    return rule_id in _BY_ID
