"""Rules over syntax nodes.

- MemberOrderRule: member order by kind and scope (VCT0010, VCT0011)
- ArgumentNamingRule: named vs positional arguments (VCT0001, VCT0002)
"""

from ordercheck.application.rules._base import BaseRule
from ordercheck.application.rules._registry import (
    all_rule_types,
    default_rules,
    rules_from_config,
)
from ordercheck.application.rules.argument_naming import ArgumentNamingRule
from ordercheck.application.rules.descriptors import ALL_DESCRIPTORS, get_descriptor
from ordercheck.application.rules.member_order import MemberOrderRule

__all__ = [
    # Base
    "BaseRule",
    # Rules
    "MemberOrderRule",
    "ArgumentNamingRule",
    # Descriptors
    "ALL_DESCRIPTORS",
    "get_descriptor",
    # Factory functions
    "all_rule_types",
    "default_rules",
    "rules_from_config",
]
