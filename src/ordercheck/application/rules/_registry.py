"""Rule registry.

Central registry of all rules with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordercheck.application.rules._base import BaseRule
from ordercheck.application.rules.argument_naming import ArgumentNamingRule
from ordercheck.application.rules.member_order import MemberOrderRule

if TYPE_CHECKING:
    from ordercheck.domain.model.configuration import AnalyzerConfig

# Registry - tuple for immutability
_ALL_RULES: tuple[type[BaseRule], ...] = (
    MemberOrderRule,
    ArgumentNamingRule,
)


def all_rule_types() -> tuple[type[BaseRule], ...]:
    """Every registered rule class."""
    return _ALL_RULES


def default_rules() -> tuple[BaseRule, ...]:
    """Instantiate every rule."""
    return tuple(rule_cls() for rule_cls in _ALL_RULES)


def rules_from_config(config: AnalyzerConfig) -> tuple[BaseRule, ...]:
    """Instantiate rules enabled by config.

    A rule is created via its from_config() factory; None means every
    descriptor it supports is disabled.

    Args:
        config: Analyzer configuration

    Returns:
        Tuple of enabled rules
    """
    rules: list[BaseRule] = []

    for rule_cls in _ALL_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)

    return tuple(rules)
