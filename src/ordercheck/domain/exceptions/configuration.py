"""Configuration exceptions."""

from ordercheck.domain.exceptions.base import OrderCheckError


class ConfigurationError(OrderCheckError):
    """Invalid configuration value or file.

    Attributes:
        key: Offending configuration key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")


class UnknownRuleError(ConfigurationError, KeyError):
    """Rule id not present in the descriptor registry."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(rule_id or "<empty>", "unknown rule id")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the args
        return Exception.__str__(self)
