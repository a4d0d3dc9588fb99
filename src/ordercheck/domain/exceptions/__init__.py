"""Domain exceptions."""

from ordercheck.domain.exceptions.base import OrderCheckError
from ordercheck.domain.exceptions.configuration import ConfigurationError, UnknownRuleError
from ordercheck.domain.exceptions.parsing import ParsingError

__all__ = [
    "OrderCheckError",
    "ParsingError",
    "ConfigurationError",
    "UnknownRuleError",
]
