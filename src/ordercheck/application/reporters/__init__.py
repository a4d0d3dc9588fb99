"""Reporters for analysis results.

PlainTextReporter and JSONReporter use stdlib only,
ConsoleReporter renders with rich.
"""

from ordercheck.application.reporters._base import BaseReporter
from ordercheck.application.reporters.console import ConsoleReporter
from ordercheck.application.reporters.json_reporter import JSONReporter
from ordercheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
