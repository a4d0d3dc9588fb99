"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ordercheck.domain.model.result import AnalysisReport


class BaseReporter(ABC):
    """Base class for reporters.

    Concrete reporters must implement the report() method.
    ordercheck provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, report: AnalysisReport) -> None:
                self._output.write(f"{report.diagnostic_count}\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, report: AnalysisReport) -> None:
        """Report analysis results.

        Args:
            report: Complete analysis report
        """
