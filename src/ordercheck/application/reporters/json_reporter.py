"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from ordercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from ordercheck.domain.model.diagnostic import Diagnostic
    from ordercheck.domain.model.result import AnalysisReport


class JSONReporter(BaseReporter):
    """JSON reporter for CI integration and other tools."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, report: AnalysisReport) -> None:
        """Report analysis results as JSON.

        Args:
            report: Complete analysis report
        """
        json.dump(self._report_to_dict(report), self._output, indent=self._indent)
        self._output.write("\n")

    def _report_to_dict(self, report: AnalysisReport) -> dict[str, object]:
        """Convert AnalysisReport to JSON-serializable dict."""
        return {
            "passed": report.passed,
            "summary": {
                "files_analyzed": report.files_analyzed,
                "files_skipped": report.files_skipped,
                "diagnostic_count": report.diagnostic_count,
                "error_count": report.error_count,
                "warning_count": report.warning_count,
                "info_count": report.info_count,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in report.diagnostics],
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        span = diagnostic.span
        return {
            "rule_id": diagnostic.rule_id,
            "message": diagnostic.message,
            "labels": list(diagnostic.labels),
            "severity": diagnostic.severity.name,
            "category": diagnostic.category.value,
            "location": {
                "file": str(span.file),
                "line": span.line,
                "column": span.column,
                "end_line": span.end_line,
                "end_column": span.end_column,
            },
        }
