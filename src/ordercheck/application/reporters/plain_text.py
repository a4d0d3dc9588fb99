"""Plain text reporter.

One line per diagnostic, compiler style, followed by a summary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from ordercheck.domain.model.result import AnalysisReport


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print()."""

    def report(self, report: AnalysisReport) -> None:
        """Report diagnostics as `path:line:col: ID [SEVERITY] message` lines.

        Args:
            report: Complete analysis report
        """
        for diagnostic in report.diagnostics:
            self._write(str(diagnostic))

        if report.diagnostics:
            self._write()
        self._report_summary(report)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_summary(self, report: AnalysisReport) -> None:
        """Print summary line."""
        files = f"{report.files_analyzed} file(s) analyzed"
        if report.files_skipped:
            files += f", {report.files_skipped} skipped"

        if not report.diagnostic_count:
            self._write(f"{files}: no issues found")
            return

        self._write(
            f"{files}: {report.diagnostic_count} diagnostic(s) "
            f"({report.error_count} error, {report.warning_count} warning, "
            f"{report.info_count} info)"
        )
