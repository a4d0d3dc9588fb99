"""Console reporter: AnalysisReport -> rich tables grouped by file."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ordercheck.application.reporters._base import BaseReporter
from ordercheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from ordercheck.domain.model.diagnostic import Diagnostic
    from ordercheck.domain.model.result import AnalysisReport

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


class ConsoleReporter(BaseReporter):
    """Rich formatted output, one table per file with diagnostics."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force ANSI styling (None = autodetect)
            width: Console width (None = autodetect)
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width)

    def report(self, report: AnalysisReport) -> None:
        """Render diagnostics grouped by file, then a summary.

        Args:
            report: Complete analysis report
        """
        for file_result in report.files:
            if file_result.diagnostics:
                self._render_file(str(file_result.path), file_result.diagnostics)

        self._render_summary(report)

    def _render_file(self, path: str, diagnostics: tuple[Diagnostic, ...]) -> None:
        """Render one file's diagnostics as a table."""
        self._console.print(f"[bold]{escape(path)}[/bold]")
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
        table.add_column("Location", style="dim")
        table.add_column("Rule", style="cyan")
        table.add_column("Severity")
        table.add_column("Message")

        for diagnostic in diagnostics:
            style = _SEVERITY_STYLES[diagnostic.severity]
            table.add_row(
                f"{diagnostic.span.line}:{diagnostic.span.column}",
                diagnostic.rule_id,
                f"[{style}]{diagnostic.severity.name.lower()}[/{style}]",
                escape(diagnostic.message),
            )

        self._console.print(table)
        self._console.print()

    def _render_summary(self, report: AnalysisReport) -> None:
        """Render summary line."""
        if not report.diagnostic_count:
            self._console.print(
                f"[bold green]No issues[/bold green] in {report.files_analyzed} file(s)"
            )
            return

        self._console.rule("[bold]SUMMARY[/bold]")
        parts = [
            f"[bold]Diagnostics:[/bold] {report.diagnostic_count}",
            f"errors: {report.error_count}",
            f"warnings: {report.warning_count}",
            f"info: {report.info_count}",
            f"files: {report.files_analyzed}",
        ]
        self._console.print(" | ".join(parts))
