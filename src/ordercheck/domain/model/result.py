"""Analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ordercheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from pathlib import Path

    from ordercheck.domain.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class FileResult:
    """Diagnostics of one analyzed file.

    Attributes:
        path: Analyzed file
        diagnostics: Diagnostics in emission order
        skipped: True if the file was not analyzed (generated code)
    """

    path: Path
    diagnostics: tuple[Diagnostic, ...]
    skipped: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.skipped and self.diagnostics:
            raise ValueError("skipped file must not carry diagnostics")


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Aggregate of per-file results, in input order.

    Attributes:
        files: Per-file results
    """

    files: tuple[FileResult, ...]

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All diagnostics, file by file."""
        return tuple(d for f in self.files for d in f.diagnostics)

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def files_analyzed(self) -> int:
        """Number of files that were not skipped."""
        return sum(1 for f in self.files if not f.skipped)

    @property
    def files_skipped(self) -> int:
        """Number of skipped files."""
        return sum(1 for f in self.files if f.skipped)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return self._count(Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return self._count(Severity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of INFO severity diagnostics."""
        return self._count(Severity.INFO)

    @property
    def passed(self) -> bool:
        """True if no ERROR severity diagnostics."""
        return self.error_count == 0

    def _count(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity is severity)

    @classmethod
    def empty(cls) -> AnalysisReport:
        """Report with no files."""
        return cls(files=())
