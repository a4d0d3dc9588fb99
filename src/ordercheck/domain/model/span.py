"""Source span value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Region of a source file a diagnostic is anchored to.

    Lines are 1-based and columns 0-based, as the ast module reports them.
    The end position is optional: hosts that only know where a node
    starts leave both end fields None.
    """

    file: Path
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0 or self.column < 0:
            raise ValueError(
                f"start must be line > 0, column >= 0, got {self.line}:{self.column}"
            )
        if (self.end_line is None) != (self.end_column is None):
            raise ValueError("end_line and end_column must be given together")
        if self.end_line is not None and (self.end_line, self.end_column) < (self.line, self.column):
            raise ValueError(
                f"span ends at {self.end_line}:{self.end_column} "
                f"before it starts at {self.line}:{self.column}"
            )

    def __str__(self) -> str:
        # compiler style: path:line:col
        return f"{self.file}:{self.line}:{self.column}"
