"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ordercheck.domain.ports.syntax import SyntaxTree


class SourceParserPort(ABC):
    """Port for turning source files into syntax trees.

    Infrastructure layer must provide implementation.
    """

    suffixes: tuple[str, ...] = ()
    """File suffixes this parser accepts during directory discovery."""

    @abstractmethod
    def parse_file(self, path: Path) -> SyntaxTree:
        """Parse single source file.

        Args:
            path: Path to source file

        Returns:
            Parsed tree

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        ...

    @abstractmethod
    def parse_source(self, source: str, path: Path) -> SyntaxTree:
        """Parse in-memory source.

        Args:
            source: Source text
            path: Path reported in spans

        Returns:
            Parsed tree

        Raises:
            ParsingError: If source cannot be parsed
        """
        ...
