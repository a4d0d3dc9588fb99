"""Python source parser.

Implements SourceParserPort using the standard library ast module.
"""

from __future__ import annotations

import ast
import io
import logging
import re
import tokenize
from types import MappingProxyType
from typing import TYPE_CHECKING

from ordercheck.domain.exceptions.parsing import ParsingError
from ordercheck.domain.ports.source_parser import SourceParserPort
from ordercheck.infrastructure.adapters.python_ast import PythonSyntaxTree

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

GENERATED_MARKERS = ("@generated", "<auto-generated", "DO NOT EDIT")
GENERATED_HEADER_LINES = 5

_NOQA = re.compile(
    r"#\s*noqa(?::\s*(?P<codes>[A-Z]+[0-9]+(?:[\s,]+[A-Z]+[0-9]+)*))?",
    re.IGNORECASE,
)
_CODE = re.compile(r"[A-Z]+[0-9]+", re.IGNORECASE)


class PythonSourceParser(SourceParserPort):
    """Parser producing PythonSyntaxTree.

    Stateless between calls.
    FAIL-FIRST: raises ParsingError on any reading or syntax issue.
    """

    suffixes = (".py", ".pyi")

    def parse_file(self, path: Path) -> PythonSyntaxTree:
        """Parse single Python file.

        Args:
            path: Path to .py file

        Returns:
            Parsed tree

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except IsADirectoryError as e:
            raise ParsingError(path, "is a directory") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e

        try:
            source = decode_source(data)
        except (SyntaxError, UnicodeDecodeError) as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return self.parse_source(source, path)

    def parse_source(self, source: str, path: Path) -> PythonSyntaxTree:
        """Parse Python source text.

        Args:
            source: Source text
            path: Path reported in spans

        Returns:
            Parsed tree

        Raises:
            ParsingError: On syntax errors
        """
        try:
            module = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        is_generated = is_generated_source(source)
        if is_generated:
            logger.debug("%s is marked as generated", path)

        return PythonSyntaxTree(
            module=module,
            path=path,
            is_generated=is_generated,
            suppressions=collect_suppressions(source),
        )


def decode_source(data: bytes) -> str:
    """Decode source bytes the way the interpreter does.

    Honours a UTF-8 BOM and a coding declaration in the first two lines,
    UTF-8 otherwise. The BOM is not part of the result.

    Raises:
        SyntaxError: On an unknown or conflicting coding declaration
        UnicodeDecodeError: If data does not match the encoding
    """
    encoding, _ = tokenize.detect_encoding(io.BytesIO(data).readline)
    return data.decode(encoding)


def is_generated_source(source: str) -> bool:
    """Check header lines for generated-code markers."""
    header = source.splitlines()[:GENERATED_HEADER_LINES]
    return any(marker in line for line in header for marker in GENERATED_MARKERS)


def collect_suppressions(source: str) -> MappingProxyType[int, frozenset[str] | None]:
    """Collect `# noqa` comments by line.

    `# noqa` suppresses every rule on its line,
    `# noqa: VCT0001, VCT0010` only the listed ids.

    Args:
        source: Source text that already parsed

    Returns:
        Line -> rule ids (None = all rules)
    """
    suppressions: dict[int, frozenset[str] | None] = {}
    tokens = tokenize.generate_tokens(io.StringIO(source).readline)

    for token in tokens:
        if token.type != tokenize.COMMENT:
            continue
        match = _NOQA.search(token.string)
        if match is None:
            continue

        line = token.start[0]
        codes = match.group("codes")
        if codes is None:
            suppressions[line] = None
        else:
            suppressions[line] = frozenset(c.upper() for c in _CODE.findall(codes))

    return MappingProxyType(suppressions)
