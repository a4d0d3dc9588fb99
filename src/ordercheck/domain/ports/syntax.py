"""Syntax capability protocols.

The rules only ever see a host tree through these Protocols:
node kind, modifiers, ordered children and a source span.
Hosts implement them over their own tree (see the Python ast adapter);
tests implement them with plain dataclasses.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from ordercheck.domain.model.enums import Modifier, NodeKind
    from ordercheck.domain.model.span import SourceSpan


class SyntaxNode(Protocol):
    """Read-only view of one syntax node."""

    @property
    def kind(self) -> NodeKind:
        """Syntactic shape of the node."""
        ...

    @property
    def span(self) -> SourceSpan:
        """Location used to anchor diagnostics."""
        ...

    def has_modifier(self, modifier: Modifier) -> bool:
        """Check modifier set membership."""
        ...


class TypeDeclarationNode(SyntaxNode, Protocol):
    """Class-like declaration with a member body."""

    @property
    def name(self) -> str:
        """Declared type name."""
        ...

    @property
    def members(self) -> Sequence[SyntaxNode]:
        """Direct members in source order."""
        ...


class ArgumentNode(Protocol):
    """One call-site argument."""

    @property
    def is_named(self) -> bool:
        """True if bound explicitly by parameter name."""
        ...

    @property
    def span(self) -> SourceSpan:
        """Location of the argument."""
        ...


class InvocationNode(SyntaxNode, Protocol):
    """Call expression."""

    @property
    def arguments(self) -> Sequence[ArgumentNode] | None:
        """Arguments in source order, None if the call has no argument list."""
        ...


class SyntaxTree(Protocol):
    """One compiled unit handed to the engine.

    Example:
        engine = AnalysisEngine()
        tree = PythonSourceParser().parse_file(Path("app/models.py"))
        result = engine.analyze_tree(tree)
    """

    @property
    def path(self) -> Path:
        """Source file of the unit."""
        ...

    @property
    def is_generated(self) -> bool:
        """True if the unit is marked as generated code."""
        ...

    @property
    def suppressions(self) -> Mapping[int, frozenset[str] | None]:
        """Line -> suppressed rule ids (None suppresses all rules)."""
        ...

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield every node of interest, anywhere in the unit, pre-order."""
        ...
