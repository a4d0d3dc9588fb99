"""Python ast host adapter.

Exposes Python classes and calls through the syntax protocols:

    class body statement            NodeKind
    ------------------------------  -----------
    x = 1 / x: int                  FIELD
    def __init__ / def __new__      CONSTRUCTOR
    @property / @x.setter / ...     PROPERTY
    any other def                   METHOD
    anything else                   OTHER

Access modifiers come from the naming convention:
    name, __dunder__  -> public
    _name             -> protected
    __name            -> private
Python has no event or internal declarations; this host never emits them.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ordercheck.domain.exceptions.parsing import ParsingError
from ordercheck.domain.model.argument import Argument
from ordercheck.domain.model.enums import Modifier, NodeKind
from ordercheck.domain.model.span import SourceSpan

if TYPE_CHECKING:
    from pathlib import Path

    from ordercheck.domain.ports.syntax import SyntaxNode

CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__"})
PROPERTY_DECORATORS = frozenset({"property", "cached_property", "abstractproperty"})
PROPERTY_ACCESSORS = frozenset({"setter", "getter", "deleter"})
STATIC_DECORATORS = frozenset({"staticmethod", "classmethod"})
TYPE_QUALIFIERS = frozenset({"ClassVar", "Final"})


# =============================================================================
# NODES
# =============================================================================


@dataclass(frozen=True, slots=True)
class PythonMemberNode:
    """Direct statement of a class body.

    Attributes:
        kind: Member form (OTHER for non-member statements)
        span: Statement location
        modifiers: Derived modifiers
        name: Declared name, None if the statement declares none
    """

    kind: NodeKind
    span: SourceSpan
    modifiers: frozenset[Modifier] = frozenset()
    name: str | None = None

    def has_modifier(self, modifier: Modifier) -> bool:
        """Check modifier set membership."""
        return modifier in self.modifiers


@dataclass(frozen=True, slots=True)
class PythonClassNode:
    """Class definition with adapted direct members.

    Attributes:
        name: Class name
        span: ClassDef location
        members: Body statements in source order
        modifiers: Modifiers derived from the class name
    """

    name: str
    span: SourceSpan
    members: tuple[PythonMemberNode, ...]
    modifiers: frozenset[Modifier] = frozenset()

    @property
    def kind(self) -> NodeKind:
        """Always TYPE_DECLARATION."""
        return NodeKind.TYPE_DECLARATION

    def has_modifier(self, modifier: Modifier) -> bool:
        """Check modifier set membership."""
        return modifier in self.modifiers


@dataclass(frozen=True, slots=True)
class PythonCallNode:
    """Call expression with adapted arguments.

    Attributes:
        span: Call location
        arguments: Positional and keyword arguments in source order
    """

    span: SourceSpan
    arguments: tuple[Argument, ...]

    @property
    def kind(self) -> NodeKind:
        """Always INVOCATION."""
        return NodeKind.INVOCATION

    def has_modifier(self, modifier: Modifier) -> bool:
        """Calls carry no modifiers."""
        return False


@dataclass(frozen=True, slots=True)
class PythonSyntaxTree:
    """Parsed Python module exposed as SyntaxTree.

    Attributes:
        module: Parsed ast.Module
        path: Source file
        is_generated: True if the file is marked generated
        suppressions: Line -> suppressed rule ids (None = all)
    """

    module: ast.Module
    path: Path
    is_generated: bool = False
    suppressions: Mapping[int, frozenset[str] | None] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield adapted classes and calls in pre-order.

        Nested classes and calls inside any expression are included.
        """
        stack: list[ast.AST] = [self.module]

        while stack:
            node = stack.pop()

            match node:
                case ast.ClassDef():
                    yield adapt_class(node, self.path)
                case ast.Call():
                    yield adapt_call(node, self.path)

            # Reverse to keep source order on pop
            stack.extend(reversed(list(ast.iter_child_nodes(node))))


# =============================================================================
# ADAPTERS - Pure functions using pattern matching
# =============================================================================


def make_span(node: ast.stmt | ast.expr | ast.keyword, path: Path) -> SourceSpan:
    """Create SourceSpan from AST node.

    Raises:
        ParsingError: If node has no line info (FAIL-FIRST)
    """
    lineno = getattr(node, "lineno", None)
    if lineno is None:
        raise ParsingError(path, f"{type(node).__name__} node has no line info")

    return SourceSpan(
        file=path,
        line=lineno,
        column=node.col_offset,
        end_line=node.end_lineno,
        end_column=node.end_col_offset,
    )


def name_modifiers(name: str) -> frozenset[Modifier]:
    """Access modifier from Python naming convention.

    Rules:
        __name__ (dunder) -> PUBLIC (special methods)
        __name (not __name__) -> PRIVATE (mangled)
        _name -> PROTECTED
        name -> PUBLIC
    """
    if name.startswith("__") and name.endswith("__"):
        return frozenset({Modifier.PUBLIC})
    if name.startswith("__"):
        return frozenset({Modifier.PRIVATE})
    if name.startswith("_"):
        return frozenset({Modifier.PROTECTED})
    return frozenset({Modifier.PUBLIC})


def decorator_names(decorators: Iterable[ast.expr]) -> frozenset[str]:
    """Trailing names of decorators (`functools.cached_property` -> `cached_property`)."""
    names: set[str] = set()
    for dec in decorators:
        match dec:
            case ast.Name(id=name) | ast.Attribute(attr=name):
                names.add(name)
            case ast.Call(func=ast.Name(id=name) | ast.Attribute(attr=name)):
                names.add(name)
    return frozenset(names)


def type_qualifiers(annotation: ast.expr) -> frozenset[str]:
    """Outer ClassVar/Final qualifiers of an annotation.

    `ClassVar[Final[int]]` -> {ClassVar, Final}, `typing.Final` -> {Final}.
    Only leading qualifiers count: `list[Final]` and `FinalizerState` have none.
    """
    names: set[str] = set()
    node = annotation
    while True:
        match node:
            case ast.Subscript(value=ast.Name(id=name) | ast.Attribute(attr=name), slice=inner) if (
                name in TYPE_QUALIFIERS
            ):
                names.add(name)
                node = inner
            case ast.Name(id=name) | ast.Attribute(attr=name) if name in TYPE_QUALIFIERS:
                names.add(name)
                return frozenset(names)
            case _:
                return frozenset(names)


def adapt_member(stmt: ast.stmt, path: Path) -> PythonMemberNode:
    """Adapt one class body statement.

    Never raises for unsupported statements; they become OTHER.
    """
    span = make_span(stmt, path)

    match stmt:
        case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name):
            decorators = decorator_names(stmt.decorator_list)
            return PythonMemberNode(
                kind=_function_kind(name, decorators),
                span=span,
                modifiers=name_modifiers(name) | _decorator_modifiers(decorators),
                name=name,
            )

        case ast.Assign(targets=[ast.Name(id=name), *_]):
            return PythonMemberNode(
                kind=NodeKind.FIELD, span=span, modifiers=name_modifiers(name), name=name
            )

        case ast.AnnAssign(target=ast.Name(id=name), annotation=annotation):
            modifiers = name_modifiers(name)
            qualifiers = type_qualifiers(annotation)
            if "Final" in qualifiers:
                modifiers |= {Modifier.READONLY}
            if "ClassVar" in qualifiers:
                modifiers |= {Modifier.STATIC}
            return PythonMemberNode(kind=NodeKind.FIELD, span=span, modifiers=modifiers, name=name)

    return PythonMemberNode(kind=NodeKind.OTHER, span=span)


def adapt_class(node: ast.ClassDef, path: Path) -> PythonClassNode:
    """Adapt class definition with its direct members."""
    return PythonClassNode(
        name=node.name,
        span=make_span(node, path),
        members=tuple(adapt_member(stmt, path) for stmt in node.body),
        modifiers=name_modifiers(node.name),
    )


def adapt_call(node: ast.Call, path: Path) -> PythonCallNode:
    """Adapt call expression.

    `*args` splats are positional; keywords and `**kwargs` splats are named.
    """
    positional = [(arg, False, None) for arg in node.args]
    keywords = [(kw, True, kw.arg) for kw in node.keywords]

    # f(a=1, *rest) is legal, so merge by position
    ordered = sorted(positional + keywords, key=lambda item: (item[0].lineno, item[0].col_offset))

    return PythonCallNode(
        span=make_span(node, path),
        arguments=tuple(
            Argument(is_named=is_named, span=make_span(arg, path), name=name)
            for arg, is_named, name in ordered
        ),
    )


def _function_kind(name: str, decorators: frozenset[str]) -> NodeKind:
    if name in CONSTRUCTOR_NAMES:
        return NodeKind.CONSTRUCTOR
    if decorators & (PROPERTY_DECORATORS | PROPERTY_ACCESSORS):
        return NodeKind.PROPERTY
    return NodeKind.METHOD


def _decorator_modifiers(decorators: frozenset[str]) -> frozenset[Modifier]:
    modifiers: set[Modifier] = set()
    if decorators & STATIC_DECORATORS:
        modifiers.add(Modifier.STATIC)
    if "abstractmethod" in decorators:
        modifiers.add(Modifier.ABSTRACT)
    return frozenset(modifiers)
