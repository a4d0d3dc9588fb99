"""Host adapters turning concrete syntax trees into the syntax protocols."""

from ordercheck.infrastructure.adapters.ast_parser import PythonSourceParser
from ordercheck.infrastructure.adapters.python_ast import (
    PythonCallNode,
    PythonClassNode,
    PythonMemberNode,
    PythonSyntaxTree,
)

__all__ = [
    "PythonCallNode",
    "PythonClassNode",
    "PythonMemberNode",
    "PythonSourceParser",
    "PythonSyntaxTree",
]
