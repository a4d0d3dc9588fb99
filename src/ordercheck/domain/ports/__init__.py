"""Ports: contracts the host tree and parsers implement."""

from ordercheck.domain.ports.source_parser import SourceParserPort
from ordercheck.domain.ports.syntax import (
    ArgumentNode,
    InvocationNode,
    SyntaxNode,
    SyntaxTree,
    TypeDeclarationNode,
)

__all__ = [
    "ArgumentNode",
    "InvocationNode",
    "SourceParserPort",
    "SyntaxNode",
    "SyntaxTree",
    "TypeDeclarationNode",
]
