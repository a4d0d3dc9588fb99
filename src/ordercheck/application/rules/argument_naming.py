"""Argument naming rule (VCT0001, VCT0002)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordercheck.application.rules._base import BaseRule
from ordercheck.application.rules.descriptors import (
    MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED,
    SINGLE_ARGUMENT_SHOULD_NOT_BE_NAMED,
)
from ordercheck.domain.model.diagnostic import Diagnostic
from ordercheck.domain.model.enums import NodeKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ordercheck.domain.ports.syntax import ArgumentNode, SyntaxNode


class ArgumentNamingRule(BaseRule):
    """A lone argument is positional; with two or more, every argument is named."""

    node_kind = NodeKind.INVOCATION
    supported_diagnostics = (
        MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED,
        SINGLE_ARGUMENT_SHOULD_NOT_BE_NAMED,
    )

    def analyze(self, node: SyntaxNode) -> tuple[Diagnostic, ...]:
        """Check argument naming of one invocation.

        Args:
            node: Invocation node

        Returns:
            Diagnostics in argument order
        """
        return self.check_arguments(getattr(node, "arguments", None))

    def check_arguments(self, arguments: Sequence[ArgumentNode] | None) -> tuple[Diagnostic, ...]:
        """Check an argument list.

        Args:
            arguments: Arguments in source order, None if no argument list

        Returns:
            One diagnostic per offending argument
        """
        if not arguments:
            return ()

        if len(arguments) == 1:
            (only,) = arguments
            if only.is_named:
                return (Diagnostic.create(SINGLE_ARGUMENT_SHOULD_NOT_BE_NAMED, only.span),)
            return ()

        return tuple(
            Diagnostic.create(MULTIPLE_ARGUMENTS_SHOULD_BE_NAMED, arg.span)
            for arg in arguments
            if not arg.is_named
        )
