"""Base rule class.

A rule registers for one node kind and turns a single node into
diagnostics. Rules keep no state between calls, so one instance can
serve concurrent analyses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Self

if TYPE_CHECKING:
    from ordercheck.domain.model.configuration import AnalyzerConfig
    from ordercheck.domain.model.descriptor import DiagnosticDescriptor
    from ordercheck.domain.model.diagnostic import Diagnostic
    from ordercheck.domain.model.enums import NodeKind
    from ordercheck.domain.ports.syntax import SyntaxNode


class BaseRule(ABC):
    """Base class for syntax node rules.

    Concrete rules must:
    1. Set `node_kind` and `supported_diagnostics` class attributes
    2. Implement `analyze()`

    Example:
        class NoEmptyClass(BaseRule):
            node_kind = NodeKind.TYPE_DECLARATION
            supported_diagnostics = (EMPTY_CLASS,)

            def analyze(self, node: SyntaxNode) -> tuple[Diagnostic, ...]:
                if node.members:
                    return ()
                return (Diagnostic.create(EMPTY_CLASS, node.span),)
    """

    node_kind: ClassVar[NodeKind]
    """Node kind the engine dispatches to this rule."""

    supported_diagnostics: ClassVar[tuple[DiagnosticDescriptor, ...]]
    """Every descriptor this rule can emit."""

    @abstractmethod
    def analyze(self, node: SyntaxNode) -> tuple[Diagnostic, ...]:
        """Analyze one node.

        Must not raise on unexpected node shapes.

        Args:
            node: Node of kind `node_kind`

        Returns:
            Diagnostics in source order (empty if none)
        """

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Self | None:
        """Create rule if at least one of its descriptors is enabled.

        Args:
            config: Analyzer configuration

        Returns:
            Rule instance if enabled, None if all its ids are disabled
        """
        if any(config.is_enabled(d) for d in cls.supported_diagnostics):
            return cls()
        return None
