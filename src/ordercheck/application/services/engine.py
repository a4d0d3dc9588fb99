"""Analysis engine: dispatches syntax nodes to rules.

Mirrors a compiler host's node-action registration: each rule registers
for one NodeKind, the engine walks a tree once and hands every matching
node to the rules registered for it.
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from ordercheck.application.rules._registry import rules_from_config
from ordercheck.application.rules.descriptors import get_descriptor
from ordercheck.domain.model.configuration import AnalyzerConfig
from ordercheck.domain.model.result import AnalysisReport, FileResult
from ordercheck.infrastructure.adapters.ast_parser import PythonSourceParser

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ordercheck.application.rules._base import BaseRule
    from ordercheck.domain.model.descriptor import DiagnosticDescriptor
    from ordercheck.domain.model.diagnostic import Diagnostic
    from ordercheck.domain.model.enums import NodeKind
    from ordercheck.domain.ports.source_parser import SourceParserPort
    from ordercheck.domain.ports.syntax import SyntaxTree

logger = logging.getLogger(__name__)

# Directories never entered during discovery
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


class AnalysisEngine:
    """Runs rules over syntax trees and applies configuration.

    Stateless between trees: every call works on its own lists, so one
    engine may analyze several files concurrently.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        *,
        rules: Iterable[BaseRule] | None = None,
        parser: SourceParserPort | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            config: Analyzer configuration (defaults if None)
            rules: Rules to run (rules enabled by config if None)
            parser: Source parser for file analysis (Python parser if None)

        Raises:
            UnknownRuleError: If config mentions an id that no rule declares
                and the registry does not know
        """
        self._config = config if config is not None else AnalyzerConfig()
        self._rules = tuple(rules) if rules is not None else rules_from_config(self._config)
        self._descriptors = _collect_descriptors(self._rules)

        # FAIL-FIRST: every configured id must exist
        for rule_id in sorted(self._config.rule_ids):
            self._descriptor(rule_id)

        self._parser = parser if parser is not None else PythonSourceParser()
        self._dispatch = _build_dispatch(self._rules)

    @property
    def config(self) -> AnalyzerConfig:
        """Active configuration."""
        return self._config

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        """Active rules."""
        return self._rules

    def analyze_tree(self, tree: SyntaxTree) -> FileResult:
        """Analyze one syntax tree.

        Args:
            tree: Host tree

        Returns:
            FileResult with diagnostics in emission order,
            or skipped=True for generated code
        """
        if tree.is_generated and not self._config.analyze_generated:
            logger.debug("skipping generated file %s", tree.path)
            return FileResult(path=tree.path, diagnostics=(), skipped=True)

        raw: list[Diagnostic] = []
        for node in tree.walk():
            for rule in self._dispatch.get(node.kind, ()):
                raw.extend(rule.analyze(node))

        diagnostics = self._apply_config(raw, tree.suppressions)
        logger.debug("%s: %d diagnostics", tree.path, len(diagnostics))
        return FileResult(path=tree.path, diagnostics=diagnostics)

    def analyze_source(self, source: str, path: Path = Path("<string>")) -> FileResult:
        """Parse and analyze source text.

        Raises:
            ParsingError: If source cannot be parsed
        """
        return self.analyze_tree(self._parser.parse_source(source, path))

    def analyze_file(self, path: Path) -> FileResult:
        """Parse and analyze one file.

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        logger.debug("analyzing %s", path)
        return self.analyze_tree(self._parser.parse_file(path))

    def analyze_paths(self, paths: Iterable[Path]) -> AnalysisReport:
        """Analyze files and directories.

        Directories are expanded recursively. With config.jobs > 1 files
        are analyzed on a thread pool; results keep discovery order.

        Args:
            paths: Files and directories

        Returns:
            AnalysisReport

        Raises:
            ParsingError: If any file cannot be read or parsed
        """
        files = self.discover(paths)
        jobs = self._config.jobs

        if jobs == 1 or len(files) <= 1:
            results = [self.analyze_file(path) for path in files]
        else:
            logger.debug("analyzing %d files with %d workers", len(files), jobs)
            with ThreadPoolExecutor(max_workers=jobs) as pool:
                results = list(pool.map(self.analyze_file, files))

        return AnalysisReport(files=tuple(results))

    def discover(self, paths: Iterable[Path]) -> tuple[Path, ...]:
        """Expand directories into source files.

        Explicit file paths are kept as given (even if excluded).
        Duplicates are dropped, first occurrence wins.

        Args:
            paths: Files and directories

        Returns:
            Files in deterministic order
        """
        found: dict[Path, None] = {}

        for path in paths:
            if not path.is_dir():
                found.setdefault(path, None)
                continue

            candidates = sorted(
                file
                for suffix in self._parser.suffixes
                for file in path.rglob(f"*{suffix}")
                if file.is_file()
            )
            for file in candidates:
                relative = file.relative_to(path)
                if DEFAULT_EXCLUDES.intersection(relative.parts[:-1]):
                    continue
                if self._is_excluded(file, relative):
                    logger.debug("excluded %s", file)
                    continue
                found.setdefault(file, None)

        return tuple(found)

    def _is_excluded(self, file: Path, relative: Path) -> bool:
        return any(
            fnmatch.fnmatch(file.as_posix(), pattern) or fnmatch.fnmatch(relative.as_posix(), pattern)
            for pattern in self._config.exclude
        )

    def _descriptor(self, rule_id: str) -> DiagnosticDescriptor:
        """Descriptor declared by an active rule, else from the registry.

        Raises:
            UnknownRuleError: If neither knows rule_id
        """
        descriptor = self._descriptors.get(rule_id)
        if descriptor is None:
            return get_descriptor(rule_id)
        return descriptor

    def _apply_config(
        self,
        diagnostics: Iterable[Diagnostic],
        suppressions: Mapping[int, frozenset[str] | None],
    ) -> tuple[Diagnostic, ...]:
        """Drop disabled and suppressed diagnostics, apply severity overrides."""
        kept: list[Diagnostic] = []

        for diagnostic in diagnostics:
            descriptor = self._descriptor(diagnostic.rule_id)
            if not self._config.is_enabled(descriptor):
                continue

            line = diagnostic.span.line
            if line in suppressions:
                suppressed = suppressions[line]
                if suppressed is None or diagnostic.rule_id in suppressed:
                    continue

            kept.append(diagnostic.with_severity(self._config.severity_for(descriptor)))

        return tuple(kept)


def _collect_descriptors(rules: Iterable[BaseRule]) -> dict[str, DiagnosticDescriptor]:
    """Index descriptors declared by rules by id."""
    return {d.id: d for rule in rules for d in rule.supported_diagnostics}


def _build_dispatch(rules: Iterable[BaseRule]) -> dict[NodeKind, tuple[BaseRule, ...]]:
    """Group rules by the node kind they register for."""
    dispatch: dict[NodeKind, list[BaseRule]] = {}
    for rule in rules:
        dispatch.setdefault(rule.node_kind, []).append(rule)
    return {kind: tuple(group) for kind, group in dispatch.items()}
