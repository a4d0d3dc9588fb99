"""Command line interface.

Usage:
    ordercheck src/ tests/
    ordercheck --format json --disable VCT0001 app.py
    ordercheck --severity VCT0010=error --jobs 4 .
    ordercheck --list-rules

Exit status:
    0  no diagnostics
    1  at least one diagnostic
    2  parsing or configuration error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from ordercheck import __version__
from ordercheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from ordercheck.application.rules.descriptors import ALL_DESCRIPTORS, get_descriptor
from ordercheck.application.services.config_loader import (
    find_config,
    load_config,
    parse_severities,
)
from ordercheck.application.services.engine import AnalysisEngine
from ordercheck.domain.exceptions import ConfigurationError, OrderCheckError
from ordercheck.domain.model.configuration import AnalyzerConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ordercheck.application.reporters import BaseReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2

FORMATS = ("text", "json", "console")


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="ordercheck",
        description="Check class member ordering and call-site argument naming.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to analyze (default: current directory)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="pyproject.toml to read [tool.ordercheck] from (default: nearest)",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="ID",
        help="Disable a rule id (repeatable)",
    )
    parser.add_argument(
        "--severity",
        action="append",
        default=[],
        metavar="ID=LEVEL",
        help="Override severity of a rule id: error, warning or info (repeatable)",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=None,
        help="Worker threads for multi-file analysis",
    )
    parser.add_argument(
        "--include-generated",
        action="store_true",
        help="Also analyze files marked as generated",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="Print available rules and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> AnalyzerConfig:
    """Merge file configuration with command line overrides.

    Raises:
        ConfigurationError: On invalid values
    """
    config_path = args.config
    if config_path is None:
        config_path = find_config(args.paths[0] if args.paths else Path.cwd())

    base = load_config(config_path) if config_path is not None else AnalyzerConfig()

    for rule_id in args.disable:
        get_descriptor(rule_id)

    pairs: list[tuple[str, str]] = []
    for item in args.severity:
        rule_id, sep, level = item.partition("=")
        if not sep:
            raise ConfigurationError("--severity", f"expected ID=LEVEL, got '{item}'")
        pairs.append((rule_id.strip(), level.strip()))

    if args.jobs is not None and args.jobs < 1:
        raise ConfigurationError("--jobs", f"must be >= 1, got {args.jobs}")

    overrides = AnalyzerConfig(
        disabled_rules=frozenset(args.disable),
        severity_overrides=parse_severities(pairs),
        analyze_generated=args.include_generated,
    )
    return base.merged(overrides, jobs=args.jobs)


def make_reporter(fmt: str, output: TextIO) -> BaseReporter:
    """Create reporter for output format."""
    match fmt:
        case "json":
            return JSONReporter(output)
        case "console":
            return ConsoleReporter(output)
    return PlainTextReporter(output)


def list_rules(output: TextIO) -> None:
    """Print the descriptor registry."""
    for descriptor in ALL_DESCRIPTORS:
        state = "enabled" if descriptor.enabled_by_default else "disabled"
        print(
            f"{descriptor.id}  {descriptor.category.value:<8}  "
            f"{descriptor.default_severity.name.lower():<7}  {state:<8}  {descriptor.title}",
            file=output,
        )
        if descriptor.description:
            print(f"        {descriptor.description}", file=output)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run ordercheck.

    Args:
        argv: Arguments (default: sys.argv[1:])
        stdout: Report stream (default: sys.stdout)
        stderr: Error stream (default: sys.stderr)

    Returns:
        Exit status
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=err,
    )

    if args.list_rules:
        list_rules(out)
        return EXIT_OK

    try:
        engine = AnalysisEngine(config_from_args(args))
        report = engine.analyze_paths(args.paths)
    except OrderCheckError as e:
        logger.debug("analysis aborted", exc_info=True)
        print(f"ordercheck: error: {e}", file=err)
        return EXIT_ERROR

    make_reporter(args.format, out).report(report)
    return EXIT_DIAGNOSTICS if report.diagnostic_count else EXIT_OK
