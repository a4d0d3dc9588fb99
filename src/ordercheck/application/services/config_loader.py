"""Configuration loading from pyproject.toml.

Reads the [tool.ordercheck] table:

    [tool.ordercheck]
    disable = ["VCT0001"]
    exclude = ["build/*"]
    analyze-generated = false
    jobs = 4

    [tool.ordercheck.severity]
    VCT0010 = "error"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ordercheck.application.rules.descriptors import get_descriptor
from ordercheck.domain.exceptions.configuration import ConfigurationError
from ordercheck.domain.model.configuration import AnalyzerConfig
from ordercheck.domain.model.enums import Severity

logger = logging.getLogger(__name__)

CONFIG_FILE = "pyproject.toml"
TOOL_TABLE = "ordercheck"
_KNOWN_KEYS = frozenset({"disable", "exclude", "analyze-generated", "jobs", "severity"})


def find_config(start: Path) -> Path | None:
    """Find nearest pyproject.toml at or above start.

    Args:
        start: File or directory to search from

    Returns:
        Path to pyproject.toml, None if not found
    """
    directory = start if start.is_dir() else start.parent
    for candidate in (directory, *directory.parents):
        config_path = candidate / CONFIG_FILE
        if config_path.is_file():
            return config_path
    return None


def load_config(path: Path) -> AnalyzerConfig:
    """Load configuration from a pyproject.toml.

    Args:
        path: Path to pyproject.toml

    Returns:
        AnalyzerConfig (defaults if the file has no [tool.ordercheck] table)

    Raises:
        ConfigurationError: If the file is unreadable or contains invalid values
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(str(path), "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("%s has no [tool.%s] table, using defaults", path, TOOL_TABLE)
        return AnalyzerConfig()

    logger.debug("loading configuration from %s", path)
    return config_from_mapping(table)


def config_from_mapping(table: dict[str, Any]) -> AnalyzerConfig:
    """Build AnalyzerConfig from a [tool.ordercheck] table.

    Raises:
        ConfigurationError: On unknown keys, rule ids, or severities
    """
    unknown = set(table) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(", ".join(sorted(unknown)), "unknown option")

    disabled = _string_list(table, "disable")
    for rule_id in disabled:
        get_descriptor(rule_id)

    severity_table = table.get("severity", {})
    if not isinstance(severity_table, dict):
        raise ConfigurationError("severity", "must be a table of rule id = level")
    severities = parse_severities(severity_table.items())

    analyze_generated = table.get("analyze-generated", False)
    if not isinstance(analyze_generated, bool):
        raise ConfigurationError("analyze-generated", "must be true or false")

    jobs = table.get("jobs", 1)
    if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
        raise ConfigurationError("jobs", f"must be an integer >= 1, got {jobs!r}")

    return AnalyzerConfig(
        disabled_rules=frozenset(disabled),
        severity_overrides=severities,
        analyze_generated=analyze_generated,
        exclude=tuple(_string_list(table, "exclude")),
        jobs=jobs,
    )


def parse_severities(items: Any) -> dict[str, Severity]:
    """Parse (rule id, level name) pairs.

    Raises:
        ConfigurationError: On unknown rule ids or level names
    """
    severities: dict[str, Severity] = {}
    for rule_id, level in items:
        descriptor = get_descriptor(rule_id)
        if not isinstance(level, str):
            raise ConfigurationError(f"severity.{rule_id}", "level must be a string")
        try:
            severities[descriptor.id] = Severity.from_name(level)
        except ValueError as e:
            raise ConfigurationError(f"severity.{rule_id}", str(e)) from e
    return severities


def _string_list(table: dict[str, Any], key: str) -> list[str]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(key, "must be a list of strings")
    return value
