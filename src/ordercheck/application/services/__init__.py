"""Application services."""

from ordercheck.application.services.config_loader import find_config, load_config
from ordercheck.application.services.engine import AnalysisEngine

__all__ = [
    "AnalysisEngine",
    "find_config",
    "load_config",
]
