"""ordercheck - member ordering and argument naming rules over syntax trees."""

__version__ = "0.1.0"

from ordercheck.application.services.engine import AnalysisEngine

__all__ = ["AnalysisEngine", "__version__"]
