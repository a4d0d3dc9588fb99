"""Domain model value objects."""

from ordercheck.domain.model.argument import Argument
from ordercheck.domain.model.configuration import AnalyzerConfig
from ordercheck.domain.model.descriptor import DiagnosticDescriptor
from ordercheck.domain.model.diagnostic import Diagnostic
from ordercheck.domain.model.enums import (
    MemberKind,
    Modifier,
    NodeKind,
    RuleCategory,
    Severity,
    VisibilityScope,
)
from ordercheck.domain.model.member import ClassifiedMember
from ordercheck.domain.model.result import AnalysisReport, FileResult
from ordercheck.domain.model.span import SourceSpan

__all__ = [
    "AnalysisReport",
    "AnalyzerConfig",
    "Argument",
    "ClassifiedMember",
    "Diagnostic",
    "DiagnosticDescriptor",
    "FileResult",
    "MemberKind",
    "Modifier",
    "NodeKind",
    "RuleCategory",
    "Severity",
    "SourceSpan",
    "VisibilityScope",
]
