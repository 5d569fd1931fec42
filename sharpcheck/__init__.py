"""
sharpcheck - Heuristic style and quality gate for a single C# source file.

Ten text-based rules, one report: empty means every requirement is met.
"""

__version__ = "1.0.0"

from .analyzer import Analyzer, analyze, analyze_text
from .document import DocumentLoadError, SourceDocument, SourceLine, load_document
from .types import AnalysisReport, Violation

__all__ = [
    "Analyzer",
    "analyze",
    "analyze_text",
    "AnalysisReport",
    "Violation",
    "SourceDocument",
    "SourceLine",
    "load_document",
    "DocumentLoadError",
    "__version__",
]
