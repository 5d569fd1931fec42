"""Analyzer: runs the rule catalog over one document and builds the report."""

import logging
from collections.abc import Iterable

from .document import SourceDocument
from .rules import ALL_RULE_CLASSES
from .types import AnalysisReport, Violation

logger = logging.getLogger(__name__)


class Analyzer:
    """Runs rules in ascending rule order and concatenates their output.

    Every rule runs regardless of what earlier rules reported. Rules are
    instantiated per run and share nothing but the read-only document.
    """

    def __init__(self, rule_classes: Iterable[type] | None = None) -> None:
        classes = ALL_RULE_CLASSES if rule_classes is None else tuple(rule_classes)
        self.rule_classes = tuple(sorted(classes, key=lambda cls: cls.RULE_ID))

    def analyze(self, document: SourceDocument) -> AnalysisReport:
        violations: list[Violation] = []
        for rule_cls in self.rule_classes:
            found = rule_cls().check(document)
            logger.debug("Rule %d (%s): %d violation(s)",
                         rule_cls.RULE_ID, rule_cls.RULE_NAME, len(found))
            violations.extend(found)
        return AnalysisReport(violations=tuple(violations))


def analyze(document: SourceDocument) -> AnalysisReport:
    """Run the full ten-rule catalog on a document."""
    return Analyzer().analyze(document)


def analyze_text(content: str) -> AnalysisReport:
    """Build a document from file content and run the full catalog."""
    return analyze(SourceDocument.from_text(content))
