"""Report rendering for the sharpcheck CLI."""

import logging
from collections.abc import Iterable

from .types import BLUE, GREEN, NC, RED, AnalysisReport

logger = logging.getLogger(__name__)

REPORT_HEADER = "--- Analysis Report ---"
SUCCESS_MESSAGE = "All requirements are met!"
FAILED_PREFIX = "- [Failed] "


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{NC}" if enabled else text


def render_report(report: AnalysisReport, color: bool = True) -> list[str]:
    """Render a report as output lines: one per violation, or one success line."""
    lines = [REPORT_HEADER, ""]
    if report.passed:
        lines.append(_paint(SUCCESS_MESSAGE, GREEN, color))
        return lines
    for violation in report:
        lines.append(_paint(f"{FAILED_PREFIX}{violation.message}", RED, color))
    return lines


def log_report(report: AnalysisReport, color: bool = True) -> int:
    """Print a report and return exit code (0 passed, 1 violations)."""
    for line in render_report(report, color):
        logger.info(line)
    return 0 if report.passed else 1


def show_rules(rule_classes: Iterable[type], color: bool = True) -> None:
    """Display the rule catalog."""
    logger.info("=== sharpcheck rules ===")
    for cls in rule_classes:
        tag = _paint(f"[{cls.RULE_ID:>2}]", BLUE, color)
        logger.info(f"  {tag} {cls.RULE_NAME}")
        logger.info(f"       {cls.DESCRIPTION}")
