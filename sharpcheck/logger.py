"""Logging setup for the sharpcheck CLI.

Report output goes through the ``sharpcheck`` logger hierarchy to stdout.
The level applies to diagnostics; ``sharpcheck.report`` always emits INFO.

Configuration via environment variables:
  SHARPCHECK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
  SHARPCHECK_LOG_FORMAT: "json" for single-line JSON records (default: plain)
"""

from __future__ import annotations

import json
import logging
import os
import sys

ROOT_LOGGER = "sharpcheck"
# User-facing report output, never filtered by the diagnostic level
REPORT_LOGGER = "sharpcheck.report"


class _JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        return json.dumps(entry, default=str, ensure_ascii=False)


_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    level_name = (level or os.environ.get("SHARPCHECK_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the sharpcheck root logger (idempotent).

    Args:
        level: Level name or number. Falls back to SHARPCHECK_LOG_LEVEL.

    Returns:
        The configured ``sharpcheck`` logger.
    """
    global _CONFIGURED  # noqa: PLW0603
    root = logging.getLogger(ROOT_LOGGER)
    resolved = _resolve_level(level)
    root.setLevel(resolved)
    logging.getLogger(REPORT_LOGGER).setLevel(min(resolved, logging.INFO))
    if _CONFIGURED:
        return root
    _CONFIGURED = True

    handler = logging.StreamHandler(sys.stdout)
    if os.environ.get("SHARPCHECK_LOG_FORMAT", "").lower() == "json":
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root
