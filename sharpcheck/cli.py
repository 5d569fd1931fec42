#!/usr/bin/env python3
"""
sharpcheck CLI - Entry point for pip-installed package.

Handles config discovery, obtains the file to analyze, runs the analyzer
and renders the report.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .analyzer import Analyzer
from .config import ConfigError, enabled_rules, init_config, load_config
from .document import DocumentLoadError, load_document
from .logger import configure_logging
from .report import log_report, show_rules
from .types import NC, RED

logger = logging.getLogger(__name__)

PROMPT = "Enter the full path to the C# file (.cs) you want to analyze:"

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def prompt_for_path() -> str:
    """Ask for the file path interactively, dropping surrounding quotes."""
    try:
        answer = input(PROMPT + "\n")
    except EOFError:
        return ""
    return answer.strip().strip('"')


def _log_error(message: str, color: bool) -> None:
    logger.error(f"{RED}{message}{NC}" if color else message)


def run_analysis(path: str, config: dict, color: bool = True) -> int:
    """Load one file, analyze it and print the report. Returns exit code."""
    if not path:
        _log_error("Error: File not found.", color)
        return EXIT_ERROR
    try:
        document = load_document(path)
    except DocumentLoadError as e:
        _log_error(f"Error: {e}", color)
        return EXIT_ERROR

    report = Analyzer(enabled_rules(config)).analyze(document)
    return log_report(report, color=color)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sharpcheck",
        description="sharpcheck - heuristic style and quality checks for a C# source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sharpcheck Program.cs       Analyze a file
  sharpcheck                  Prompt for the file path
  sharpcheck --show           Show the rule catalog
  sharpcheck --init           Create sharpcheck.yaml
  sharpcheck --validate       Validate the config file
        """,
    )
    parser.add_argument("path", nargs="?", help="C# file (.cs) to analyze")
    parser.add_argument("--version", "-v", action="version", version=f"sharpcheck {__version__}")
    parser.add_argument("--config", "-c", help="Path to sharpcheck.yaml")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--show", action="store_true", help="Show enabled rules")
    parser.add_argument("--validate", action="store_true", help="Validate config and exit")
    parser.add_argument("--init", action="store_true", help="Initialize sharpcheck.yaml")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    # Handle init (doesn't need config)
    if args.init:
        sys.exit(EXIT_OK if init_config() else EXIT_ERROR)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as e:
        logger.error("Config error: %s", e)
        sys.exit(EXIT_ERROR)

    configure_logging(config.get("log_level"))
    color = bool(config.get("color", True)) and not args.no_color

    if args.validate:
        logger.info("sharpcheck config is valid")
        sys.exit(EXIT_OK)

    if args.show:
        show_rules(enabled_rules(config), color=color)
        sys.exit(EXIT_OK)

    path = args.path if args.path is not None else prompt_for_path()
    sys.exit(run_analysis(path, config, color=color))


if __name__ == "__main__":
    main()
