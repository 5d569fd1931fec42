"""Shared test fixtures for sharpcheck tests."""

import logging
import sys
import textwrap
from pathlib import Path

import pytest

from sharpcheck.document import SourceDocument


class _StdoutHandler(logging.Handler):
    """A handler that always writes to the *current* sys.stdout.

    Unlike StreamHandler(sys.stdout), this resolves sys.stdout at emit-time
    so it works with pytest's capsys fixture.
    """

    def emit(self, record):
        try:
            msg = self.format(record)
            sys.stdout.write(msg + "\n")
            sys.stdout.flush()
        except Exception:
            self.handleError(record)


@pytest.fixture(autouse=True)
def _setup_logging(monkeypatch):
    """Route all sharpcheck loggers to stdout so capsys can capture them."""
    # Keep the CLI from installing its own stream handler
    monkeypatch.setattr("sharpcheck.logger._CONFIGURED", True)

    handler = _StdoutHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger("sharpcheck")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    yield

    root_logger.removeHandler(handler)


@pytest.fixture
def make_doc():
    """Build a document from an indented triple-quoted snippet."""
    def _make(source: str) -> SourceDocument:
        return SourceDocument.from_text(textwrap.dedent(source).strip("\n"))
    return _make


COMPLIANT_SOURCE = """\
using System;
using System.Collections.Generic;

namespace Demo
{
    // Application entry point and helpers.
    public class Program
    {
        private static readonly Bitmap Logo = LoadLogo();
        private const int Limit = 10;

        // Starts the program.
        public static void Main(string[] args)
        {
            List<int> values = new List<int>();
            foreach (int value in values)
            {
                Console.WriteLine(value);
            }
        }


        // Sums the given values.
        public int Sum(List<int> values)
        {
            int total = 0;
            for (int i = 0; i < values.Count; i++)
            {
                total += values[i];
            }
            return total;
        }
    }
}
"""


@pytest.fixture
def compliant_source():
    """C# source satisfying all ten rules."""
    return COMPLIANT_SOURCE


@pytest.fixture
def compliant_doc():
    return SourceDocument.from_text(COMPLIANT_SOURCE)


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run in an empty directory with an empty home (no config discovery)."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: home)
    return tmp_path
