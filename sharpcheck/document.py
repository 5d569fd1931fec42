"""Source document model: the analyzed file as ordered lines plus full text."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Refuse anything that is clearly not a hand-written source file
MAX_FILE_SIZE = 5_000_000

# Only CR, LF and CRLF end a line; form feeds and Unicode separators stay in it
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class DocumentLoadError(Exception):
    """The source file could not be acquired as text."""


@dataclass(frozen=True)
class SourceLine:
    """One line of the analyzed file."""

    number: int  # 1-based
    raw: str

    @property
    def stripped(self) -> str:
        return self.raw.strip()

    @property
    def is_blank(self) -> bool:
        return self.raw.strip() == ""


@dataclass(frozen=True)
class SourceDocument:
    """Immutable view of the analyzed file.

    ``lines`` keeps file order and exact text; trimming is done per use.
    ``text`` is the full content, for searches that ignore line boundaries.
    """

    lines: tuple[SourceLine, ...]
    text: str

    @classmethod
    def from_text(cls, content: str) -> "SourceDocument":
        """Build a document from already-read file content."""
        pieces = LINE_BREAK_RE.split(content)
        if pieces[-1] == "":
            pieces.pop()
        lines = tuple(
            SourceLine(number=i, raw=raw) for i, raw in enumerate(pieces, 1)
        )
        return cls(lines=lines, text=content)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def raw_lines(self) -> list[str]:
        return [line.raw for line in self.lines]

    def line(self, number: int) -> SourceLine:
        """Return the line with the given 1-based number."""
        if number < 1 or number > len(self.lines):
            raise IndexError(f"line {number} out of range 1..{len(self.lines)}")
        return self.lines[number - 1]


def load_document(path: Path | str) -> SourceDocument:
    """Read a source file and build its document.

    Raises:
        DocumentLoadError: the file is missing, too large, unreadable or
            not valid UTF-8 text.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentLoadError(f"File not found: {path}")

    try:
        size = path.stat().st_size
        if size > MAX_FILE_SIZE:
            raise DocumentLoadError(
                f"File too large: {path} ({size} bytes, max {MAX_FILE_SIZE})"
            )
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e

    logger.debug("Loaded %s (%d chars)", path.name, len(content))
    return SourceDocument.from_text(content)
