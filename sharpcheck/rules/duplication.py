"""DRY rule: repeated blocks of three consecutive lines."""

import logging

from ..document import SourceDocument
from ..patterns import is_brace_only
from ..types import Violation

logger = logging.getLogger(__name__)

WINDOW_SIZE = 3
MIN_BLOCK_LENGTH = 10


class DuplicateBlockRule:
    """Rule 4: flag the first 3-line block that repeats an earlier one.

    Lines are trimmed and concatenated. Blocks shorter than ten characters
    or made only of braces are ignored. The scan stops at the first
    duplicate, so a run reports at most one violation.
    """

    RULE_ID = 4
    RULE_NAME = "duplicate-block"
    DESCRIPTION = "No repeated blocks of 3+ lines (DRY)"

    def check(self, document: SourceDocument) -> list[Violation]:
        stripped = [line.stripped for line in document.lines]
        seen: set[str] = set()

        for start in range(len(stripped) - WINDOW_SIZE + 1):
            block = "".join(stripped[start:start + WINDOW_SIZE])
            if len(block) < MIN_BLOCK_LENGTH:
                continue
            if block not in seen:
                seen.add(block)
                continue
            if is_brace_only(block):
                continue
            number = start + 1
            logger.debug("Duplicate block at line %d", number)
            return [Violation(
                rule=self.RULE_ID,
                message=f"Rule 4 Warning (DRY): Potential repetitive code detected"
                        f" starting at line {number}.",
                line=number,
            )]
        return []
