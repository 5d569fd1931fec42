"""Subroutine spacing rule."""

import logging

from ..document import SourceDocument
from ..patterns import is_subroutine_signature
from ..spans import find_body_end
from ..types import Violation

logger = logging.getLogger(__name__)

SCOPE_CLOSE = "}"


class SubroutineSpacingRule:
    """Rule 8: every subroutine is followed by two empty lines.

    A body closing right before the enclosing scope's ``}`` is exempt.
    Only the two lines after the body are inspected. Unterminated bodies,
    bodies closing on the last line, and bodies followed by a single blank
    line then end-of-file are skipped.
    """

    RULE_ID = 8
    RULE_NAME = "subroutine-spacing"
    DESCRIPTION = "Every subroutine has 2 empty lines after it"

    def check(self, document: SourceDocument) -> list[Violation]:
        raw = document.raw_lines
        total = len(raw)
        violations: list[Violation] = []

        for index, line in enumerate(raw):
            if not is_subroutine_signature(line):
                continue
            end = find_body_end(raw, index)
            if end is None:
                logger.debug("Unterminated body for signature on line %d", index + 1)
                continue
            if end + 1 >= total:
                continue

            after1 = raw[end + 1].strip()
            after2 = raw[end + 2].strip() if end + 2 < total else None
            if after1 == SCOPE_CLOSE:
                continue
            if after1 == "" and after2 is None:
                continue
            if after1 == "" and after2 == "":
                continue

            violations.append(Violation(
                rule=self.RULE_ID,
                message=f"Rule 8 Violation: Method ending at line {end + 1}"
                        " does not have 2 empty lines after it.",
                line=end + 1,
            ))
        return violations
