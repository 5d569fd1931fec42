"""Magic number rule."""

from ..document import SourceDocument
from ..patterns import (
    first_magic_literal,
    has_assignment_or_comparison,
    is_comment_line,
    is_const_declaration,
)
from ..types import Violation


class MagicNumberRule:
    """Rule 7: no unexplained integer literals in assignments or comparisons.

    Literals 0, 1 and -1 are allowed. Only the first qualifying literal of a
    line is reported. Array indices and loop bounds are flagged too; the
    check is textual.
    """

    RULE_ID = 7
    RULE_NAME = "magic-number"
    DESCRIPTION = "No useless literals (magic numbers)"

    def check(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        for line in document.lines:
            stripped = line.stripped
            if is_comment_line(stripped) or is_const_declaration(stripped):
                continue
            if not has_assignment_or_comparison(stripped):
                continue
            literal = first_magic_literal(stripped)
            if literal is None:
                continue
            violations.append(Violation(
                rule=self.RULE_ID,
                message=f"Rule 7 Violation: Potential magic number '{literal}' found on line"
                        f" {line.number}. Consider using a variable or const.",
                line=line.number,
            ))
        return violations
