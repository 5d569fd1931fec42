"""Documentation rule: classes and methods carry a preceding comment."""

from ..document import SourceDocument
from ..patterns import is_class_declaration, is_documentation_line, is_subroutine_signature
from ..types import Violation


class DocumentationRule:
    """Rule 9: a comment directly precedes every class and method.

    Only the line immediately above is inspected. It counts if it starts
    with ``//`` or ends with ``*/``.
    """

    RULE_ID = 9
    RULE_NAME = "documentation"
    DESCRIPTION = "Classes and methods are documented"

    def check(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        previous: str | None = None

        for line in document.lines:
            stripped = line.stripped
            if is_class_declaration(stripped) or is_subroutine_signature(stripped):
                if previous is None or not is_documentation_line(previous):
                    violations.append(Violation(
                        rule=self.RULE_ID,
                        message=f"Rule 9 Violation: Undocumented Class or Method found"
                                f" on line {line.number}.",
                        line=line.number,
                    ))
            previous = stripped
        return violations
