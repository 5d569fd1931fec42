"""Whole-file presence rules: collections, loops, subroutines."""

from ..document import SourceDocument
from ..patterns import contains_collection, contains_loop, is_subroutine_signature
from ..types import Violation


class CollectionPresenceRule:
    """Rule 5: the file uses at least one array or list."""

    RULE_ID = 5
    RULE_NAME = "collection-presence"
    DESCRIPTION = "At least one Array or List"

    def check(self, document: SourceDocument) -> list[Violation]:
        if contains_collection(document.text):
            return []
        return [Violation(
            rule=self.RULE_ID,
            message="Rule 5 Violation: No Array or List found in the code.",
        )]


class LoopPresenceRule:
    """Rule 6: the file has at least one loop."""

    RULE_ID = 6
    RULE_NAME = "loop-presence"
    DESCRIPTION = "At least one loop (for, foreach, while, do)"

    def check(self, document: SourceDocument) -> list[Violation]:
        if contains_loop(document.text):
            return []
        return [Violation(
            rule=self.RULE_ID,
            message="Rule 6 Violation: No loop (for, foreach, while, do) found.",
        )]


class SubroutinePresenceRule:
    """Rule 10: the file declares at least one subroutine."""

    RULE_ID = 10
    RULE_NAME = "subroutine-presence"
    DESCRIPTION = "At least one function/subroutine"

    def check(self, document: SourceDocument) -> list[Violation]:
        if any(is_subroutine_signature(line.raw) for line in document.lines):
            return []
        return [Violation(
            rule=self.RULE_ID,
            message="Rule 10 Violation: No functions/subroutines found in the file.",
        )]
