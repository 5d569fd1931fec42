"""Declaration rules: method casing, public static fields, media attributes."""

from ..document import SourceDocument
from ..patterns import (
    has_public_static,
    has_static_readonly,
    is_comment_line,
    is_entry_point,
    is_immutable_or_callable,
    is_statement,
    is_subroutine_signature,
    mentions_media_type,
    subroutine_name,
)
from ..types import Violation


class MethodNamingRule:
    """Rule 1: methods are PascalCase (the Main entry point is exempt)."""

    RULE_ID = 1
    RULE_NAME = "method-naming"
    DESCRIPTION = "Method names follow PascalCase conventions"

    def check(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        for line in document.lines:
            if not is_subroutine_signature(line.raw):
                continue
            name = subroutine_name(line.raw)
            if not name or is_entry_point(name):
                continue
            if name[0].islower():
                violations.append(Violation(
                    rule=self.RULE_ID,
                    message=f"Rule 1 Violation: Method '{name}' on line {line.number}"
                            " does not follow PascalCase conventions.",
                    line=line.number,
                ))
        return violations


class PublicStaticFieldRule:
    """Rule 2: no mutable public static variables.

    A line mentioning ``public static`` with no const, readonly or
    parameter list is taken as a field. Comment lines are skipped.
    """

    RULE_ID = 2
    RULE_NAME = "public-static-field"
    DESCRIPTION = "No public static variables (const/readonly excepted)"

    def check(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        for line in document.lines:
            stripped = line.stripped
            if is_comment_line(stripped):
                continue
            if has_public_static(stripped) and not is_immutable_or_callable(stripped):
                violations.append(Violation(
                    rule=self.RULE_ID,
                    message=f"Rule 2 Violation: Public static variable found on line {line.number}.",
                    line=line.number,
                ))
        return violations


class MediaAttributeRule:
    """Rule 3: media resources are declared ``static readonly``."""

    RULE_ID = 3
    RULE_NAME = "media-attribute"
    DESCRIPTION = "Media attributes (images, sounds, videos...) are static readonly"

    def check(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        for line in document.lines:
            stripped = line.stripped
            if not (mentions_media_type(stripped) and is_statement(stripped)):
                continue
            if not has_static_readonly(stripped):
                violations.append(Violation(
                    rule=self.RULE_ID,
                    message=f"Rule 3 Violation: Media attribute on line {line.number}"
                            " must be 'static readonly'.",
                    line=line.number,
                ))
        return violations
