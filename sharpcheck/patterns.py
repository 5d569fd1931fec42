"""Shared textual patterns and predicates used by the rule catalog.

Everything here works on single lines or on the raw file text. Nothing
parses C#: a signature split across lines is not recognized, and generics
or expressions are only matched as far as the character classes allow.
"""

import re

ACCESS_MODIFIERS = ("public", "private", "protected", "internal")
ENTRY_POINT_NAME = "Main"
EXEMPT_LITERALS = frozenset({"0", "1", "-1"})
MEDIA_TYPE_NAMES = ("Bitmap", "Image", "SoundPlayer", "Video", "Animation", "Texture")

_ACCESS = "|".join(ACCESS_MODIFIERS)

# visibility, optional static, return type, name, parameter list
SUBROUTINE_SIGNATURE_RE = re.compile(
    rf"^\s*({_ACCESS})\s+(static\s+)?[\w<>[\]]+\s+\w+\s*\(.*\)"
)
# visibility, modifiers, type, name, optional initializer, terminator
FIELD_DECLARATION_RE = re.compile(
    rf"^\s*({_ACCESS})\s+(const\s+|static\s+|readonly\s+)*[\w<>[\]]+\s+\w+(\s*=.*)?;"
)
SUBROUTINE_NAME_RE = re.compile(r"\s+(\w+)\s*\(")

MEDIA_TYPE_RE = re.compile("(" + "|".join(MEDIA_TYPE_NAMES) + ")")
CLASS_DECLARATION_RE = re.compile(r"\bclass\b")
LOOP_KEYWORD_RE = re.compile(r"\b(for|foreach|while|do)\s*\(")
INTEGER_LITERAL_RE = re.compile(r"\b\d+\b")
BRACE_ONLY_RE = re.compile(r"^[{}]+$")

COLLECTION_MARKERS = ("[]", "List<", "Array")
LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
ASSIGN_OR_COMPARE_OPERATORS = ("=", ">", "<")  # "==", ">=", "<=" contain these


# ----------------------------------------------------------
# Declarations
# ----------------------------------------------------------

def is_subroutine_signature(line: str) -> bool:
    """Return True if the line declares a subroutine (method)."""
    return SUBROUTINE_SIGNATURE_RE.match(line) is not None


def is_field_declaration(line: str) -> bool:
    """Return True if the line declares a class-level field.

    Part of the shared declaration recognizer for library callers; no
    built-in rule depends on it.
    """
    return FIELD_DECLARATION_RE.match(line) is not None


def subroutine_name(line: str) -> str | None:
    """Extract the subroutine name from a signature line."""
    match = SUBROUTINE_NAME_RE.search(line)
    return match.group(1) if match else None


def is_entry_point(name: str) -> bool:
    return name == ENTRY_POINT_NAME


def is_class_declaration(line: str) -> bool:
    return CLASS_DECLARATION_RE.search(line) is not None


def is_const_declaration(line: str) -> bool:
    return "const " in line


# ----------------------------------------------------------
# Comments
# ----------------------------------------------------------

def is_comment_line(stripped: str) -> bool:
    """Return True if a trimmed line opens a line or block comment."""
    return stripped.startswith(LINE_COMMENT) or stripped.startswith(BLOCK_COMMENT_OPEN)


def is_documentation_line(stripped: str) -> bool:
    """Return True if a trimmed line counts as documentation for the next line."""
    return stripped.startswith(LINE_COMMENT) or stripped.endswith(BLOCK_COMMENT_CLOSE)


# ----------------------------------------------------------
# Modifiers and tokens
# ----------------------------------------------------------

def has_public_static(line: str) -> bool:
    return "public static" in line


def has_static_readonly(line: str) -> bool:
    return "static readonly" in line


def is_immutable_or_callable(line: str) -> bool:
    """Return True for const/readonly declarations and anything with a parameter list."""
    return "const" in line or "readonly" in line or "(" in line


def mentions_media_type(line: str) -> bool:
    return MEDIA_TYPE_RE.search(line) is not None


def is_statement(stripped: str) -> bool:
    return stripped.endswith(";")


def has_assignment_or_comparison(line: str) -> bool:
    return any(op in line for op in ASSIGN_OR_COMPARE_OPERATORS)


def first_magic_literal(line: str) -> str | None:
    """Return the first integer literal that is not 0, 1 or -1."""
    for match in INTEGER_LITERAL_RE.finditer(line):
        if match.group() not in EXEMPT_LITERALS:
            return match.group()
    return None


# ----------------------------------------------------------
# Whole-text searches
# ----------------------------------------------------------

def contains_collection(text: str) -> bool:
    """Return True if an array marker, a List<...> or 'Array' appears anywhere."""
    return any(marker in text for marker in COLLECTION_MARKERS)


def contains_loop(text: str) -> bool:
    return LOOP_KEYWORD_RE.search(text) is not None


def is_brace_only(block: str) -> bool:
    return BRACE_ONLY_RE.match(block) is not None


def count_braces(line: str) -> tuple[int, int]:
    """Return (opening, closing) curly brace counts for a line."""
    return line.count("{"), line.count("}")
