"""Brace-depth scan locating where a subroutine body closes."""

from collections.abc import Sequence

from .patterns import count_braces


def find_body_end(lines: Sequence[str], start: int) -> int | None:
    """Return the 0-based index of the line closing the body opened at/after *start*.

    Depth is the running total of ``{`` minus ``}``. The body is entered on
    the first line holding an opening brace; the first line afterwards where
    depth is back to zero ends it. Returns None if the body never closes.
    """
    depth = 0
    inside = False
    for index in range(start, len(lines)):
        opens, closes = count_braces(lines[index])
        if opens > 0:
            inside = True
        depth += opens - closes
        if inside and depth == 0:
            return index
    return None
