"""Line and expression shapes recognised by the script parser.

Patterns are deliberately permissive: they classify a line or expression by its
outer shape and leave the contents to the recursive parsers.
"""

from __future__ import annotations

import re
from typing import Final

from vecscript.syntax import OPERATORS

IDENTIFIER: Final[str] = r"[A-Za-z_]\w*"

# f.rotate(10, 5)
METHOD_LINE_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\.({IDENTIFIER})\((.*)\)", re.ASCII)
# f.length = 10
PROPERTY_LINE_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\.({IDENTIFIER})\s*=\s*(.*)", re.ASCII)
# a = Vec2(1, 2), interactive, #CC3344
ASSIGNMENT_LINE_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\s*=\s*(.*)", re.ASCII)

# Vec2(1, 2)
FUNCTION_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\((.*)\)", re.ASCII)
# e.clone()
MEMBER_CALL_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\.({IDENTIFIER})\((.*)\)", re.ASCII)
# e.length
MEMBER_ACCESS_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\.({IDENTIFIER})", re.ASCII)
IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(IDENTIFIER, re.ASCII)
NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# origin: 5 5
COLON_MODIFIER_RE: Final[re.Pattern[str]] = re.compile(rf"({IDENTIFIER})\s*:\s*(.*)", re.ASCII)

_EXPONENT_TAIL_RE: Final[re.Pattern[str]] = re.compile(r"(?:^|[^\w.])(?:\d+\.?\d*|\.\d+)[eE]$", re.ASCII)


def split_top_level(text: str, separator: str = ",", *, maxsplit: int = -1) -> list[str]:
    """Split on `separator` wherever parenthesis depth is zero."""
    parts: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == separator and depth == 0:
            parts.append(text[start:index])
            start = index + 1
            if maxsplit >= 0 and len(parts) == maxsplit:
                break
    parts.append(text[start:])
    return parts


def closes_at_end(text: str, open_index: int) -> bool:
    """Check that the parenthesis opened at `open_index` is closed by the last character."""
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index == len(text) - 1
    return False


def find_operator(text: str) -> int | None:
    """Index of the first top-level arithmetic operator that has a left operand.

    Signs directly following another operator and exponent signs of numeric
    literals (`1e-3`) are not operators.
    """
    depth = 0
    last_significant = ""
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char in OPERATORS and depth == 0:
            left = text[:index].rstrip()
            if left and last_significant not in OPERATORS and not _EXPONENT_TAIL_RE.search(left):
                return index
        if not char.isspace():
            last_significant = char
    return None
