from __future__ import annotations

from typing import TYPE_CHECKING

from string_utilities.scanning.quoted import DEFAULT_QUOTE_CHAR
from string_utilities.scanning.quoted import FAILED
from string_utilities.scanning.quoted import get_quoted_string
from string_utilities.scanning.whitespace import skip_whitespace


if TYPE_CHECKING:
    from string_utilities.scanning import ScanResult


DEFAULT_LEFT_BRACKET = "("
DEFAULT_RIGHT_BRACKET = ")"


def get_bracketed_string(
    source: str | None,
    start: int | None = None,
    left_bracket: str = DEFAULT_LEFT_BRACKET,
    right_bracket: str = DEFAULT_RIGHT_BRACKET,
    quote: str = DEFAULT_QUOTE_CHAR,
) -> ScanResult:
    """
    Extract the bracketed string found at or after start.

    Nested brackets are balanced and quoted strings are skipped as a whole,
    so brackets inside quotes do not count. The content is returned verbatim,
    quotes and escapes included, together with the position just past the
    closing bracket. Returns (None, None) on failure.
    """
    if source is None or len(source) < 2:
        return FAILED

    position = 0 if start is None else start
    if position < 0 or position >= len(source):
        return FAILED

    opening = skip_whitespace(source, position)
    if opening is None or opening >= len(source) or source[opening] != left_bracket:
        return FAILED

    depth = 1
    position = opening + 1
    while position < len(source):
        char = source[position]
        if char == quote:
            content, end = get_quoted_string(source, position, quote)
            if content is None or end is None:
                return FAILED

            position = end
            continue

        if char == left_bracket:
            depth += 1
        elif char == right_bracket:
            depth -= 1
            if depth == 0:
                return source[opening + 1 : position], position + 1

        position += 1

    return FAILED
