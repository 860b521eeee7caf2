from __future__ import annotations

from typing import TYPE_CHECKING

from string_utilities.scanning.whitespace import skip_whitespace


if TYPE_CHECKING:
    from string_utilities.scanning import ScanResult


DEFAULT_QUOTE_CHAR = '"'
ESCAPE_CHAR = "\\"

FAILED: ScanResult = (None, None)


def get_quoted_string(
    source: str | None, start: int | None = None, quote: str = DEFAULT_QUOTE_CHAR
) -> ScanResult:
    """
    Extract the quoted string found at or after start.

    Leading whitespace is skipped and the first remaining character must be
    the quote character. Inside the quotes, the escape character makes a
    following quote or escape character literal. An escape character before
    any other character is kept as is.

    Returns the unescaped content together with the position just past the
    closing quote, or (None, None) if no well-formed quoted string is found.
    """
    if source is None or len(source) < 2:
        return FAILED

    position = 0 if start is None else start
    if position < 0 or position >= len(source):
        return FAILED

    opening = skip_whitespace(source, position)
    if opening is None or opening >= len(source) or source[opening] != quote:
        return FAILED

    position = opening + 1
    while position < len(source):
        char = source[position]
        if char == ESCAPE_CHAR:
            if position == len(source) - 1:
                # dangling escape
                return FAILED

            position += 2
            continue

        if char == quote:
            content = _unescape(source[opening + 1 : position], quote)
            return content, position + 1

        position += 1

    return FAILED


def unquoted_index_of(
    source: str | None, char: str, quote: str = DEFAULT_QUOTE_CHAR
) -> int | None:
    """
    Return the position of the first occurrence of char that is not inside
    a quoted string, or None.

    A malformed quoted string also yields None.
    """
    if source is None:
        return None

    position = 0
    while position < len(source):
        current = source[position]
        if current == quote:
            content, end = get_quoted_string(source, position, quote)
            if content is None or end is None:
                return None

            position = end
            continue

        if current == char:
            return position

        position += 1

    return None


def _unescape(content: str, quote: str) -> str:
    chars = []
    position = 0
    while position < len(content):
        char = content[position]
        if (
            char == ESCAPE_CHAR
            and position + 1 < len(content)
            and content[position + 1] in (ESCAPE_CHAR, quote)
        ):
            chars.append(content[position + 1])
            position += 2
            continue

        chars.append(char)
        position += 1

    return "".join(chars)
