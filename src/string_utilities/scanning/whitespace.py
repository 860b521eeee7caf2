from __future__ import annotations

import unicodedata


BLANK = " "
TAB = "\t"


def is_whitespace(char: str) -> bool:
    """
    Return whether a character is scanning whitespace.

    Tabs and Unicode space separators count, line breaks do not.
    """
    return char == TAB or unicodedata.category(char) == "Zs"


def skip_whitespace(source: str, start: int | None = None) -> int | None:
    """
    Return the position of the first non-whitespace character at or after
    start, or the length of the source if only whitespace remains.

    A start beyond the end of the source returns None.
    """
    position = 0 if start is None else start
    if position < 0 or position > len(source):
        return None

    while position < len(source) and is_whitespace(source[position]):
        position += 1

    return position


def trim_whitespace(source: str) -> str:
    start = 0
    end = len(source)

    while start < end and is_whitespace(source[start]):
        start += 1

    while end > start and is_whitespace(source[end - 1]):
        end -= 1

    return source[start:end]


def n_chars(n: int, char: str = BLANK) -> str:
    return char * max(n, 0)


def n_blanks(n: int) -> str:
    return n_chars(n)


def left_padded(source: str, desired_count: int) -> str:
    return n_blanks(desired_count - len(source)) + source


def right_padded(source: str, desired_count: int) -> str:
    return source + n_blanks(desired_count - len(source))
