from __future__ import annotations

import pytest

from string_utilities.scanning.quoted import get_quoted_string
from string_utilities.scanning.quoted import unquoted_index_of


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("!hi!", ("hi", 4)),
        ("  !\\!hi!there", ("!hi", 8)),
        ("  !hi\\!!there", ("hi!", 8)),
        ("  !h\\i!there", ("h\\i", 7)),
        ("  !hi\\\\!there", ("hi\\", 8)),
        ("! hi !there", (" hi ", 6)),
        ("!!", ("", 2)),
        ("\t!after a tab!", ("after a tab", 14)),
        ("!a\\\\\\!b!", ("a\\!b", 8)),
    ],
)
def test_get_quoted_string(source: str, expected: tuple[str, int]) -> None:
    assert get_quoted_string(source, quote="!") == expected


@pytest.mark.parametrize(
    "source",
    [
        " \\! !hi!there",
        "hi!there!",
        "!",
        "",
        "   ",
        "!hi",
        "!hi\\!",
        "!hi\\",
    ],
)
def test_get_quoted_string_fails(source: str) -> None:
    assert get_quoted_string(source, quote="!") == (None, None)


def test_get_quoted_string_with_none_source() -> None:
    assert get_quoted_string(None) == (None, None)


def test_get_quoted_string_defaults_to_double_quotes() -> None:
    assert get_quoted_string('  "hi \\" there" rest') == ('hi " there', 15)
    assert get_quoted_string("'hi' there") == (None, None)


@pytest.mark.parametrize(
    ("source", "start", "expected"),
    [
        ("   !hi!there", 2, ("hi", 7)),
        ("   !hi!there", 3, ("hi", 7)),
        ("   !hi!there", 4, (None, None)),
        ("!hi!there!", 3, ("there", 10)),
        ("!hi!", 4, (None, None)),
        ("!hi!", 10, (None, None)),
        ("!hi!", -1, (None, None)),
    ],
)
def test_get_quoted_string_from_start(
    source: str, start: int, expected: tuple[str | None, int | None]
) -> None:
    assert get_quoted_string(source, start, quote="!") == expected


@pytest.mark.parametrize(
    ("source", "char", "expected"),
    [
        ('bef"*"ore * after', "*", 10),
        ('bef"\\*"ore * after', "*", 11),
        ('bef"\\\\*"ore * after', "*", 12),
        ('"*"', "*", None),
        ("hi, mom", ",", 2),
        ("hi mom", ",", None),
        ("", ",", None),
        (' \\ "hi!"', "\\", 1),
        (' "hi!"', '"', None),
        ('"a, b", c', ",", 6),
        ('"a, b, c', ",", None),
    ],
)
def test_unquoted_index_of(source: str, char: str, expected: int | None) -> None:
    assert unquoted_index_of(source, char) == expected


def test_unquoted_index_of_with_other_quote() -> None:
    assert unquoted_index_of("'a, b', c", ",", quote="'") == 6
    assert unquoted_index_of('"a, b", c', ",", quote="'") == 2


def test_unquoted_index_of_with_none_source() -> None:
    assert unquoted_index_of(None, ",") is None
