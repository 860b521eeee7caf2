from __future__ import annotations

import re

import pytest

from string_utilities.utils.patterns import apply_regex


def test_apply_regex() -> None:
    assert apply_regex(r"[a-z]{2}, [a-z]*", "(hi, mom)") == [["hi, mom"]]


@pytest.mark.parametrize(
    ("regex", "target", "expected"),
    [
        (r"Z", "hi, mom", []),
        (
            r"(a+) home (\d+)",
            "hi, mom, I'm aa home 567 times",
            [["aa home 567", "aa", "567"]],
        ),
        (
            r"(a+) home (\d+)",
            "hi, mom, I'm aa home 567 times\n and dad aaa home 42",
            [["aa home 567", "aa", "567"], ["aaa home 42", "aaa", "42"]],
        ),
        (r"(a)|(b)", "ab", [["a", "a", ""], ["b", "", "b"]]),
        (r"x*", "ab", [[""], [""], [""]]),
    ],
)
def test_apply_regex_lists_every_match(
    regex: str, target: str, expected: list[list[str]]
) -> None:
    assert apply_regex(regex, target) == expected


def test_apply_regex_accepts_compiled_pattern() -> None:
    pattern = re.compile(r"(\w)(\d)")

    assert apply_regex(pattern, "a1 b2") == [["a1", "a", "1"], ["b2", "b", "2"]]


def test_apply_regex_rejects_invalid_pattern() -> None:
    with pytest.raises(re.error):
        apply_regex(r"(unclosed", "target")
