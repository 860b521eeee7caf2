from __future__ import annotations

import pytest

from string_utilities.options.scanner import OptionScanner
from string_utilities.options.scanner import ScannerState
from string_utilities.options.usage import option_sort_key


@pytest.mark.parametrize(
    ("option_string", "expected"),
    [
        ("", ""),
        ("abcB?", "[ -?abBc ]"),
        ("+ab!cB", "-c [ -bB ] [ +/-a ]"),
        ("+!ab+!A", "[ -b ] +/-aA"),
        ("a+b:", "[ -a ] [ -b optionitem1 | +b optionitem2 ]"),
        ("+b:<descA>", "[ -b descA | +b optionitem1 ]"),
        ("a:!b:", "-b optionitem1 [ -a optionitem2 ]"),
        ("a:cb:d", "[ -cd ] [ -a optionitem1 ] [ -b optionitem2 ]"),
        ("dc!b:<item name>+a", "[ -cd ] [ +/-a ] -b item name"),
        ("zH2#1hbR?", "[ -#?bhHRz12 ]"),
        ("a+b:<one><two>8z:", "[ -a8 ] [ -b one | +b two ] [ -z optionitem1 ]"),
        (
            "!a!b:+!?:+!9",
            "-a +/-9 -? optionitem1 | +? optionitem2 -b optionitem3",
        ),
        (
            "+9:+!#:",
            "-# optionitem1 | +# optionitem2 [ -9 optionitem3 | +9 optionitem4 ]",
        ),
        ("a:< >", "[ -a optionitem1 ]"),
    ],
)
def test_usage_string(option_string: str, expected: str) -> None:
    assert OptionScanner(option_string).usage_string() == expected


def test_usage_string_with_other_indicator() -> None:
    scanner = OptionScanner("a+bc:<one>+d:<two><three>", indicator="/")

    assert scanner.usage_string() == "[ /a ] [ +//b ] [ /c one ] [ /d two | +d three ]"


def test_usage_string_with_other_alternate_indicator() -> None:
    scanner = OptionScanner("a%b:<file><dir>", alternate_indicator="%")

    assert scanner.usage_string() == "[ -a ] [ -b file | %b dir ]"


def test_usage_string_freezes_option_table() -> None:
    scanner = OptionScanner("ab")
    assert scanner.state is ScannerState.OPEN

    scanner.usage_string()

    assert scanner.state is ScannerState.FROZEN


def test_usage_string_can_be_built_again() -> None:
    scanner = OptionScanner("a:b:")

    assert scanner.usage_string() == "[ -a optionitem1 ] [ -b optionitem2 ]"
    assert scanner.usage_string() == "[ -a optionitem1 ] [ -b optionitem2 ]"


@pytest.mark.parametrize(
    ("chars", "expected"),
    [
        ("zH2#1hbR?", "#?bhHRz12"),
        ("BbAa", "aAbB"),
        ("9a?", "?a9"),
    ],
)
def test_option_sort_key(chars: str, expected: str) -> None:
    assert "".join(sorted(chars, key=option_sort_key)) == expected
