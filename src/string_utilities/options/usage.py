from __future__ import annotations

from typing import TYPE_CHECKING

from string_utilities.scanning.whitespace import trim_whitespace


if TYPE_CHECKING:
    from collections.abc import Iterable

    from string_utilities.options.option import Option


SYNTHESIZED_LABEL_PREFIX = "optionitem"


def option_sort_key(char: str) -> tuple[int, str, bool]:
    """
    Order option characters for display.

    Characters that are neither letters nor digits come first, then letters
    ignoring case with a lowercase letter before its uppercase form, then
    digits and any other alphanumeric characters.
    """
    if not char.isalnum():
        return 0, char, False

    if char.isalpha():
        return 1, char.lower(), char.isupper()

    return 2, char, False


def sort_options(options: Iterable[Option]) -> list[Option]:
    return sorted(options, key=lambda option: option_sort_key(option.char))


def build_usage_string(
    options: Iterable[Option], indicator: str, alternate_indicator: str
) -> str:
    """
    Build the usage string describing the given options, e.g.
    ``-c [ -bB ] [ +/-a ] -x file [ -o output | +o input ]``.
    """
    options = sort_options(options)
    flags = [option for option in options if not option.takes_argument]
    arguments = [option for option in options if option.takes_argument]

    def chars(required: bool, alternate: bool) -> str:
        return "".join(
            option.char
            for option in flags
            if option.required is required and option.allows_alternate is alternate
        )

    parts = []

    if required_flags := chars(True, False):
        parts.append(f"{indicator}{required_flags}")

    if optional_flags := chars(False, False):
        parts.append(f"[ {indicator}{optional_flags} ]")

    if required_alternates := chars(True, True):
        parts.append(f"{alternate_indicator}/{indicator}{required_alternates}")

    if optional_alternates := chars(False, True):
        parts.append(f"[ {alternate_indicator}/{indicator}{optional_alternates} ]")

    labels = _LabelSynthesizer()

    for option in arguments:
        if option.required:
            parts.append(
                _argument_usage(option, indicator, alternate_indicator, labels)
            )

    for option in arguments:
        if not option.required:
            usage = _argument_usage(option, indicator, alternate_indicator, labels)
            parts.append(f"[ {usage} ]")

    return " ".join(parts)


class _LabelSynthesizer:
    def __init__(self) -> None:
        self._count = 0

    def label(self, label: str | None) -> str:
        if label is not None and trim_whitespace(label):
            return label

        self._count += 1

        return f"{SYNTHESIZED_LABEL_PREFIX}{self._count}"


def _argument_usage(
    option: Option,
    indicator: str,
    alternate_indicator: str,
    labels: _LabelSynthesizer,
) -> str:
    usage = f"{indicator}{option.char} {labels.label(option.argument_label)}"
    if option.allows_alternate:
        alternate_label = labels.label(option.alternate_argument_label)
        usage += f" | {alternate_indicator}{option.char} {alternate_label}"

    return usage
