from __future__ import annotations

from typing import TYPE_CHECKING

from string_utilities.options.exceptions import OptionGrammarError
from string_utilities.options.option import Option
from string_utilities.scanning.bracketed import get_bracketed_string


if TYPE_CHECKING:
    from collections.abc import Collection

    from string_utilities.options.user import OptionUser


REQUIRED_MARKER = "!"
ARGUMENT_MARKER = ":"
LABEL_OPEN = "<"
LABEL_CLOSE = ">"

SPECIAL_OPTION_CHARS = "?#"


def is_option_char(char: str) -> bool:
    return char.isalnum() or char in SPECIAL_OPTION_CHARS


def parse_option_string(
    option_string: str,
    alternate_indicator: str,
    owner: OptionUser | None = None,
    taken: Collection[str] = (),
) -> list[Option]:
    """
    Parse an option string into the options it declares.

    Each option is written as::

        [ALT] ['!'] CHAR [':' ['<' LABEL '>'] ['<' ALTLABEL '>']]

    where ALT is the alternate indicator, '!' marks a required option and ':'
    an option taking an argument. The alternate label is only read for
    options allowing the alternate indicator. Whitespace may precede a label.

    Characters in taken are already declared elsewhere and may not be reused.
    Nothing is returned unless the whole string is valid.
    """
    options: list[Option] = []
    seen = set(taken)
    length = len(option_string)
    position = 0

    def premature() -> OptionGrammarError:
        return OptionGrammarError(
            f'option string "{option_string}" ended prematurely'
        )

    while position < length:
        allows_alternate = False
        required = False

        char = option_string[position]
        if char == alternate_indicator:
            allows_alternate = True
            position += 1
            if position >= length:
                raise premature()

            char = option_string[position]

        if char == REQUIRED_MARKER:
            required = True
            position += 1
            if position >= length:
                raise premature()

            char = option_string[position]

        if not is_option_char(char):
            raise OptionGrammarError(
                f"bad character '{char}' in option string \"{option_string}\""
            )

        if char in seen:
            raise OptionGrammarError(
                f"duplicate option character '{char}'"
                f' in option string "{option_string}"'
            )

        seen.add(char)
        position += 1

        takes_argument = False
        label = None
        alternate_label = None
        if position < length and option_string[position] == ARGUMENT_MARKER:
            takes_argument = True
            label, position = _read_label(option_string, position + 1)
            if allows_alternate:
                alternate_label, position = _read_label(option_string, position)

        options.append(
            Option(
                char,
                required=required,
                allows_alternate=allows_alternate,
                takes_argument=takes_argument,
                argument_label=label,
                alternate_argument_label=alternate_label,
                owner=owner,
            )
        )

    return options


def _read_label(option_string: str, position: int) -> tuple[str | None, int]:
    # a missing or malformed label leaves position on the offending character
    label, end = get_bracketed_string(
        option_string, position, left_bracket=LABEL_OPEN, right_bracket=LABEL_CLOSE
    )
    if label is None or end is None:
        return None, position

    return label, end
