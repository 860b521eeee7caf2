from __future__ import annotations

import logging

from enum import Enum
from typing import TYPE_CHECKING

from string_utilities.options.exceptions import OptionGrammarError
from string_utilities.options.exceptions import OptionScanError
from string_utilities.options.grammar import parse_option_string
from string_utilities.options.usage import build_usage_string
from string_utilities.options.usage import sort_options


if TYPE_CHECKING:
    from collections.abc import Sequence

    from string_utilities.options.option import Option
    from string_utilities.options.user import OptionUser


DEFAULT_INDICATOR = "-"
DEFAULT_ALTERNATE_INDICATOR = "+"

logger = logging.getLogger(__name__)


class ScannerState(Enum):
    OPEN = "open"
    FROZEN = "frozen"


class OptionScanner:
    """
    Scan Unix style command line options.

    The scanner is created with the creator's option string (see
    ``parse_option_string`` for the grammar). Option users may add their own
    options until the option table is frozen, which happens the first time a
    usage string is built or arguments are scanned.
    """

    def __init__(
        self,
        option_string: str,
        indicator: str = DEFAULT_INDICATOR,
        alternate_indicator: str = DEFAULT_ALTERNATE_INDICATOR,
    ) -> None:
        self._indicator = indicator
        self._alternate_indicator = alternate_indicator
        self._options: dict[str, Option] = {}
        self._users: list[OptionUser] = []
        self._state = ScannerState.OPEN

        self._add_options(option_string)

    @property
    def indicator(self) -> str:
        return self._indicator

    @property
    def alternate_indicator(self) -> str:
        return self._alternate_indicator

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def users(self) -> list[OptionUser]:
        return list(self._users)

    @property
    def all_options(self) -> list[Option]:
        return sort_options(self._options.values())

    @property
    def creator_options(self) -> list[Option]:
        return [option for option in self.all_options if option.owner is None]

    def option(self, char: str) -> Option | None:
        return self._options.get(char)

    def add_user(self, user: OptionUser, option_string: str) -> None:
        if self._state is ScannerState.FROZEN:
            raise OptionGrammarError(
                "too-late attempt to add option user"
                f' with option string "{option_string}"'
            )

        self._add_options(option_string, owner=user)

        if not any(registered is user for registered in self._users):
            self._users.append(user)

    def usage_string(self, all_options: bool = False) -> str:
        """
        Return the usage string for the creator's options, or for every
        option when all_options is set.

        Each option user receives the usage string for its own options.
        """
        self._freeze()

        for user in self._users:
            fragment = self._build_usage(self._owned_by(user))
            user.set_usage_string(fragment)
            user.on_usage_string_ready(fragment)

        if all_options:
            return self._build_usage(self.all_options)

        return self._build_usage(self.creator_options)

    def get_opts(self, args: Sequence[str]) -> int:
        """
        Scan the options in args and return the index of the first argument
        that was not consumed.

        The first element of args is the program name and is skipped.
        Scanning stops at the first argument that does not start with an
        indicator, or after the primary indicator given twice.
        """
        self._freeze()

        index = 1
        while index < len(args):
            token = args[index]
            if len(token) < 2 or token[0] not in (
                self._indicator,
                self._alternate_indicator,
            ):
                break

            index += 1

            if token == self._indicator * 2:
                break

            index = self._scan_token(token, args, index)

        for option in self.all_options:
            if option.required and not option.is_satisfied:
                raise OptionScanError(f"required option '{option.char}' not set")

        logger.debug("Scanned %d of %d arguments", index - 1, len(args) - 1)

        for user in self._users:
            user.on_options_ready()

        return index

    def _scan_token(self, token: str, args: Sequence[str], index: int) -> int:
        indicator = token[0]
        alternate = indicator == self._alternate_indicator

        for position in range(1, len(token)):
            char = token[position]
            option = self._options.get(char)
            if option is None:
                raise OptionScanError(f"option '{char}' not recognized")

            if alternate and not option.allows_alternate:
                raise OptionScanError(f"'{indicator}' used with option '{char}'")

            if option.is_set_via_alternate if alternate else option.is_set:
                raise OptionScanError(f"option '{char}' set twice")

            if not option.takes_argument:
                option.mark_set(alternate=alternate)
                logger.debug("Option %s%s set", indicator, char)
                continue

            if position != 1:
                raise OptionScanError(f"option '{char}' not first in argument")

            value = token[2:]
            if not value:
                if index >= len(args):
                    raise OptionScanError(f"missing argument for option '{char}'")

                value = args[index]
                index += 1

            option.mark_set(value, alternate=alternate)
            logger.debug("Option %s%s set to %s", indicator, char, value)
            break

        return index

    def _add_options(self, option_string: str, owner: OptionUser | None = None) -> None:
        options = parse_option_string(
            option_string, self._alternate_indicator, owner=owner, taken=self._options
        )
        for option in options:
            self._options[option.char] = option

        logger.debug(
            'Added %d option(s) from option string "%s"', len(options), option_string
        )

    def _freeze(self) -> None:
        if self._state is ScannerState.FROZEN:
            return

        self._state = ScannerState.FROZEN
        for user in self._users:
            user.set_options(self._owned_by(user))

        logger.debug("Option table frozen with %d option(s)", len(self._options))

    def _owned_by(self, user: OptionUser) -> list[Option]:
        return [option for option in self.all_options if option.owner is user]

    def _build_usage(self, options: list[Option]) -> str:
        return build_usage_string(
            options, self._indicator, self._alternate_indicator
        )
