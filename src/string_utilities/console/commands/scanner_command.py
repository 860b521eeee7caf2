from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from cleo.helpers import option

from string_utilities.console.commands.command import Command
from string_utilities.options.scanner import OptionScanner
from string_utilities.options.user import OptionUser


if TYPE_CHECKING:
    from cleo.io.inputs.option import Option


logger = logging.getLogger(__name__)


class ConsoleOptionUser(OptionUser):
    """
    An option user standing for an option string given with --user.
    """

    def __init__(self, label: str) -> None:
        super().__init__()

        self.label = label
        self.ready = False

    def on_usage_string_ready(self, usage_string: str) -> None:
        logger.debug("Usage string for %s: %s", self.label, usage_string)

    def on_options_ready(self) -> None:
        self.ready = True
        logger.debug("Options ready for %s", self.label)


class ScannerCommand(Command):
    loggers = [
        "string_utilities.options.scanner",
        "string_utilities.console.commands.scanner_command",
    ]

    @staticmethod
    def _scanner_options() -> list[Option]:
        return [
            option(
                "user",
                "u",
                "The option string of an additional option user.",
                flag=False,
                multiple=True,
            ),
            option(
                "indicator",
                "i",
                "The option indicator"
                " (defaults to the <c1>options.indicator</> setting).",
                flag=False,
            ),
            option(
                "alternate-indicator",
                "a",
                "The alternate option indicator"
                " (defaults to the <c1>options.alternate-indicator</> setting).",
                flag=False,
            ),
        ]

    def create_scanner(self) -> tuple[OptionScanner, list[ConsoleOptionUser]]:
        indicator = self.char_option("indicator", "options.indicator")
        alternate_indicator = self.char_option(
            "alternate-indicator", "options.alternate-indicator"
        )

        scanner = OptionScanner(
            self.argument("option-string"), indicator, alternate_indicator
        )

        users = []
        for i, option_string in enumerate(self.option("user") or [], start=1):
            user = ConsoleOptionUser(f"user {i}")
            scanner.add_user(user, option_string)
            users.append(user)

        return scanner, users
