from __future__ import annotations

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.command import Command
from string_utilities.console.exceptions import StringUtilitiesConsoleError


class UnquotedCommand(Command):
    name = "unquoted"

    description = "Finds the first occurrence of a character outside quoted strings."

    arguments = [
        argument("source", "The string to search."),
        argument("char", "The character to look for."),
    ]

    options = [
        option(
            "quote",
            None,
            "The quote character (defaults to the <c1>quote-char</> setting).",
            flag=False,
        ),
    ]

    def handle(self) -> int:
        from string_utilities.scanning.quoted import unquoted_index_of

        source = self.argument("source")
        char = self.argument("char")
        if len(char) != 1:
            raise StringUtilitiesConsoleError(
                f"The char argument must be a single character, got {char!r}"
            )

        quote = self.char_option("quote", "quote-char")

        index = unquoted_index_of(source, char, quote)
        if index is None:
            return self.line_failure(
                f"<c1>{Formatter.escape(char)}</> not found outside quotes"
                f" in <c1>{Formatter.escape(source)}</>"
            )

        self.line(f"Index: <c2>{index}</>")

        return 0
