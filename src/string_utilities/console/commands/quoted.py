from __future__ import annotations

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.command import Command


class QuotedCommand(Command):
    name = "quoted"

    description = "Extracts the quoted string found at the start of a string."

    arguments = [argument("source", "The string to scan.")]

    options = [
        option(
            "quote",
            None,
            "The quote character (defaults to the <c1>quote-char</> setting).",
            flag=False,
        ),
        option("start", "s", "The position to start scanning at.", flag=False),
    ]

    def handle(self) -> int:
        from string_utilities.scanning.quoted import get_quoted_string

        source = self.argument("source")
        quote = self.char_option("quote", "quote-char")
        start = self.position_option("start")

        content, end = get_quoted_string(source, start, quote)
        if content is None:
            return self.line_failure(
                f"No quoted string found at position {start}"
                f" of <c1>{Formatter.escape(source)}</>"
            )

        self.line(f"Content: <c1>{Formatter.escape(content)}</>")
        self.line(f"End: <c2>{end}</>")

        return 0
