from __future__ import annotations

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.command import Command


class BracketedCommand(Command):
    name = "bracketed"

    description = "Extracts the bracketed string found at the start of a string."

    arguments = [argument("source", "The string to scan.")]

    options = [
        option(
            "left",
            "l",
            "The left bracket (defaults to the <c1>brackets.left</> setting).",
            flag=False,
        ),
        option(
            "right",
            "r",
            "The right bracket (defaults to the <c1>brackets.right</> setting).",
            flag=False,
        ),
        option(
            "quote",
            None,
            "The quote character (defaults to the <c1>quote-char</> setting).",
            flag=False,
        ),
        option("start", "s", "The position to start scanning at.", flag=False),
    ]

    def handle(self) -> int:
        from string_utilities.scanning.bracketed import get_bracketed_string

        source = self.argument("source")
        left = self.char_option("left", "brackets.left")
        right = self.char_option("right", "brackets.right")
        quote = self.char_option("quote", "quote-char")
        start = self.position_option("start")

        content, end = get_bracketed_string(
            source, start, left_bracket=left, right_bracket=right, quote=quote
        )
        if content is None:
            return self.line_failure(
                f"No bracketed string found at position {start}"
                f" of <c1>{Formatter.escape(source)}</>"
            )

        self.line(f"Content: <c1>{Formatter.escape(content)}</>")
        self.line(f"End: <c2>{end}</>")

        return 0
