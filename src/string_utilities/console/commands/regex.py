from __future__ import annotations

import re

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument

from string_utilities.console.commands.command import Command


class RegexCommand(Command):
    name = "regex"

    description = "Lists every match of a regular expression, with its groups."

    arguments = [
        argument("pattern", "The regular expression."),
        argument("target", "The string to search."),
    ]

    def handle(self) -> int:
        from string_utilities.utils.patterns import apply_regex

        try:
            pattern = re.compile(self.argument("pattern"))
        except re.error as e:
            return self.line_failure(f"Invalid regular expression: {e}")

        matches = apply_regex(pattern, self.argument("target"))
        if not matches:
            return self.line_failure("No match found")

        for i, groups in enumerate(matches, start=1):
            match, *captured = groups
            self.line(f"Match {i}: <c1>{Formatter.escape(match)}</>")
            for j, group in enumerate(captured, start=1):
                self.line(f"  Group {j}: <c2>{Formatter.escape(group)}</>")

        return 0
