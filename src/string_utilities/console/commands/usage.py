from __future__ import annotations

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.scanner_command import ScannerCommand
from string_utilities.options.exceptions import OptionError


class UsageCommand(ScannerCommand):
    name = "usage"

    description = "Shows the usage string for an option string."

    arguments = [argument("option-string", "The option string.")]

    options = [
        *ScannerCommand._scanner_options(),
        option("all", None, "Include the options of every option user."),
    ]

    def handle(self) -> int:
        try:
            scanner, users = self.create_scanner()
            usage = scanner.usage_string(all_options=self.option("all"))
        except OptionError as e:
            return self.line_failure(Formatter.escape(str(e)))

        self.line(f"Usage: <c1>{Formatter.escape(usage)}</>")
        for user in users:
            fragment = Formatter.escape(user.usage_string)
            self.line(f"{user.label.capitalize()}: <c1>{fragment}</>")

        return 0
