from __future__ import annotations

from typing import TYPE_CHECKING

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.scanner_command import ScannerCommand
from string_utilities.options.exceptions import OptionError


if TYPE_CHECKING:
    from string_utilities.options.option import Option


class ScanCommand(ScannerCommand):
    name = "scan"

    description = "Scans arguments for the options of an option string."

    arguments = [
        argument("option-string", "The option string."),
        argument("args", "The arguments to scan.", optional=True, multiple=True),
    ]

    options = [
        *ScannerCommand._scanner_options(),
        option(
            "program",
            "p",
            "The program name standing before the arguments.",
            flag=False,
            default="strutil",
        ),
    ]

    help = """\
The arguments to scan usually start with an option indicator,\
 so separate them with <c1>--</>:

<comment>strutil scan "ab:c" -- -a -b value operand</comment>
"""

    def handle(self) -> int:
        args = [self.option("program"), *self.argument("args")]

        try:
            scanner, _ = self.create_scanner()
            index = scanner.get_opts(args)
        except OptionError as e:
            return self.line_failure(Formatter.escape(str(e)))

        for scanned in scanner.all_options:
            self.line(
                f"<c1>{Formatter.escape(scanned.char)}</>:"
                f" {self._describe(scanned, scanner.alternate_indicator)}"
            )

        self.line(f"First operand: <c2>{index}</>")
        operands = args[index:]
        if operands:
            self.line(f"Operands: {Formatter.escape(' '.join(operands))}")

        return 0

    @staticmethod
    def _describe(scanned: Option, alternate_indicator: str) -> str:
        states = []
        if scanned.is_set:
            states.append("set" if scanned.value is None else f"set to {scanned.value}")

        if scanned.is_set_via_alternate:
            state = f"set via {alternate_indicator}"
            if scanned.alternate_value is not None:
                state += f" to {scanned.alternate_value}"
            states.append(state)

        if not states:
            return "not set"

        return Formatter.escape(", ".join(states))
