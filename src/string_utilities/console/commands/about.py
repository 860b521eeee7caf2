from __future__ import annotations

from string_utilities.console.commands.command import Command


class AboutCommand(Command):
    name = "about"

    description = "Shows information about strutil."

    def handle(self) -> int:
        from string_utilities.__version__ import __version__

        self.line(
            f"""\
<info>strutil - String Utilities for Python

Version: {__version__}</info>

<comment>strutil scans quoted and bracketed strings, parses command line\
 options and tidies up people's names.</comment>\
"""
        )

        return 0
