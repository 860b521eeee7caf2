from __future__ import annotations

import json

from cleo.helpers import argument

from string_utilities.console.commands.command import Command
from string_utilities.console.exceptions import StringUtilitiesConsoleError


class ConfigCommand(Command):
    name = "config"

    description = "Shows the configuration settings."

    arguments = [argument("key", "Setting key.", optional=True)]

    help = """\
This command shows the settings in effect, including those set in the\
 configuration file and through <c1>STRUTIL_*</> environment variables.

To show a single setting, give its key:

<comment>strutil config options.indicator</comment>
"""

    def handle(self) -> int:
        from string_utilities.utils.helpers import flatten_dict

        settings = flatten_dict(self.config.all())

        key = self.argument("key")
        if key is not None:
            if key not in settings:
                raise StringUtilitiesConsoleError(f"There is no {key} setting.")

            self.line(json.dumps(settings[key]))

            return 0

        for setting, value in sorted(settings.items()):
            self.line(f"<c1>{setting}</> = <c2>{json.dumps(value)}</>")

        return 0
