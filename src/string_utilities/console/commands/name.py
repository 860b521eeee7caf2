from __future__ import annotations

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from string_utilities.console.commands.command import Command


class NameCommand(Command):
    name = "name"

    description = "Formats a person's name."

    arguments = [
        argument(
            "name",
            "The name, family name first, or only the family name with"
            " <c1>--given</>.",
        )
    ]

    options = [
        option("given", "g", "The given names.", flag=False),
        option(
            "family-to-front",
            "f",
            "Move the last word of the name, the family name, to the front first.",
        ),
        option("check", "c", "Only check that the name holds allowed characters."),
    ]

    def handle(self) -> int:
        from string_utilities.names.name import Name

        raw_name = self.argument("name")

        if self.option("check"):
            if not Name.check(raw_name):
                return self.line_failure(
                    f"<c1>{Formatter.escape(raw_name)}</> contains characters"
                    " not allowed in a name"
                )

            self.line(f"<c1>{Formatter.escape(raw_name)}</> is a valid name")

            return 0

        if self.option("family-to-front"):
            raw_name = Name.family_to_front(raw_name)

        given = self.option("given")
        if given is not None:
            name = Name(family_name=raw_name, given_names=given)
        else:
            name = Name(raw_name)

        self.line(f"Name: <c1>{Formatter.escape(name.name)}</>")
        self.line(f"Family name: <c2>{Formatter.escape(name.family_name)}</>")
        self.line(f"Given names: <c2>{Formatter.escape(name.given_names)}</>")

        return 0
