from __future__ import annotations

import dataclasses

from typing import TYPE_CHECKING

from string_utilities.options.exceptions import OptionScanError


if TYPE_CHECKING:
    from string_utilities.options.user import OptionUser


@dataclasses.dataclass
class Option:
    """
    A single option character as declared in an option string, together with
    the values found for it while scanning arguments.
    """

    char: str
    required: bool = False
    allows_alternate: bool = False
    takes_argument: bool = False
    argument_label: str | None = None
    alternate_argument_label: str | None = None
    owner: OptionUser | None = dataclasses.field(
        default=None, repr=False, compare=False
    )

    is_set: bool = dataclasses.field(default=False, init=False)
    is_set_via_alternate: bool = dataclasses.field(default=False, init=False)
    value: str | None = dataclasses.field(default=None, init=False)
    alternate_value: str | None = dataclasses.field(default=None, init=False)

    @property
    def takes_alternate_argument(self) -> bool:
        return self.takes_argument and self.allows_alternate

    @property
    def is_satisfied(self) -> bool:
        return self.is_set or (self.allows_alternate and self.is_set_via_alternate)

    def mark_set(self, value: str | None = None, alternate: bool = False) -> None:
        if alternate:
            if not self.allows_alternate:
                raise OptionScanError(
                    f"option '{self.char}' does not allow the alternate indicator"
                )

            self.is_set_via_alternate = True
            self.alternate_value = value
        else:
            self.is_set = True
            self.value = value
