from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from string_utilities.options.option import Option


class OptionUser(ABC):
    """
    Base class for components that declare options of their own on a shared
    OptionScanner.

    The scanner hands each user its own options once the option table is
    frozen, its own usage fragment whenever a usage string is built, and
    notifies it after a successful scan.
    """

    def __init__(self) -> None:
        self.options: list[Option] = []
        self.usage_string = ""

    def set_options(self, options: list[Option]) -> None:
        self.options = options

    def set_usage_string(self, usage_string: str) -> None:
        self.usage_string = usage_string

    @abstractmethod
    def on_usage_string_ready(self, usage_string: str) -> None: ...

    @abstractmethod
    def on_options_ready(self) -> None: ...
