from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from cleo.commands.command import Command as BaseCommand
from cleo.exceptions import CleoValueError

from string_utilities.config.config import char_validator
from string_utilities.console.exceptions import StringUtilitiesConsoleError


if TYPE_CHECKING:
    from string_utilities.config.config import Config
    from string_utilities.console.application import Application


class Command(BaseCommand):
    loggers: ClassVar[list[str]] = []

    @property
    def config(self) -> Config:
        return self.get_application().config

    def get_application(self) -> Application:
        from string_utilities.console.application import Application

        application = self.application
        assert isinstance(application, Application)
        return application

    def option(self, name: str, default: Any = None) -> Any:
        try:
            return super().option(name)
        except CleoValueError:
            return default

    def char_option(self, name: str, setting_name: str) -> str:
        """
        Return the single character given with an option, falling back to
        the configured setting.
        """
        value = self.option(name)
        if value is None:
            return self.config.get_char(setting_name)

        if not char_validator(value):
            raise StringUtilitiesConsoleError(
                f"The --{name} option must be a single character, got {value!r}"
            )

        char: str = value
        return char

    def position_option(self, name: str) -> int:
        value = self.option(name)
        if value is None:
            return 0

        try:
            return int(value)
        except ValueError:
            raise StringUtilitiesConsoleError(
                f"The --{name} option must be an integer, got {value!r}"
            )

    def line_failure(self, message: str) -> int:
        self.line_error(f"<error>{message}</error>")

        return 1
