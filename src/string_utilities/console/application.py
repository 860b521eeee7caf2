from __future__ import annotations

import logging

from importlib import import_module
from typing import TYPE_CHECKING

from cleo.application import Application as BaseApplication
from cleo.events.console_command_event import ConsoleCommandEvent
from cleo.events.console_events import COMMAND
from cleo.events.event_dispatcher import EventDispatcher
from cleo.formatters.formatter import Formatter
from cleo.formatters.style import Style
from cleo.loaders.factory_command_loader import FactoryCommandLoader

from string_utilities.__version__ import __version__
from string_utilities.config.config import ConfigError
from string_utilities.console.commands.command import Command
from string_utilities.console.exceptions import StringUtilitiesConsoleError


if TYPE_CHECKING:
    from collections.abc import Callable

    from cleo.events.event import Event
    from cleo.io.inputs.input import Input
    from cleo.io.io import IO
    from cleo.io.outputs.output import Output

    from string_utilities.config.config import Config


def load_command(name: str) -> Callable[[], Command]:
    def _load() -> Command:
        words = name.split(" ")
        module = import_module("string_utilities.console.commands." + ".".join(words))
        command_class = getattr(module, "".join(c.title() for c in words) + "Command")
        command: Command = command_class()
        return command

    return _load


COMMANDS = [
    "about",
    "bracketed",
    "config",
    "name",
    "quoted",
    "regex",
    "scan",
    "unquoted",
    "usage",
]


class Application(BaseApplication):
    def __init__(self) -> None:
        super().__init__("strutil", __version__)

        self._config: Config | None = None

        dispatcher = EventDispatcher()
        dispatcher.add_listener(COMMAND, self.register_command_loggers)
        self.set_event_dispatcher(dispatcher)

        command_loader = FactoryCommandLoader(
            {name: load_command(name) for name in COMMANDS}
        )
        self.set_command_loader(command_loader)

    @property
    def config(self) -> Config:
        from string_utilities.config.config import Config

        if self._config is None:
            self._config = Config.create()

        return self._config

    def set_config(self, config: Config) -> None:
        self._config = config

    def create_io(
        self,
        input: Input | None = None,
        output: Output | None = None,
        error_output: Output | None = None,
    ) -> IO:
        io = super().create_io(input, output, error_output)

        formatter = io.output.formatter
        formatter.set_style("c1", Style("cyan"))
        formatter.set_style("c2", Style("default", options=["bold"]))
        formatter.set_style("info", Style("blue"))
        formatter.set_style("comment", Style("green"))
        formatter.set_style("warning", Style("yellow"))
        formatter.set_style("debug", Style("default", options=["dark"]))
        formatter.set_style("success", Style("green"))

        io.output.set_formatter(formatter)
        io.error_output.set_formatter(formatter)

        return io

    def _run(self, io: IO) -> int:
        try:
            exit_code: int = super()._run(io)
        except (StringUtilitiesConsoleError, ConfigError) as e:
            io.write_error_line(f"<error>{Formatter.escape(str(e))}</error>")
            return 1

        return exit_code

    def register_command_loggers(
        self, event: Event, event_name: str, _: EventDispatcher
    ) -> None:
        from string_utilities.console.logging.filters import STRUTIL_FILTER
        from string_utilities.console.logging.io_formatter import IOFormatter
        from string_utilities.console.logging.io_handler import IOHandler

        assert isinstance(event, ConsoleCommandEvent)
        command = event.command
        if not isinstance(command, Command):
            return

        io = event.io

        loggers = ["string_utilities.config.config", *command.loggers]

        handler = IOHandler(io)
        handler.setFormatter(IOFormatter())

        level = logging.WARNING

        if io.is_debug():
            level = logging.DEBUG
        elif io.is_very_verbose() or io.is_verbose():
            level = logging.INFO

        logging.basicConfig(level=level, handlers=[handler])

        # only log third-party packages when very verbose
        if not io.is_very_verbose():
            handler.addFilter(STRUTIL_FILTER)

        for name in loggers:
            logging.getLogger(name).setLevel(level)


def main() -> int:
    exit_code: int = Application().run()
    return exit_code


if __name__ == "__main__":
    main()
