from __future__ import annotations

import logging

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from logging import LogRecord

    from cleo.io.io import IO


class IOHandler(logging.Handler):
    """
    Write log records to a cleo IO.

    Records at error_level or above go to the error output.
    """

    def __init__(self, io: IO, error_level: int = logging.WARNING) -> None:
        super().__init__()

        self._io = io
        self._error_level = error_level

    @property
    def error_level(self) -> int:
        return self._error_level

    def emit(self, record: LogRecord) -> None:
        try:
            write = (
                self._io.write_error_line
                if record.levelno >= self._error_level
                else self._io.write_line
            )
            write(self.format(record))
        except Exception:
            self.handleError(record)
