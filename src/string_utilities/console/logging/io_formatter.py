from __future__ import annotations

import logging
import sys
import textwrap

from pathlib import Path
from typing import TYPE_CHECKING

from string_utilities.console.logging.filters import STRUTIL_FILTER


if TYPE_CHECKING:
    from logging import LogRecord


class IOFormatter(logging.Formatter):
    _colors = {
        "critical": "error",
        "error": "error",
        "warning": "warning",
        "info": "info",
        "debug": "debug",
    }

    def format(self, record: LogRecord) -> str:
        if not record.exc_info:
            level = record.levelname.lower()
            if level in self._colors:
                record.msg = f"<{self._colors[level]}>{record.msg}</>"

        formatted = super().format(record)

        if not STRUTIL_FILTER.filter(record):
            # records from other packages are prefixed with their origin
            formatted = textwrap.indent(
                formatted, f"[{_log_prefix(record)}] ", lambda line: True
            )

        return formatted


def _log_prefix(record: LogRecord) -> str:
    package = _path_to_package(Path(record.pathname)) or record.module
    if record.name == "root":
        return package

    return f"{package}:{record.name}"


def _path_to_package(path: Path) -> str | None:
    """Return the top-level package a module path belongs to."""
    prefix: Path | None = None
    # the most specific sys.path entry containing the path wins
    for entry in map(Path, sys.path):
        if entry in path.parents and (prefix is None or prefix in entry.parents):
            prefix = entry

    if prefix is None:
        return None

    return path.relative_to(prefix).parts[0]
