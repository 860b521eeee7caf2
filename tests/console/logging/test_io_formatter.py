from __future__ import annotations

import logging

from logging import LogRecord
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from string_utilities.console.logging.io_formatter import IOFormatter
from string_utilities.console.logging.io_formatter import _log_prefix
from string_utilities.console.logging.io_formatter import _path_to_package


if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.mark.parametrize(
    ("record_name", "record_pathname", "record_msg", "expected"),
    [
        ("string_utilities", "foo/bar.py", "msg", "msg"),
        ("string_utilities.options.scanner", "foo/bar.py", "msg", "msg"),
        ("baz", "syspath/foo/bar.py", "msg", "[foo:baz] msg"),
        ("root", "syspath/foo/bar.py", "1\n\n2", "[foo] 1\n[foo] \n[foo] 2"),
    ],
)
def test_format(
    mocker: MockerFixture,
    record_name: str,
    record_pathname: str,
    record_msg: str,
    expected: str,
) -> None:
    mocker.patch("sys.path", [str(Path("syspath"))])
    record = LogRecord(record_name, 0, record_pathname, 0, record_msg, (), None)
    formatter = IOFormatter()
    assert formatter.format(record) == expected


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.DEBUG, "<debug>msg</>"),
        (logging.INFO, "<info>msg</>"),
        (logging.WARNING, "<warning>msg</>"),
        (logging.ERROR, "<error>msg</>"),
        (logging.CRITICAL, "<error>msg</>"),
    ],
)
def test_format_colors_by_level(level: int, expected: str) -> None:
    record = LogRecord("string_utilities", level, "foo/bar.py", 0, "msg", (), None)
    assert IOFormatter().format(record) == expected


def test_format_interpolates_arguments() -> None:
    record = LogRecord(
        "string_utilities", logging.INFO, "foo/bar.py", 0, "set %s", ("-a",), None
    )
    assert IOFormatter().format(record) == "<info>set -a</>"


@pytest.mark.parametrize(
    ("record_name", "record_pathname", "expected"),
    [
        ("root", "syspath/foo/bar.py", "foo"),
        ("baz", "syspath/foo/bar.py", "foo:baz"),
        ("baz", "unexpected/foo/bar.py", "bar:baz"),
    ],
)
def test_log_prefix(
    mocker: MockerFixture,
    record_name: str,
    record_pathname: str,
    expected: str,
) -> None:
    mocker.patch("sys.path", [str(Path("syspath"))])
    record = LogRecord(record_name, 0, record_pathname, 0, "msg", (), None)
    assert _log_prefix(record) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("python-l/lib/python3.12/site-packages/foo/bar/baz.py", "foo"),
        ("python-w/lib/site-packages/foo/bar/baz.py", "foo"),
        ("unexpected/foo/bar/baz.py", None),
    ],
)
def test_path_to_package(
    mocker: MockerFixture, path: str, expected: str | None
) -> None:
    mocker.patch(
        "sys.path",
        [
            str(Path("python-l/lib/python3.12/site-packages")),
            str(Path("python-w")),
            str(Path("python-w/other")),
            str(Path("python-w/lib/site-packages")),
            str(Path("python-w/lib")),
        ],
    )
    assert _path_to_package(Path(path)) == expected
