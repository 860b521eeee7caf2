from __future__ import annotations

import os

from typing import TYPE_CHECKING

import pytest

from string_utilities.console.exceptions import StringUtilitiesConsoleError


if TYPE_CHECKING:
    from cleo.testers.command_tester import CommandTester
    from pytest_mock import MockerFixture

    from string_utilities.config.config import Config
    from tests.types import CommandTesterFactory


@pytest.fixture
def tester(command_tester_factory: CommandTesterFactory) -> CommandTester:
    return command_tester_factory("config")


def test_list_displays_default_value_if_not_set(tester: CommandTester) -> None:
    tester.execute()

    expected = """\
brackets.left = "("
brackets.right = ")"
options.alternate-indicator = "+"
options.indicator = "-"
quote-char = "\\""
"""
    assert tester.io.fetch_output() == expected


def test_list_displays_set_values(
    command_tester_factory: CommandTesterFactory, config: Config
) -> None:
    config.merge({"brackets": {"left": "[", "right": "]"}})
    tester = command_tester_factory("config", config=config)

    tester.execute()

    output = tester.io.fetch_output()
    assert 'brackets.left = "["\n' in output
    assert 'brackets.right = "]"\n' in output


def test_list_includes_environment_values(
    command_tester_factory: CommandTesterFactory, mocker: MockerFixture
) -> None:
    from string_utilities.config.config import Config

    mocker.patch.dict(os.environ, {"STRUTIL_OPTIONS_INDICATOR": "/"})
    tester = command_tester_factory("config", config=Config())

    tester.execute()

    assert 'options.indicator = "/"\n' in tester.io.fetch_output()


def test_display_single_setting(tester: CommandTester) -> None:
    status = tester.execute("options.indicator")

    assert status == 0
    assert tester.io.fetch_output() == '"-"\n'


def test_display_unknown_setting(tester: CommandTester) -> None:
    with pytest.raises(StringUtilitiesConsoleError) as e:
        tester.execute("foo.bar")

    assert str(e.value) == "There is no foo.bar setting."
