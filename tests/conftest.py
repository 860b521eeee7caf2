from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cleo.testers.application_tester import ApplicationTester
from cleo.testers.command_tester import CommandTester

from string_utilities.config.config import Config
from string_utilities.console.application import Application


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from pytest_mock import MockerFixture

    from tests.types import CommandTesterFactory


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, mocker: MockerFixture) -> Path:
    path = tmp_path / "config"
    path.mkdir()
    mocker.patch("string_utilities.config.config.CONFIG_DIR", path)
    return path


@pytest.fixture(autouse=True)
def reset_default_config(mocker: MockerFixture) -> Iterator[None]:
    mocker.patch("string_utilities.config.config._default_config", None)
    yield


@pytest.fixture
def config() -> Config:
    return Config(use_environment=False)


@pytest.fixture
def app(config: Config) -> Application:
    app_ = Application()
    app_.set_config(config)
    return app_


@pytest.fixture
def app_tester(app: Application) -> ApplicationTester:
    return ApplicationTester(app)


@pytest.fixture
def command_tester_factory(app: Application) -> CommandTesterFactory:
    def _tester(command: str, config: Config | None = None) -> CommandTester:
        if config is not None:
            app.set_config(config)

        command_obj = app.find(command)
        tester = CommandTester(command_obj)

        # Setting the formatter from the application
        app_io = app.create_io()
        formatter = app_io.output.formatter
        tester.io.output.set_formatter(formatter)
        tester.io.error_output.set_formatter(formatter)

        return tester

    return _tester
