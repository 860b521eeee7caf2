from __future__ import annotations

import logging
import os

from copy import deepcopy
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

import tomlkit

from tomlkit.exceptions import TOMLKitError

from string_utilities.locations import CONFIG_DIR


if TYPE_CHECKING:
    from pathlib import Path


ENV_PREFIX = "STRUTIL_"

logger = logging.getLogger(__name__)

_default_config: Config | None = None


class ConfigError(ValueError):
    pass


def char_validator(val: Any) -> bool:
    return isinstance(val, str) and len(val) == 1


def read_config_file(path: Path) -> dict[str, Any]:
    try:
        document = tomlkit.parse(path.read_text(encoding="utf-8"))
    except (ValueError, TOMLKitError) as e:
        raise ConfigError(f"Invalid TOML file {path.as_posix()}: {e}") from e

    settings: dict[str, Any] = document.unwrap()
    return settings


class Config:
    default_config: ClassVar[dict[str, Any]] = {
        "quote-char": '"',
        "brackets": {
            "left": "(",
            "right": ")",
        },
        "options": {
            "indicator": "-",
            "alternate-indicator": "+",
        },
    }

    def __init__(self, use_environment: bool = True) -> None:
        self._config = deepcopy(self.default_config)
        self._use_environment = use_environment

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def merge(self, config: dict[str, Any]) -> None:
        from string_utilities.utils.helpers import merge_dicts

        merge_dicts(self._config, config)

    def all(self) -> dict[str, Any]:
        def _all(config: dict[str, Any], parent_key: str = "") -> dict[str, Any]:
            all_ = {}

            for key in config:
                value = self.get(parent_key + key)
                if isinstance(value, dict):
                    all_[key] = _all(config[key], parent_key=parent_key + key + ".")
                    continue

                all_[key] = value

            return all_

        return _all(self.config)

    def get(self, setting_name: str, default: Any = None) -> Any:
        """
        Retrieve a setting value.

        A STRUTIL_* environment variable takes precedence over the
        configuration, e.g. STRUTIL_OPTIONS_INDICATOR for options.indicator.
        """
        keys = setting_name.split(".")

        if self._use_environment:
            env = ENV_PREFIX + "_".join(k.upper().replace("-", "_") for k in keys)
            env_value = os.getenv(env)
            if env_value is not None:
                return env_value

        value = self._config
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                return default

            value = value[key]

        if self._use_environment and isinstance(value, dict):
            return {k: self.get(f"{setting_name}.{k}") for k in value}

        return value

    def get_char(self, setting_name: str) -> str:
        """
        Retrieve a setting that must be a single character.
        """
        value = self.get(setting_name)
        if not char_validator(value):
            raise ConfigError(
                f"The {setting_name} setting must be a single character,"
                f" got {value!r}"
            )

        char: str = value
        return char

    @classmethod
    def create(cls, reload: bool = False) -> Config:
        global _default_config

        if _default_config is None or reload:
            _default_config = cls()

            config_file = CONFIG_DIR / "config.toml"
            if config_file.exists():
                logger.debug("Loading configuration file %s", config_file)
                _default_config.merge(read_config_file(config_file))

        return _default_config
