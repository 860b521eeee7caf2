from __future__ import annotations

import os

from pathlib import Path

from platformdirs import user_config_path


_APP_NAME = "string-utilities"

CONFIG_DIR = Path(
    os.getenv("STRUTIL_CONFIG_DIR")
    or user_config_path(_APP_NAME, appauthor=False, roaming=True)
)
