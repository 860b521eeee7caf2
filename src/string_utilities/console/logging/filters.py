from __future__ import annotations

import logging


STRUTIL_FILTER = logging.Filter(name="string_utilities")
