from __future__ import annotations

from string_utilities.names.name import Name


__all__ = ["Name"]
