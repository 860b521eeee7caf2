from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> None:
    for k in d2:
        if k in d1 and isinstance(d1[k], dict) and isinstance(d2[k], Mapping):
            merge_dicts(d1[k], d2[k])
        else:
            d1[k] = d2[k]


def flatten_dict(obj: Mapping[str, Any], delimiter: str = ".") -> dict[str, Any]:
    """
    Flatten a nested dict, joining the keys of nested values with delimiter.
    """
    flattened: dict[str, Any] = {}

    for key, value in obj.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in flatten_dict(value, delimiter).items():
                flattened[f"{key}{delimiter}{sub_key}"] = sub_value
        else:
            flattened[key] = value

    return flattened
