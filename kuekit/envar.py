"""Typed environment variable lookup with defaults."""

from __future__ import annotations

import os
from typing import TypeVar

from kuekit.numbers import str_to_int

T = TypeVar("T", int, bool, str)

_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}


def get_env(key: str, default: T) -> T:
    """Read an environment variable, parsed to the type of default.

    The default is returned when the variable is unset, blank, or does not
    parse as that type.
    """
    value = os.environ.get(key, "").strip()

    if isinstance(default, bool):
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        return default
    if isinstance(default, int):
        return str_to_int(value, default)
    if isinstance(default, str):
        return value if value else default
    raise TypeError(f"unsupported default type: {type(default).__name__}")