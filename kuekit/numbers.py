"""Lenient number parsing and float helpers."""

from __future__ import annotations

import math
import re

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1

FLOAT64_EQUALITY_THRESHOLD = 0.1


def _parse(text: str, pattern: re.Pattern[str], low: int, high: int, default: int) -> int:
    if text == "" or not pattern.fullmatch(text):
        return default
    number = int(text)
    return number if low <= number <= high else default


def str_to_int(text: str, default: int) -> int:
    """Parse a decimal integer, returning default when empty or invalid."""
    return _parse(text, _SIGNED, _INT64_MIN, _INT64_MAX, default)


def str_to_int64(text: str, default: int) -> int:
    """Parse a signed 64-bit decimal integer, returning default when invalid."""
    return _parse(text, _SIGNED, _INT64_MIN, _INT64_MAX, default)


def str_to_uint64(text: str, default: int) -> int:
    """Parse an unsigned 64-bit decimal integer, returning default when invalid."""
    return _parse(text, _UNSIGNED, 0, _UINT64_MAX, default)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    whole = float(math.trunc(value))
    if abs(value - whole) >= 0.5:
        whole += math.copysign(1.0, value)
    return whole


def round_float64(value: float, precision: int) -> float:
    """Round to the given number of decimal digits, halves away from zero."""
    ratio = math.pow(10, precision)
    return _round_half_away(value * ratio) / ratio


def almost_equal(a: float, b: float) -> bool:
    """Return True when two floats differ by at most 0.1."""
    return abs(a - b) <= FLOAT64_EQUALITY_THRESHOLD