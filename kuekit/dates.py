"""Date and time parsing and formatting helpers."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from fractions import Fraction
from zoneinfo import ZoneInfo

MAKASSAR = ZoneInfo("Asia/Makassar")

_DATETIME = ("%Y-%m-%d %H:%M:%S", re.compile(r"\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}:\d{2}", re.ASCII))
_DATE = ("%Y-%m-%d", re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII))
_DATE_COMPACT = ("%Y%m%d", re.compile(r"\d{8}", re.ASCII))
_DATETIME_MONTH = (
    "%d-%b-%y %H:%M:%S",
    re.compile(r"\d{2}-[A-Za-z]{3}-\d{2} \d{1,2}:\d{2}:\d{2}", re.ASCII),
)

_FORMAT_TYPES = {"2": _DATE, "3": _DATE_COMPACT, "4": _DATETIME_MONTH}


def _parse(text: str, layout: tuple[str, re.Pattern[str]]) -> datetime:
    """Parse text strictly against a layout; raise ValueError on mismatch."""
    fmt, shape = layout
    if not shape.fullmatch(text):
        raise ValueError(f"cannot parse {text!r} as {fmt!r}")
    return datetime.strptime(text, fmt)


def _format_datetime(value: datetime) -> str:
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def string_to_time(time_string: str, format_type: str) -> datetime:
    """Parse a time in the Asia/Makassar zone.

    format_type "2" is "YYYY-MM-DD", "3" is "YYYYMMDD", "4" is
    "DD-Mon-YY HH:MM:SS"; anything else is "YYYY-MM-DD HH:MM:SS".
    """
    layout = _FORMAT_TYPES.get(format_type, _DATETIME)
    return _parse(time_string, layout).replace(tzinfo=MAKASSAR)


def time_to_string(value: datetime) -> str:
    """Format a time as "YYYY-MM-DD HH:MM:SS" in its own zone."""
    return _format_datetime(value)


def string_to_date_wita(value: str) -> datetime:
    """Parse "YYYY-MM-DD" as a UTC date and express it in Asia/Makassar."""
    parsed = _parse(value, _DATE).replace(tzinfo=timezone.utc)
    return parsed.astimezone(MAKASSAR)


def date_to_string_wita(value: datetime) -> str:
    """Format the Asia/Makassar calendar date of a time as "YYYY-MM-DD"."""
    return value.astimezone(MAKASSAR).date().isoformat()


def split_string_to_time(time_string: str) -> datetime:
    """Parse the "YYYY-MM-DD HH:MM:SS" part following "TRX" in Asia/Makassar."""
    parts = time_string.split("TRX")
    if len(parts) < 2:
        raise ValueError(f"no 'TRX' marker in {time_string!r}")
    return _parse(parts[1], _DATETIME).replace(tzinfo=MAKASSAR)


def parse_to_datetime(date: str) -> datetime:
    """Parse "YYYY-MM-DD HH:MM:SS" as local time; 0001-01-01 00:00:00 on failure."""
    try:
        return _parse(date, _DATETIME)
    except ValueError:
        return datetime(1, 1, 1)


def get_before_date_string(value: str) -> str:
    """Return the day before a "YYYY-MM-DD" date, in the same format."""
    day: date = _parse(value, _DATE).date()
    return (day - timedelta(days=1)).isoformat()


_UNITS_NS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_DURATION_PART = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_MAX_NS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "300ms", "-1.5h" or "2h45m".

    Valid units are ns, us (or µs), ms, s, m and h. Precision below a
    microsecond is dropped.
    """
    rest = text
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        whole, frac, unit = match.groups()
        if not whole and not frac:
            raise ValueError(f"invalid duration {text!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {text!r}")
        if unit not in _UNITS_NS:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")
        amount = Fraction(int(whole or "0"))
        if frac:
            amount += Fraction(int(frac), 10 ** len(frac))
        total += amount * _UNITS_NS[unit]
        pos = match.end()

    nanoseconds = int(total)
    limit = _MAX_NS + 1 if negative else _MAX_NS
    if nanoseconds > limit:
        raise ValueError(f"invalid duration {text!r}")
    result = timedelta(microseconds=nanoseconds // 1000)
    return -result if negative else result