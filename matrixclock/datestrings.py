"""English month and weekday names, indexed as the clock counts them.

Months run from 1 (January) to 12; weekdays from 1 (Sunday) to 7.
Index 0 is a placeholder: an empty month name and "Err" elsewhere.
"""

from __future__ import annotations

SHORT_STR_LEN = 3

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_MONTH_SHORT_NAMES = "ErrJanFebMarAprMayJunJulAugSepOctNovDec"

_DAY_NAMES = (
    "Err",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
_DAY_SHORT_NAMES = "ErrSunMonTueWedThuFriSat"


def _check(value: int, last: int, what: str) -> None:
    if not 0 <= value <= last:
        raise ValueError(f"{what} must be between 0 and {last}, got {value}")


def _short(table: str, index: int) -> str:
    start = index * SHORT_STR_LEN
    return table[start : start + SHORT_STR_LEN]


def month_str(month: int) -> str:
    """Full name of a month."""
    _check(month, len(_MONTH_NAMES) - 1, "month")
    return _MONTH_NAMES[month]


def month_short_str(month: int) -> str:
    """Three-letter name of a month."""
    _check(month, len(_MONTH_NAMES) - 1, "month")
    return _short(_MONTH_SHORT_NAMES, month)


def day_str(day: int) -> str:
    """Full name of a weekday."""
    _check(day, len(_DAY_NAMES) - 1, "day")
    return _DAY_NAMES[day]


def day_short_str(day: int) -> str:
    """Three-letter name of a weekday."""
    _check(day, len(_DAY_NAMES) - 1, "day")
    return _short(_DAY_SHORT_NAMES, day)