"""Token based rendering of Jalaali date/time values.

Supported tokens (longest match wins, so ``MM`` is never read as two ``M``)::

    yyyy  four digit year          yy    year % 100, zero padded
    MMMM  Persian month name       MM/M  month, padded / unpadded
    dddd  Persian weekday name     dd/d  day, padded / unpadded
    HH/H  24-hour clock            hh/h  12-hour clock (hour - 12 above 12)
    mm/m  minute                   ss/s  second
    fff   millisecond              ff    millisecond / 10     f  millisecond / 100
    tt    ق.ظ or ب.ظ               t     first letter of ``tt``

Any other text is copied unchanged.
"""
from __future__ import annotations

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .date_time import JalaaliDateTime

__all__ = [
    "DEFAULT_PATTERN",
    "elapsed_time",
    "format_datetime",
    "to_long_date_string",
    "to_long_date_time_string",
    "to_long_time_string",
    "to_short_date_string",
    "to_short_date_time_string",
    "to_short_time_string",
]

DEFAULT_PATTERN = "yyyy/MM/dd HH:mm:ss"

_ONE = Decimal(1)

_RENDERERS: Dict[str, Callable[["JalaaliDateTime"], str]] = {
    "yyyy": lambda value: str(value.year),
    "yy": lambda value: f"{value.short_year:02d}",
    "MMMM": lambda value: value.month_name,
    "MM": lambda value: f"{value.month:02d}",
    "M": lambda value: str(value.month),
    "dddd": lambda value: value.long_day_of_week_name,
    "dd": lambda value: f"{value.day:02d}",
    "d": lambda value: str(value.day),
    "HH": lambda value: f"{value.hour:02d}",
    "H": lambda value: str(value.hour),
    "hh": lambda value: f"{value.short_hour:02d}",
    "h": lambda value: str(value.short_hour),
    "mm": lambda value: f"{value.minute:02d}",
    "m": lambda value: str(value.minute),
    "ss": lambda value: f"{value.second:02d}",
    "s": lambda value: str(value.second),
    "fff": lambda value: f"{value.millisecond:03d}",
    "ff": lambda value: f"{value.millisecond // 10:02d}",
    "f": lambda value: str(value.millisecond // 100),
    "tt": lambda value: value.am_pm,
    "t": lambda value: value.am_pm[0],
}

_TOKEN_REGEX = re.compile(
    "|".join(re.escape(token) for token in sorted(_RENDERERS, key=len, reverse=True))
)


def format_datetime(value: "JalaaliDateTime", pattern: Optional[str] = None) -> str:
    """Render ``value`` with ``pattern`` (``yyyy/MM/dd HH:mm:ss`` when empty)."""

    if not pattern:
        pattern = DEFAULT_PATTERN
    return _TOKEN_REGEX.sub(lambda match: _RENDERERS[match.group(0)](value), pattern.strip())


def to_short_date_string(value: "JalaaliDateTime") -> str:
    """``1393/09/14``"""

    return f"{value.year:04d}/{value.month:02d}/{value.day:02d}"


def to_long_date_string(value: "JalaaliDateTime") -> str:
    """``جمعه، 14 آذر 1393``"""

    return f"{value.long_day_of_week_name}، {value.day:02d} {value.month_name} {value.year:04d}"


def to_long_date_time_string(value: "JalaaliDateTime") -> str:
    """``جمعه، 14 آذر 1393 ساعت 13:50:27``"""

    return (
        f"{to_long_date_string(value)} ساعت "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def to_short_date_time_string(value: "JalaaliDateTime") -> str:
    """``جمعه، 14 آذر 1393 13:50``"""

    return f"{to_long_date_string(value)} {value.hour:02d}:{value.minute:02d}"


def to_short_time_string(value: "JalaaliDateTime") -> str:
    """``01:50 ب.ظ``"""

    return f"{value.short_hour:02d}:{value.minute:02d} {value.am_pm}"


def to_long_time_string(value: "JalaaliDateTime") -> str:
    """``13:50:20``"""

    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def elapsed_time(value: "JalaaliDateTime", now: Optional[datetime] = None) -> str:
    """Describe how long ago ``value`` was, e.g. ``3 روز قبل``.

    Anything older than 90 days is shown as a short date-time string instead.
    """

    if now is None:
        now = datetime.now()
    elapsed = now - value.instant
    total_days = elapsed.total_seconds() / 86400
    if total_days > 90:
        return to_short_date_time_string(value)
    if total_days > 30:
        return f"{_round_half_up(total_days / 30)} ماه قبل"
    if total_days >= 1:
        return f"{_round_half_up(total_days)} روز قبل"
    total_hours = elapsed.total_seconds() / 3600
    if total_hours >= 1:
        return f"{_round_half_up(total_hours)} ساعت قبل"
    minutes = max(elapsed.total_seconds() / 60, 1)
    return f"{_round_half_up(minutes)} دقیقه قبل"


def _round_half_up(amount: float) -> int:
    return int(Decimal(amount).quantize(_ONE, rounding=ROUND_HALF_UP))
