"""Hijri (tabular Islamic) calendar service backed by ``convertdate``.

``adjustment`` shifts the lunar calendar by whole days to follow local moon
sighting: a positive value moves every Hijri date earlier in Gregorian time.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import NamedTuple

from convertdate import islamic

from .errors import RangeError

__all__ = [
    "HijriDate",
    "MAX_ADJUSTMENT",
    "MIN_ADJUSTMENT",
    "check_adjustment",
    "fields_of",
    "hijri_year_of",
    "to_instant",
]

MIN_ADJUSTMENT = -2
MAX_ADJUSTMENT = 2


class HijriDate(NamedTuple):
    year: int
    month: int
    day: int


def check_adjustment(adjustment: int) -> int:
    if not MIN_ADJUSTMENT <= int(adjustment) <= MAX_ADJUSTMENT:
        raise RangeError(
            f"hijri adjustment must be in {MIN_ADJUSTMENT}..{MAX_ADJUSTMENT}, got {adjustment}"
        )
    return int(adjustment)


def fields_of(instant: datetime, adjustment: int = 0) -> HijriDate:
    days = check_adjustment(adjustment)
    try:
        shifted = instant.date() + timedelta(days=days)
    except (ValueError, OverflowError) as exc:
        raise RangeError(f"{instant:%Y-%m-%d} shifted by {days} days is outside the supported range") from exc
    return HijriDate(*islamic.from_gregorian(shifted.year, shifted.month, shifted.day))


def hijri_year_of(instant: datetime, adjustment: int = 0) -> int:
    return fields_of(instant, adjustment).year


def to_instant(year: int, month: int, day: int, adjustment: int = 0) -> datetime:
    """Midnight of the given Hijri date as a Gregorian instant."""

    if not 1 <= month <= 12:
        raise RangeError(f"hijri month must be in 1..12, got {month}")
    if not 1 <= day <= islamic.month_length(year, month):
        raise RangeError(f"hijri day {day} is not valid for {year}/{month}")
    gy, gm, gd = islamic.to_gregorian(year, month, day)
    try:
        shifted = date(gy, gm, gd) - timedelta(days=check_adjustment(adjustment))
    except (ValueError, OverflowError) as exc:
        raise RangeError(f"hijri date {year}/{month}/{day} is outside the supported range") from exc
    return datetime(shifted.year, shifted.month, shifted.day)
