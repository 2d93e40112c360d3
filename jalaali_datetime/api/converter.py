"""Gregorian ↔ Jalaali calendar conversion service.

Dates are mapped through a running Jalaali day number based on the 33-year
cycle arithmetic (8 leap years per cycle).  Every ``instant`` handled here is a
naive :class:`datetime.datetime`.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, NamedTuple, Tuple, Union

from .errors import ConversionError, FormatError, RangeError
from .names import DayOfWeek

__all__ = [
    "CalendarFields",
    "JalaaliDate",
    "MAX_YEAR",
    "MIN_SUPPORTED_INSTANT",
    "MIN_YEAR",
    "add_days",
    "add_months",
    "add_years",
    "coerce_gregorian",
    "coerce_instant",
    "coerce_jalali",
    "day_of_week",
    "day_of_year",
    "days_in_month",
    "fields_of",
    "gregorian_to_jalali",
    "is_jalali_leap",
    "jalali_to_gregorian",
    "to_instant",
    "week_of_year",
]

MIN_YEAR = 1
MAX_YEAR = 9378

# Jalaali 979/01/01 is 1600-03-20, 79 days after the Gregorian anchor.
_ANCHOR_ORDINAL = date(1600, 1, 1).toordinal()
_ANCHOR_OFFSET = 79
_CYCLE_DAYS = 12053  # 33 * 365 + 8
_QUAD_DAYS = 1461

MIN_SUPPORTED_INSTANT = datetime(622, 3, 22)


class JalaaliDate(NamedTuple):
    """Plain (year, month, day) triple in the Jalaali calendar."""

    year: int
    month: int
    day: int

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"


class CalendarFields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


def _jalali_day_number(year: int, month: int, day: int) -> int:
    jy = year - 979
    days = 365 * jy + jy // 33 * 8 + ((jy % 33) + 3) // 4
    if month <= 7:
        days += (month - 1) * 31
    else:
        days += 186 + (month - 7) * 30
    return days + day - 1


def _jalali_from_day_number(days: int) -> Tuple[int, int, int]:
    year = 979 + 33 * (days // _CYCLE_DAYS)
    days %= _CYCLE_DAYS
    year += 4 * (days // _QUAD_DAYS)
    days %= _QUAD_DAYS
    if days >= 366:
        year += (days - 1) // 365
        days = (days - 1) % 365
    if days < 186:
        return year, 1 + days // 31, 1 + days % 31
    days -= 186
    return year, 7 + days // 30, 1 + days % 30


def _ordinal_of(year: int, month: int, day: int) -> int:
    return _ANCHOR_ORDINAL + _ANCHOR_OFFSET + _jalali_day_number(year, month, day)


def is_jalali_leap(year: int) -> bool:
    return _jalali_day_number(year + 1, 1, 1) - _jalali_day_number(year, 1, 1) == 366


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise RangeError(f"month must be in 1..12 for Jalaali calendar, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap(year) else 29


def coerce_gregorian(value: Union[str, date, datetime, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        tokens = value.replace("/", "-").split("-")
        if len(tokens) != 3:
            raise FormatError(f"Unsupported Gregorian date string: {value!r}")
        return tuple(int(part) for part in tokens)  # type: ignore[return-value]
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise ConversionError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_jalali(value: Union[str, JalaaliDate, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, str):
        tokens = value.replace("/", "-").split("-")
        if len(tokens) != 3:
            raise FormatError(f"Unsupported Jalaali date string: {value!r}")
        return tuple(int(part) for part in tokens)  # type: ignore[return-value]
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise ConversionError("Expected a JalaaliDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_instant(value: Union[None, str, date, datetime, Iterable[int]]) -> datetime:
    """Turn a Gregorian date-like value into an instant.

    ``None`` maps to :data:`datetime.min`, the "no value" sentinel.
    Strings with a time part are read with :meth:`datetime.fromisoformat`.
    """

    if value is None:
        return datetime.min
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and (":" in value or "T" in value):
        try:
            return datetime.fromisoformat(value.strip().replace("/", "-"))
        except ValueError as exc:
            raise FormatError(f"Unsupported Gregorian date/time string: {value!r}") from exc
    year, month, day = coerce_gregorian(value)
    try:
        return datetime(year, month, day)
    except ValueError as exc:
        raise RangeError(str(exc)) from exc


def gregorian_to_jalali(value: Union[str, date, datetime, Iterable[int]]) -> JalaaliDate:
    gy, gm, gd = coerce_gregorian(value)
    try:
        ordinal = date(gy, gm, gd).toordinal()
    except ValueError as exc:
        raise RangeError(str(exc)) from exc
    return JalaaliDate(*_jalali_from_day_number(ordinal - _ANCHOR_ORDINAL - _ANCHOR_OFFSET))


def jalali_to_gregorian(value: Union[str, JalaaliDate, Iterable[int]]) -> date:
    jy, jm, jd = coerce_jalali(value)
    _check_date(jy, jm, jd)
    try:
        return date.fromordinal(_ordinal_of(jy, jm, jd))
    except (ValueError, OverflowError) as exc:
        raise RangeError(f"{jy}/{jm}/{jd} is outside the supported range") from exc


def _check_date(year: int, month: int, day: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise RangeError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    max_day = days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise RangeError(f"day must be in 1..{max_day} for month {month}, got {day}")


def to_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Return the instant for the given Jalaali fields, validating every one."""

    if not 0 <= millisecond <= 999:
        raise RangeError(f"millisecond must be in 0..999, got {millisecond}")
    gregorian = jalali_to_gregorian((year, month, day))
    try:
        clock = time(hour, minute, second, millisecond * 1000)
    except ValueError as exc:
        raise RangeError(str(exc)) from exc
    return datetime.combine(gregorian, clock)


def fields_of(instant: datetime) -> CalendarFields:
    if instant < MIN_SUPPORTED_INSTANT:
        raise RangeError(f"{instant.isoformat()} is before the first Jalaali year")
    year, month, day = gregorian_to_jalali(instant)
    return CalendarFields(
        year,
        month,
        day,
        instant.hour,
        instant.minute,
        instant.second,
        instant.microsecond // 1000,
    )


def day_of_week(instant: datetime) -> DayOfWeek:
    return DayOfWeek((instant.weekday() + 1) % 7)


def day_of_year(instant: datetime) -> int:
    year, month, day = gregorian_to_jalali(instant)
    return _jalali_day_number(year, month, day) - _jalali_day_number(year, 1, 1) + 1


def week_of_year(instant: datetime, first_day_of_week: int = DayOfWeek.SATURDAY) -> int:
    """Week number where week 1 starts on the first day of the year.

    Later weeks start on ``first_day_of_week`` (Gregorian-style numbering).
    """

    offset_in_year = day_of_year(instant) - 1
    first_day = (day_of_week(instant) - offset_in_year % 7) % 7
    shift = (first_day - first_day_of_week + 14) % 7
    return (offset_in_year + shift) // 7 + 1


def _with_date(instant: datetime, year: int, month: int, day: int) -> datetime:
    return datetime.combine(jalali_to_gregorian((year, month, day)), instant.time())


def add_years(instant: datetime, years: int) -> datetime:
    year, month, day = gregorian_to_jalali(instant)
    year += years
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise RangeError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    return _with_date(instant, year, month, min(day, days_in_month(year, month)))


def add_months(instant: datetime, months: int) -> datetime:
    year, month, day = gregorian_to_jalali(instant)
    index = month - 1 + months
    year += index // 12
    month = index % 12 + 1
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise RangeError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    return _with_date(instant, year, month, min(day, days_in_month(year, month)))


def add_days(instant: datetime, days: int) -> datetime:
    try:
        return instant + timedelta(days=days)
    except OverflowError as exc:
        raise RangeError(f"adding {days} days leaves the supported range") from exc
