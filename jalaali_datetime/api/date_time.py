"""Immutable Jalaali date/time value built on a Gregorian instant."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, ClassVar, Iterable, List, Optional, Tuple, Union

from . import converter, formatter
from .errors import ConversionError, RangeError
from .names import AM_LABEL, PM_LABEL, DayOfWeek, JalaaliDayOfWeek, month_name, weekday_letter, weekday_name

if TYPE_CHECKING:  # pragma: no cover
    from .parser import ParseResult

__all__ = [
    "JalaaliDateTime",
    "MAX_VALUE",
    "MIN_VALUE",
    "is_sql_datetime",
]

GregorianLike = Union[None, str, date, datetime, Iterable[int]]

_SQL_MIN_DATETIME = datetime(1753, 1, 1)


def _truncated_divmod(value: int, divisor: int) -> Tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def is_sql_datetime(value: Union[datetime, "JalaaliDateTime"]) -> bool:
    """Return ``True`` if ``value`` fits the SQL Server ``datetime`` range."""

    instant = value.instant if isinstance(value, JalaaliDateTime) else value
    return instant >= _SQL_MIN_DATETIME


@dataclass(frozen=True, eq=False)
class JalaaliDateTime:
    """A point in time viewed through the Jalaali calendar.

    ``instant`` is the only stored state; every calendar field is derived from
    it on access.  ``JalaaliDateTime.min`` wraps :data:`datetime.min` and is
    treated as "no value" by the accessors.
    """

    instant: datetime

    min: ClassVar["JalaaliDateTime"]
    max: ClassVar["JalaaliDateTime"]

    def __post_init__(self) -> None:
        if not isinstance(self.instant, datetime):
            raise ConversionError(
                f"JalaaliDateTime wraps a datetime, not {type(self.instant).__name__}"
            )

    # construction -----------------------------------------------------------

    @classmethod
    def from_jalaali(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "JalaaliDateTime":
        return cls(converter.to_instant(year, month, day, hour, minute, second, millisecond))

    @classmethod
    def from_gregorian(cls, value: GregorianLike) -> "JalaaliDateTime":
        return cls(converter.coerce_instant(value))

    @classmethod
    def now(cls) -> "JalaaliDateTime":
        return cls(datetime.now())

    @classmethod
    def today(cls) -> "JalaaliDateTime":
        return cls(datetime.combine(date.today(), datetime.min.time()))

    @classmethod
    def parse(cls, text: Union[str, int], separator_pattern: Optional[str] = None) -> "JalaaliDateTime":
        from . import parser

        return parser.parse(text, separator_pattern)

    @classmethod
    def try_parse(
        cls, text: Union[str, int, None], separator_pattern: Optional[str] = None
    ) -> Tuple[bool, "JalaaliDateTime"]:
        from . import parser

        return parser.try_parse(text, separator_pattern)

    @classmethod
    def parse_result(cls, text: str, separator_pattern: Optional[str] = None) -> "ParseResult":
        from . import parser

        return parser.parse_result(text, separator_pattern)

    # derived fields ---------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.instant <= datetime.min

    @property
    def year(self) -> int:
        if self.is_empty:
            return datetime.min.year
        return converter.gregorian_to_jalali(self.instant).year

    @property
    def month(self) -> int:
        if self.is_empty:
            return datetime.min.month
        return converter.gregorian_to_jalali(self.instant).month

    @property
    def day(self) -> int:
        if self.is_empty:
            return datetime.min.day
        return converter.gregorian_to_jalali(self.instant).day

    @property
    def hour(self) -> int:
        return 12 if self.is_empty else self.instant.hour

    @property
    def short_hour(self) -> int:
        hour = self.hour
        return hour - 12 if hour > 12 else hour

    @property
    def minute(self) -> int:
        return 0 if self.is_empty else self.instant.minute

    @property
    def second(self) -> int:
        return 0 if self.is_empty else self.instant.second

    @property
    def millisecond(self) -> int:
        return 0 if self.is_empty else self.instant.microsecond // 1000

    @property
    def month_name(self) -> str:
        return month_name(self.month)

    long_month_name = month_name

    @property
    def short_year(self) -> int:
        return self.year % 100

    @property
    def day_of_week(self) -> DayOfWeek:
        if self.is_empty:
            return DayOfWeek(0)
        return converter.day_of_week(self.instant)

    @property
    def persian_day_of_week(self) -> JalaaliDayOfWeek:
        return JalaaliDayOfWeek.from_day_of_week(converter.day_of_week(self.instant))

    @property
    def long_day_of_week_name(self) -> str:
        return weekday_name(self.day_of_week)

    @property
    def short_day_of_week_name(self) -> str:
        return weekday_letter(self.day_of_week)

    @property
    def month_days(self) -> int:
        month = self.month
        if month == 12:
            return 30 if self.is_leap_year else 29
        return converter.days_in_month(self.year, month)

    @property
    def is_leap_year(self) -> bool:
        return not self.is_empty and converter.is_jalali_leap(self.year)

    @property
    def week_of_year(self) -> int:
        if self.is_empty:
            return 0
        return converter.week_of_year(self.instant, DayOfWeek.SATURDAY)

    @property
    def week_of_month(self) -> int:
        if self.is_empty:
            return 0
        return self.week_of_year - self.add_days(1 - self.day).week_of_year + 1

    @property
    def day_of_year(self) -> int:
        if self.is_empty:
            return 0
        return converter.day_of_year(self.instant)

    @property
    def am_pm(self) -> str:
        return PM_LABEL if self.instant.hour >= 12 else AM_LABEL

    @property
    def date(self) -> "JalaaliDateTime":
        if self.is_empty:
            return self
        return JalaaliDateTime(datetime.combine(self.instant.date(), datetime.min.time()))

    @property
    def time_of_day(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}:{self.millisecond:03d}"

    @property
    def long_time_of_day(self) -> str:
        return (
            f"ساعت {self.short_hour:02d}:{self.minute:02d}:{self.second:02d}:"
            f"{self.millisecond:03d} {self.am_pm}"
        )

    @property
    def short_time_of_day(self) -> str:
        return f"{self.short_hour:02d}:{self.minute:02d}:{self.second:02d} {self.am_pm}"

    def fields(self) -> converter.CalendarFields:
        return converter.CalendarFields(
            self.year, self.month, self.day, self.hour, self.minute, self.second, self.millisecond
        )

    def time(self) -> timedelta:
        clock = self.instant
        return timedelta(
            hours=clock.hour,
            minutes=clock.minute,
            seconds=clock.second,
            milliseconds=clock.microsecond // 1000,
        )

    # arithmetic -------------------------------------------------------------

    def _rebuild(self, year: int, month: int) -> "JalaaliDateTime":
        day = min(self.day, converter.days_in_month(year, month))
        return JalaaliDateTime.from_jalaali(
            year, month, day, self.hour, self.minute, self.second, self.millisecond
        )

    def _shift(self, delta: timedelta) -> "JalaaliDateTime":
        try:
            return JalaaliDateTime(self.instant + delta)
        except OverflowError as exc:
            raise RangeError("result is outside the supported date range") from exc

    def add_years(self, years: int) -> "JalaaliDateTime":
        return self._rebuild(self.year + years, self.month)

    def add_months(self, months: int) -> "JalaaliDateTime":
        """Add months on the calendar fields, clamping the day.

        Offsets beyond a year are split with truncating division.  Only the
        ``months > 12`` branch carries an overflowing month into the next year;
        a smaller offset that runs past month 12 (or below month 1) leaves an
        invalid month, which :func:`converter.days_in_month` rejects with
        :class:`RangeError`.
        """

        year, month = self.year, self.month
        if months > 12:
            extra_years, rest = _truncated_divmod(months, 12)
            year += extra_years
            month += rest
            if month > 12:
                year += 1
                month -= 12
        elif months > 0:
            month += months
        elif months < -12:
            extra_years, rest = _truncated_divmod(months, 12)
            year += extra_years
            month += rest
            if month < -12:
                year -= 1
                month += 12
        else:
            month += months
        return self._rebuild(year, month)

    def add_days(self, days: int) -> "JalaaliDateTime":
        return JalaaliDateTime(converter.add_days(self.instant, days))

    def add_hours(self, hours: float) -> "JalaaliDateTime":
        return self._shift(timedelta(hours=hours))

    def add_minutes(self, minutes: float) -> "JalaaliDateTime":
        return self._shift(timedelta(minutes=minutes))

    def add_seconds(self, seconds: float) -> "JalaaliDateTime":
        return self._shift(timedelta(seconds=seconds))

    def add_milliseconds(self, milliseconds: float) -> "JalaaliDateTime":
        return self._shift(timedelta(milliseconds=milliseconds))

    def add(self, delta: timedelta) -> "JalaaliDateTime":
        return self._shift(delta)

    def subtract(self, other: Union["JalaaliDateTime", datetime]) -> timedelta:
        return self.instant - _instant_of(other)

    def set_time(self, hour: int, minute: int, second: int = 0, millisecond: int = 0) -> "JalaaliDateTime":
        return JalaaliDateTime.from_jalaali(self.year, self.month, self.day, hour, minute, second, millisecond)

    def first_day_of_week(self) -> "JalaaliDateTime":
        day = self.date
        return day.add_days(JalaaliDayOfWeek.SATURDAY - day.persian_day_of_week)

    def persian_weekend(self) -> "JalaaliDateTime":
        day = self.date
        return day.add_days(JalaaliDayOfWeek.FRIDAY - day.persian_day_of_week)

    def last_day_of_month(self) -> "JalaaliDateTime":
        return JalaaliDateTime.from_jalaali(self.year, self.month, self.month_days)

    def last_day_of_year(self) -> "JalaaliDateTime":
        return JalaaliDateTime.from_jalaali(self.year, 12, 30 if self.is_leap_year else 29)

    def month_difference(self, other: Union["JalaaliDateTime", datetime]) -> int:
        """Approximate number of months between two values (always positive)."""

        if isinstance(other, JalaaliDateTime):
            return abs(other.month - self.month + 12 * (other.year - self.year))
        return abs(other.month - self.instant.month + 12 * (other.year - self.instant.year))

    def starts_of_ramadan(self, hijri_adjustment: int = 0) -> List["JalaaliDateTime"]:
        from . import ramadan

        return ramadan.starts_of_ramadan(self, hijri_adjustment)

    # conversions ------------------------------------------------------------

    def to_datetime(self) -> datetime:
        return self.instant

    def to_short_date_int(self) -> int:
        return int(f"{self.year:04d}{self.month:02d}{self.day:02d}")

    def to_long_date_time_int(self) -> int:
        return int(
            f"{self.year:04d}{self.month:02d}{self.day:02d}"
            f"{self.hour:02d}{self.minute:02d}{self.second:02d}{self.millisecond:03d}"
        )

    def to_time_int(self) -> int:
        return int(f"{self.hour:02d}{self.minute:02d}{self.second:02d}")

    def __bool__(self) -> bool:
        return self.instant > datetime.min

    def __int__(self) -> int:
        return self.to_long_date_time_int()

    def __float__(self) -> float:
        return float(self.to_long_date_time_int())

    # formatting -------------------------------------------------------------

    def format(self, pattern: Optional[str] = None) -> str:
        return formatter.format_datetime(self, pattern)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def to_short_date_string(self) -> str:
        return formatter.to_short_date_string(self)

    def to_long_date_string(self) -> str:
        return formatter.to_long_date_string(self)

    def to_long_date_time_string(self) -> str:
        return formatter.to_long_date_time_string(self)

    def to_short_date_time_string(self) -> str:
        return formatter.to_short_date_time_string(self)

    def to_short_time_string(self) -> str:
        return formatter.to_short_time_string(self)

    def to_long_time_string(self) -> str:
        return formatter.to_long_time_string(self)

    def elapsed_time(self, now: Optional[datetime] = None) -> str:
        return formatter.elapsed_time(self, now)

    # comparison -------------------------------------------------------------

    def _field_key(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second, self.millisecond)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JalaaliDateTime):
            return self._field_key() == other._field_key()
        if isinstance(other, datetime):
            return self.instant == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # millisecond-truncated instant: same key for field-equal values and for an equal datetime
        return hash(self.instant.replace(microsecond=self.millisecond * 1000))

    def compare_to(self, other: Union["JalaaliDateTime", datetime]) -> int:
        mine, theirs = self.instant, _instant_of(other)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (JalaaliDateTime, datetime)):
            return NotImplemented
        return self.instant < _instant_of(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (JalaaliDateTime, datetime)):
            return NotImplemented
        return self.instant <= _instant_of(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (JalaaliDateTime, datetime)):
            return NotImplemented
        return self.instant > _instant_of(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (JalaaliDateTime, datetime)):
            return NotImplemented
        return self.instant >= _instant_of(other)

    def __add__(self, other: object) -> "JalaaliDateTime":
        if isinstance(other, timedelta):
            return self._shift(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object):
        if isinstance(other, timedelta):
            return self._shift(-other)
        if isinstance(other, (JalaaliDateTime, datetime)):
            return self.subtract(other)
        return NotImplemented


def _instant_of(value: Union[JalaaliDateTime, datetime]) -> datetime:
    if isinstance(value, JalaaliDateTime):
        return value.instant
    if isinstance(value, datetime):
        return value
    raise ConversionError(f"cannot compare JalaaliDateTime with {type(value).__name__}")


MIN_VALUE = JalaaliDateTime(datetime.min)
MAX_VALUE = JalaaliDateTime(datetime.max)
JalaaliDateTime.min = MIN_VALUE
JalaaliDateTime.max = MAX_VALUE
