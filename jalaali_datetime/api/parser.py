"""Recover Jalaali date/time values from loosely formatted text.

The parser accepts dates written with ``/`` or ``-`` (or a caller supplied
separator regex), dates with a Persian month name (``14 آذر 1393``), an
optional ``HH:mm[:ss[:fff]]`` clock, an optional ``ق.ظ``/``ب.ظ`` marker and
Persian or Arabic digits anywhere in the input.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .date_time import MIN_VALUE, JalaaliDateTime
from .errors import FormatError, JalaaliError
from .names import AM_LABEL, PM_LABEL, Month
from .normalizer import normalize_digits

__all__ = [
    "DEFAULT_SEPARATOR_PATTERN",
    "ParseResult",
    "is_christian_date",
    "month_number",
    "parse",
    "parse_numeric",
    "parse_result",
    "try_parse",
    "try_parse_numeric",
]

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR_PATTERN = r"\/|-"

_AM, _PM, _NO_MARKER = "am", "pm", None

_FLAGS = re.ASCII | re.IGNORECASE

_CLOCK_GLUE = re.compile(r"-*:-*")
_HOUR = re.compile(r"(?<=-)(\d{1,2})(?=:)", _FLAGS)
_MINUTE = re.compile(r"-\d{1,2}:(\d{1,2})", _FLAGS)
_SECOND = re.compile(r"-\d{1,2}:\d{1,2}:(\d{1,2})", _FLAGS)
_MILLISECOND = re.compile(r"-\d{1,2}:\d{1,2}:\d{1,2}:(\d{1,4})", _FLAGS)

_MONTH_STRICT = re.compile(r"\d{2,4}-(\d{1,2})(?=-\d{1,2}-\d{1,2}(?!-\d{1,2}:))", _FLAGS)
_MONTH_LOOSE = re.compile(r"\d{2,4}-(\d{1,2})(?=-\d{1,2}[^:])", _FLAGS)
_DAY = re.compile(r"\d{2,4}-\d{1,2}-(\d{1,2})(?=-)", _FLAGS)
_YEAR = re.compile(r"(?<=-)(\d{2,4})(?=-\d{1,2}-\d{1,2})", _FLAGS)

_LONE_DAY = re.compile(r"(?<=-)(\d{1,2})(?=-)", _FLAGS)
_LONE_FULL_YEAR = re.compile(r"(?<=-)(\d{4})(?=-)", _FLAGS)
_LONE_YEAR = re.compile(r"(?<=-)(\d{2,4})(?=-)", _FLAGS)

_GREGORIAN_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_GREGORIAN_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_GREGORIAN_MARKERS = ("pm", "am")
_GREGORIAN_YEAR = re.compile(r"(1[8-9]|[2-9][0-9])\d{2}")

_SHORT_DATE_DIGITS = 8
_LONG_DATE_TIME_DIGITS = 17


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse attempt: either ``value`` or the ``error`` raised."""

    value: JalaaliDateTime = MIN_VALUE
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _search(regex: "re.Pattern[str]", text: str) -> str:
    match = regex.search(text)
    return match.group(1) if match else ""


def _to_int(token: str, component: str, text: str) -> int:
    if not token:
        raise FormatError(f"could not find the {component} in {text!r}")
    return int(token)


def month_number(name: str) -> int:
    """Return the month number for a Persian month name such as ``آذر``."""

    wanted = normalize_digits(name.strip()) if name else name
    for month in Month:
        if month.persian_name == wanted:
            return int(month)
    raise FormatError(f"{name!r} is not a Jalaali month name")


def _prepare(text: str, separator_pattern: str) -> Tuple[str, bool]:
    text = normalize_digits(text)
    has_separator = re.search(separator_pattern, text) is not None
    text = text.replace("&nbsp;", " ")
    text = re.sub(r"\s", "-", text).replace("\\", "-")
    text = re.sub(separator_pattern, "-", text)
    return f"-{text}-", has_separator


def _detect_marker(text: str) -> Optional[str]:
    if AM_LABEL in text:
        return _AM
    if PM_LABEL in text:
        return _PM
    return _NO_MARKER


def _extract_clock(text: str) -> Tuple[str, str, str, str, str]:
    hour = minute = second = millisecond = "0"
    if ":" in text:
        text = _CLOCK_GLUE.sub(":", text)
        hour = _search(_HOUR, text)
        minute = _search(_MINUTE, text)
        if text.index(":") != text.rindex(":"):
            second = _search(_SECOND, text)
            millisecond = _search(_MILLISECOND, text) or "0"
    return text, hour, minute, second, millisecond


def _extract_numeric_date(text: str) -> Tuple[str, str, str]:
    month = _search(_MONTH_STRICT, text) or _search(_MONTH_LOOSE, text)
    day = _search(_DAY, text)
    year = _search(_YEAR, text)
    return year, month, day


def _extract_named_date(text: str) -> Tuple[str, str, str]:
    month = ""
    for candidate in Month:
        if candidate.persian_name in text:
            month = str(int(candidate))
            break
    if not month:
        raise FormatError(f"no month number or Persian month name in {text!r}")

    day = _search(_LONE_DAY, text)
    if not day:
        raise FormatError(f"no day number in {text!r}")
    text = re.sub(rf"(?<=-){day}(?=-)", "", text)

    year = _search(_LONE_FULL_YEAR, text) or _search(_LONE_YEAR, text)
    if not year:
        raise FormatError(f"no year number in {text!r}")
    return year, month, day


def parse(
    text: Union[str, int],
    separator_pattern: Optional[str] = None,
) -> JalaaliDateTime:
    """Parse ``text`` into a :class:`JalaaliDateTime`.

    Integers are handed to :func:`parse_numeric`.  Missing components raise
    :class:`FormatError`; components that do not form a valid Jalaali date
    raise :class:`RangeError`.
    """

    if isinstance(text, int) and not isinstance(text, bool):
        return parse_numeric(text)
    if not isinstance(text, str) or not text:
        raise FormatError("nothing to parse")
    separator_pattern = separator_pattern or DEFAULT_SEPARATOR_PATTERN

    prepared, has_separator = _prepare(text, separator_pattern)
    marker = _detect_marker(prepared)
    prepared, hour, minute, second, millisecond = _extract_clock(prepared)

    if has_separator:
        year, month, day = _extract_numeric_date(prepared)
    else:
        year, month, day = _extract_named_date(prepared)
    logger.debug(
        "parsed %r as year=%s month=%s day=%s clock=%s:%s:%s.%s marker=%s separated=%s",
        text,
        year,
        month,
        day,
        hour,
        minute,
        second,
        millisecond,
        marker,
        has_separator,
    )

    numeric_year = _to_int(year, "year", text)
    numeric_month = _to_int(month, "month", text)
    numeric_day = _to_int(day, "day", text)
    numeric_hour = _to_int(hour, "hour", text)
    numeric_minute = _to_int(minute, "minute", text)
    numeric_second = _to_int(second, "second", text)
    numeric_millisecond = _to_int(millisecond, "millisecond", text)

    if numeric_year < 100:
        numeric_year += 1300
    if marker == _PM and numeric_hour < 12:
        numeric_hour += 12

    return JalaaliDateTime.from_jalaali(
        numeric_year,
        numeric_month,
        numeric_day,
        numeric_hour,
        numeric_minute,
        numeric_second,
        numeric_millisecond,
    )


def parse_result(text: Union[str, int], separator_pattern: Optional[str] = None) -> ParseResult:
    try:
        return ParseResult(parse(text, separator_pattern))
    except (JalaaliError, ValueError, TypeError, OverflowError, re.error) as exc:
        return ParseResult(error=exc)


def try_parse(
    text: Union[str, int, None],
    separator_pattern: Optional[str] = None,
) -> Tuple[bool, JalaaliDateTime]:
    """Like :func:`parse` but returns ``(False, MIN_VALUE)`` instead of raising."""

    if text is None or text == "":
        return False, MIN_VALUE
    result = parse_result(text, separator_pattern)
    if not result.ok:
        logger.debug("could not parse %r: %s", text, result.error)
    return result.ok, result.value


def parse_numeric(number: int) -> JalaaliDateTime:
    """Decode ``YYYYMMDD`` (8 digits) or ``YYYYMMDDHHMMSSfff`` (17 digits)."""

    digits = len(str(number))
    if digits == _SHORT_DATE_DIGITS:
        year = number // 10000
        month = number // 100 % 100
        day = number % 100
        return JalaaliDateTime.from_jalaali(year, month, day)
    if digits == _LONG_DATE_TIME_DIGITS:
        year = number // 10 ** 13
        month = number // 10 ** 11 % 100
        day = number // 10 ** 9 % 100
        hour = number // 10 ** 7 % 100
        minute = number // 10 ** 5 % 100
        second = number // 1000 % 100
        millisecond = number % 1000
        return JalaaliDateTime.from_jalaali(year, month, day, hour, minute, second, millisecond)
    raise FormatError(
        f"numeric Jalaali dates look like 13920101 or 13961223102232461, got {number!r}"
    )


def try_parse_numeric(number: int) -> Tuple[bool, JalaaliDateTime]:
    result = parse_result(number)
    return result.ok, result.value


def is_christian_date(text: str) -> bool:
    """Guess whether ``text`` holds a Gregorian date rather than a Jalaali one."""

    lowered = text.lower()
    for names in (_GREGORIAN_WEEKDAYS, _GREGORIAN_MONTHS, _GREGORIAN_MARKERS):
        if any(name in lowered for name in names):
            return True
    return _GREGORIAN_YEAR.search(lowered) is not None
