"""Server methods exposed to the Frappe desk and to Jinja templates."""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional, Union

from . import parser, ramadan, settings
from ._frappe import maybe_whitelist
from .date_time import JalaaliDateTime

__all__ = [
    "format_date",
    "get_ramadan_starts",
    "parse_date",
]

GregorianValue = Union[None, str, date, datetime]


def _serialise(value: JalaaliDateTime, pattern: str) -> Dict[str, object]:
    return {
        "gregorian": value.instant.isoformat(),
        "jalaali": value.format(pattern),
        "year": value.year,
        "month": value.month,
        "day": value.day,
        "hour": value.hour,
        "minute": value.minute,
        "second": value.second,
        "millisecond": value.millisecond,
    }


def format_date(value: GregorianValue, pattern: Optional[str] = None, user: Optional[str] = None) -> str:
    """Render a Gregorian date or datetime as Jalaali text.

    ``pattern`` defaults to the resolved ``format_pattern`` setting.  Empty
    values render as an empty string so templates can pass optional fields.
    """

    if value is None or value == "":
        return ""
    pattern = pattern or settings.resolve_setting("format_pattern", user).value
    return JalaaliDateTime.from_gregorian(value).format(pattern)


def parse_date(
    text: str,
    separator_pattern: Optional[str] = None,
    user: Optional[str] = None,
) -> Dict[str, object]:
    """Parse Jalaali text and return the Gregorian instant plus its fields."""

    separator_pattern = separator_pattern or settings.resolve_setting("separator_pattern", user).value
    value = parser.parse(text, separator_pattern)
    return _serialise(value, settings.resolve_setting("format_pattern", user).value)


def get_ramadan_starts(
    value: GregorianValue = None,
    hijri_adjustment: Optional[int] = None,
    user: Optional[str] = None,
) -> List[Dict[str, object]]:
    """Ramadan start dates for the Hijri year of ``value`` (today by default)."""

    reference = JalaaliDateTime.today() if value in (None, "") else JalaaliDateTime.from_gregorian(value)
    if hijri_adjustment in (None, ""):
        hijri_adjustment = settings.resolve_setting("hijri_adjustment", user).value
    pattern = settings.resolve_setting("format_pattern", user).value
    return [
        _serialise(start, pattern)
        for start in ramadan.starts_of_ramadan(reference, int(hijri_adjustment))
    ]


format_date = maybe_whitelist(format_date)
parse_date = maybe_whitelist(parse_date)
get_ramadan_starts = maybe_whitelist(get_ramadan_starts)
