"""Jalaali (Persian) calendar date/time values for Python and Frappe."""

from .api.date_time import MAX_VALUE, MIN_VALUE, JalaaliDateTime
from .api.errors import ConversionError, FormatError, JalaaliError, RangeError
from .api.names import JalaaliDayOfWeek, Month
from .api.normalizer import normalize_digits
from .api.parser import is_christian_date, parse, parse_result, try_parse
from .api.ramadan import starts_of_ramadan

__version__ = "0.3.0"

__all__ = [
    "ConversionError",
    "FormatError",
    "JalaaliDateTime",
    "JalaaliDayOfWeek",
    "JalaaliError",
    "MAX_VALUE",
    "MIN_VALUE",
    "Month",
    "RangeError",
    "is_christian_date",
    "normalize_digits",
    "parse",
    "parse_result",
    "starts_of_ramadan",
    "try_parse",
]
