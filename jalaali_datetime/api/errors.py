"""Exception types raised by the Jalaali date/time helpers."""
from __future__ import annotations

__all__ = [
    "ConversionError",
    "FormatError",
    "JalaaliError",
    "RangeError",
]


class JalaaliError(Exception):
    """Base class for every error raised by this package."""


class FormatError(JalaaliError, ValueError):
    """Text or a compact numeric value does not match a known date grammar."""


class RangeError(JalaaliError, ValueError):
    """A calendar field is outside the range the calendar supports."""


class ConversionError(JalaaliError, TypeError):
    """A value cannot be converted to or from a ``JalaaliDateTime``."""
