"""Server-side helpers exposed by the Jalaali date/time package."""

from . import (
    converter,
    date_time,
    endpoints,
    errors,
    formatter,
    hijri,
    names,
    normalizer,
    parser,
    ramadan,
    settings,
)

__all__ = [
    "converter",
    "date_time",
    "endpoints",
    "errors",
    "formatter",
    "hijri",
    "names",
    "normalizer",
    "parser",
    "ramadan",
    "settings",
]
