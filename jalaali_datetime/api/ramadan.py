"""Start dates of Ramadan expressed as Jalaali values."""
from __future__ import annotations

import logging
from typing import List

from . import hijri
from .date_time import JalaaliDateTime

__all__ = ["RAMADAN", "starts_of_ramadan"]

logger = logging.getLogger(__name__)

RAMADAN = 9


def starts_of_ramadan(value: JalaaliDateTime, hijri_adjustment: int = 0) -> List[JalaaliDateTime]:
    """Return the first day of Ramadan for the Hijri year of ``value``.

    A Jalaali year is longer than a Hijri one, so it can contain two Ramadan
    starts: the one of the following Hijri year is included only when it
    falls in the same Jalaali year as the first.
    """

    hijri_year = hijri.hijri_year_of(value.instant, hijri_adjustment)
    first = JalaaliDateTime(hijri.to_instant(hijri_year, RAMADAN, 1, hijri_adjustment))
    second = JalaaliDateTime(hijri.to_instant(hijri_year + 1, RAMADAN, 1, hijri_adjustment))
    logger.debug(
        "ramadan starts for hijri years %s/%s: %s, %s",
        hijri_year,
        hijri_year + 1,
        first,
        second,
    )
    if first.year == second.year:
        return [first, second]
    return [first]
