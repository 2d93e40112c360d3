"""Digit and letter normalisation shared by the parser and the formatter."""
from __future__ import annotations

from typing import Optional

__all__ = ["normalize_digits", "to_persian_digits"]

_TO_LATIN = str.maketrans(
    {
        **{persian: str(index) for index, persian in enumerate("۰۱۲۳۴۵۶۷۸۹")},
        **{arabic: str(index) for index, arabic in enumerate("٠١٢٣٤٥٦٧٨٩")},
        "ي": "ی",
        "ك": "ک",
        ",": None,
        "٬": None,
    }
)

_TO_PERSIAN = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def normalize_digits(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with Latin digits, Persian letters and no thousands separators."""

    if not text:
        return text
    return text.translate(_TO_LATIN)


def to_persian_digits(text: Optional[str]) -> Optional[str]:
    if not text:
        return text
    return text.translate(_TO_PERSIAN)
