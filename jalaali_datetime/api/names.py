"""Calendar enumerations and their Persian display names."""
from __future__ import annotations

from enum import IntEnum
from typing import Dict

__all__ = [
    "AM_LABEL",
    "DayOfWeek",
    "JalaaliDayOfWeek",
    "Month",
    "PM_LABEL",
    "month_name",
    "weekday_letter",
    "weekday_name",
]

AM_LABEL = "ق.ظ"
PM_LABEL = "ب.ظ"


class Month(IntEnum):
    """Jalaali months; ``persian_name`` is the literal name used in text."""

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @property
    def persian_name(self) -> str:
        return _MONTH_NAMES[self]


class DayOfWeek(IntEnum):
    """Gregorian-style weekday numbering (Sunday first)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class JalaaliDayOfWeek(IntEnum):
    """Weekday numbering of the Persian week, which starts on Saturday."""

    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @classmethod
    def from_day_of_week(cls, day_of_week: int) -> "JalaaliDayOfWeek":
        return cls((int(day_of_week) + 1) % 7)


_MONTH_NAMES: Dict[Month, str] = {
    Month.FARVARDIN: "فروردین",
    Month.ORDIBEHESHT: "اردیبهشت",
    Month.KHORDAD: "خرداد",
    Month.TIR: "تیر",
    Month.MORDAD: "مرداد",
    Month.SHAHRIVAR: "شهریور",
    Month.MEHR: "مهر",
    Month.ABAN: "آبان",
    Month.AZAR: "آذر",
    Month.DEY: "دی",
    Month.BAHMAN: "بهمن",
    Month.ESFAND: "اسفند",
}

_WEEKDAY_NAMES: Dict[DayOfWeek, str] = {
    DayOfWeek.SATURDAY: "شنبه",
    DayOfWeek.SUNDAY: "یکشنبه",
    DayOfWeek.MONDAY: "دوشنبه",
    DayOfWeek.TUESDAY: "سه شنبه",
    DayOfWeek.WEDNESDAY: "چهارشنبه",
    DayOfWeek.THURSDAY: "پنج شنبه",
    DayOfWeek.FRIDAY: "جمعه",
}

_WEEKDAY_LETTERS: Dict[DayOfWeek, str] = {
    DayOfWeek.SATURDAY: "ش",
    DayOfWeek.SUNDAY: "ی",
    DayOfWeek.MONDAY: "د",
    DayOfWeek.TUESDAY: "س",
    DayOfWeek.WEDNESDAY: "چ",
    DayOfWeek.THURSDAY: "پ",
    DayOfWeek.FRIDAY: "ج",
}


def month_name(month: int) -> str:
    """Return the Persian name of ``month`` or ``""`` outside 1..12."""

    try:
        return Month(month).persian_name
    except ValueError:
        return ""


def weekday_name(day_of_week: int) -> str:
    return _WEEKDAY_NAMES[DayOfWeek(day_of_week)]


def weekday_letter(day_of_week: int) -> str:
    return _WEEKDAY_LETTERS[DayOfWeek(day_of_week)]
