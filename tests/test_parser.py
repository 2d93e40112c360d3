from datetime import datetime

import pytest

from jalaali_datetime.api.date_time import MIN_VALUE, JalaaliDateTime
from jalaali_datetime.api.errors import FormatError, RangeError
from jalaali_datetime.api.parser import (
    ParseResult,
    is_christian_date,
    month_number,
    parse,
    parse_numeric,
    parse_result,
    try_parse,
    try_parse_numeric,
)


def fields(value):
    return (value.year, value.month, value.day, value.hour, value.minute, value.second, value.millisecond)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1393/09/14", (1393, 9, 14, 0, 0, 0, 0)),
        ("1393-9-14", (1393, 9, 14, 0, 0, 0, 0)),
        ("1393-09-14\\13:49", (1393, 9, 14, 13, 49, 0, 0)),
        ("93/09/14", (1393, 9, 14, 0, 0, 0, 0)),
        ("1393/09/14 13:49", (1393, 9, 14, 13, 49, 0, 0)),
        ("1393/09/14 13:49:40", (1393, 9, 14, 13, 49, 40, 0)),
        ("1393/09/14 13:49:40:250", (1393, 9, 14, 13, 49, 40, 250)),
        ("1393/09/14  8 : 05", (1393, 9, 14, 8, 5, 0, 0)),
        ("1393/09/14&nbsp;13:49", (1393, 9, 14, 13, 49, 0, 0)),
        ("۱۳۹۳/۰۹/۱۴ ۱۳:۴۹:۴۰", (1393, 9, 14, 13, 49, 40, 0)),
        ("١٣٩٣/٠٩/١٤", (1393, 9, 14, 0, 0, 0, 0)),
    ],
)
def test_parse_separated_dates(text, expected):
    assert fields(parse(text)) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("14 آذر 1393", (1393, 9, 14, 0, 0, 0, 0)),
        ("14 آذر 93", (1393, 9, 14, 0, 0, 0, 0)),
        ("۱۴ آذر ۱۳۹۳", (1393, 9, 14, 0, 0, 0, 0)),
        ("جمعه 14 آذر 1393 ساعت 13:49", (1393, 9, 14, 13, 49, 0, 0)),
        ("1 ارديبهشت 1400", (1400, 2, 1, 0, 0, 0, 0)),
        ("1400 اسفند 5", (1400, 12, 5, 0, 0, 0, 0)),
        ("30 دی 1402", (1402, 10, 30, 0, 0, 0, 0)),
    ],
)
def test_parse_month_names(text, expected):
    assert fields(parse(text)) == expected


@pytest.mark.parametrize(
    "text,hour",
    [
        ("1393/09/14 01:05:00 ب.ظ", 13),
        ("1393/09/14 01:05:00 ق.ظ", 1),
        ("1393/09/14 11:05 ب.ظ", 23),
        ("14 آذر 1393 01:05 ب.ظ", 13),
    ],
)
def test_parse_am_pm_markers(text, hour):
    assert parse(text).hour == hour


def test_twelve_with_markers_is_left_alone():
    # "12 ق.ظ" is not turned into midnight and "12 ب.ظ" stays noon
    assert parse("1393/09/14 12:30 ق.ظ").hour == 12
    assert parse("1393/09/14 12:30 ب.ظ").hour == 12


def test_custom_separator_pattern():
    assert fields(parse("1393.09.14", r"\.")) == (1393, 9, 14, 0, 0, 0, 0)
    assert fields(parse("1393_09_14 10:20", r"_")) == (1393, 9, 14, 10, 20, 0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "hello",
        "آذر 1393",
        "14 آذر",
        "1393/09",
        "1393/09/14 :30",
    ],
)
def test_parse_reports_missing_components(text):
    with pytest.raises(FormatError):
        parse(text)


@pytest.mark.parametrize(
    "text",
    [
        "1393/13/01",
        "1400/12/30",
        "1393/07/31",
        "1393/09/14 25:00",
    ],
)
def test_parse_rejects_invalid_calendar_values(text):
    with pytest.raises(RangeError):
        parse(text)


@pytest.mark.parametrize(
    "value",
    [
        JalaaliDateTime.from_jalaali(1393, 9, 14, 13, 49, 40, 530),
        JalaaliDateTime.from_jalaali(1399, 12, 30, 0, 0, 0),
        JalaaliDateTime.from_jalaali(1403, 1, 1, 23, 59, 59),
        JalaaliDateTime.from_jalaali(1300, 6, 31, 7, 8, 9),
        JalaaliDateTime(datetime(2030, 6, 1, 12, 0, 1)),
    ],
)
def test_format_then_parse_keeps_fields(value):
    parsed = parse(value.format("yyyy/MM/dd HH:mm:ss"))
    assert fields(parsed)[:6] == fields(value)[:6]


def test_parse_numeric_short_and_long_forms():
    assert fields(parse_numeric(13920305)) == (1392, 3, 5, 0, 0, 0, 0)
    assert fields(parse(13920305)) == (1392, 3, 5, 0, 0, 0, 0)
    assert fields(parse_numeric(13961223102232461)) == (1396, 12, 23, 10, 22, 32, 461)


@pytest.mark.parametrize("number", [139205, 1392030, 139203051, 1396122310223246])
def test_parse_numeric_requires_exact_digit_count(number):
    with pytest.raises(FormatError):
        parse_numeric(number)


def test_parse_numeric_validates_fields():
    with pytest.raises(RangeError):
        parse_numeric(13921305)


def test_try_parse_swallows_every_failure():
    assert try_parse("1393/09/14")[0] is True
    assert try_parse("1393/09/14")[1].to_short_date_int() == 13930914
    for text in (None, "", "nonsense", "1393/13/01", 139205):
        ok, value = try_parse(text)
        assert ok is False
        assert value is MIN_VALUE
    assert try_parse("1393/09/14", "(")[0] is False


def test_try_parse_numeric():
    assert try_parse_numeric(13920305)[0] is True
    assert try_parse_numeric(139205) == (False, MIN_VALUE)


def test_parse_result_keeps_the_reason():
    failed = parse_result("hello")
    assert isinstance(failed, ParseResult)
    assert not failed.ok
    assert isinstance(failed.error, FormatError)
    assert failed.value is MIN_VALUE

    invalid = parse_result("1393/13/01")
    assert isinstance(invalid.error, RangeError)

    success = parse_result("14 آذر 1393")
    assert success.ok
    assert success.value.month == 9


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2014-12-05", True),
        ("Friday 5", True),
        ("5 DECEMBER", True),
        ("10 pm", True),
        ("1800", True),
        ("1393/09/14", False),
        ("14 آذر 1393", False),
        ("1399-1-1", False),
    ],
)
def test_is_christian_date(text, expected):
    assert is_christian_date(text) is expected


def test_month_number():
    assert month_number("آذر") == 9
    assert month_number(" فروردین ") == 1
    assert month_number("اسفند") == 12
    with pytest.raises(FormatError):
        month_number("December")
