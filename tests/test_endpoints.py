import importlib
from datetime import date, datetime

import pytest

from jalaali_datetime import boot, hooks
from jalaali_datetime.api import endpoints, hijri
from jalaali_datetime.api.errors import FormatError


@pytest.fixture
def settings():
    module = importlib.import_module("jalaali_datetime.api.settings")
    return importlib.reload(module)


def test_format_date_uses_default_pattern(settings):
    assert endpoints.format_date(date(2014, 12, 5)) == "1393/09/14 00:00:00"
    assert endpoints.format_date("2014-12-05 13:49:40") == "1393/09/14 13:49:40"
    assert endpoints.format_date(datetime(2024, 3, 20), "dddd d MMMM yyyy") == "چهارشنبه 1 فروردین 1403"


def test_format_date_passes_empty_values_through(settings):
    assert endpoints.format_date(None) == ""
    assert endpoints.format_date("") == ""


def test_format_date_follows_settings(settings):
    settings.set_system_setting("format_pattern", "yyyy-MM-dd")
    assert endpoints.format_date(date(2014, 12, 5)) == "1393-09-14"
    settings.set_user_setting("format_pattern", "d MMMM", user="demo@example.com")
    assert endpoints.format_date(date(2014, 12, 5), user="demo@example.com") == "14 آذر"


def test_parse_date_returns_serialised_fields(settings):
    payload = endpoints.parse_date("1393/09/14 13:49")
    assert payload == {
        "gregorian": "2014-12-05T13:49:00",
        "jalaali": "1393/09/14 13:49:00",
        "year": 1393,
        "month": 9,
        "day": 14,
        "hour": 13,
        "minute": 49,
        "second": 0,
        "millisecond": 0,
    }


def test_parse_date_uses_separator_setting(settings):
    settings.set_system_setting("separator_pattern", r"\.")
    assert endpoints.parse_date("1393.09.14")["gregorian"] == "2014-12-05T00:00:00"
    assert endpoints.parse_date("1393_09_14", separator_pattern="_")["day"] == 14
    with pytest.raises(FormatError):
        endpoints.parse_date("")


def test_get_ramadan_starts(settings):
    starts = endpoints.get_ramadan_starts(date(2023, 8, 23))
    assert 1 <= len(starts) <= 2
    first = datetime.fromisoformat(starts[0]["gregorian"])
    assert hijri.fields_of(first) == (1445, 9, 1)
    assert starts[0]["hour"] == 0


def test_get_ramadan_starts_reads_adjustment_setting(settings):
    plain = endpoints.get_ramadan_starts(date(2023, 8, 23), hijri_adjustment=0)
    settings.set_system_setting("hijri_adjustment", 1)
    adjusted = endpoints.get_ramadan_starts(date(2023, 8, 23))
    first_plain = datetime.fromisoformat(plain[0]["gregorian"])
    first_adjusted = datetime.fromisoformat(adjusted[0]["gregorian"])
    assert (first_plain - first_adjusted).days == 1


def test_boot_context_contains_settings_and_today(settings):
    context = boot.get_boot_context()
    assert context["format_pattern"] == "yyyy/MM/dd HH:mm:ss"
    assert set(context["sources"]) == {"format_pattern", "separator_pattern", "hijri_adjustment"}
    assert context["today_gregorian"] == date.today().isoformat()
    assert context["today"].endswith("00:00:00")


def _resolve(dotted):
    module_name, _, attribute = dotted.rpartition(".")
    return getattr(importlib.import_module(module_name), attribute)


def test_hooks_point_at_real_callables():
    assert callable(_resolve(hooks.boot_session))
    for method in hooks.jinja["methods"]:
        assert callable(_resolve(method))
