import importlib

import pytest


def reload_settings():
    module = importlib.import_module("jalaali_datetime.api.settings")
    return importlib.reload(module)


def test_defaults_are_used_without_overrides():
    settings = reload_settings()
    resolved = settings.resolve_setting("format_pattern")
    assert resolved.value == "yyyy/MM/dd HH:mm:ss"
    assert resolved.source == "default"
    context = settings.get_settings_context()
    assert context["separator_pattern"] == r"\/|-"
    assert context["hijri_adjustment"] == 0
    assert context["sources"] == {
        "format_pattern": "default",
        "separator_pattern": "default",
        "hijri_adjustment": "default",
    }


def test_system_setting_overrides_default():
    settings = reload_settings()
    settings.set_system_setting("format_pattern", "dddd d MMMM yyyy")
    resolved = settings.resolve_setting("format_pattern")
    assert resolved.value == "dddd d MMMM yyyy"
    assert resolved.source == "system"
    assert settings.get_system_setting("format_pattern") == "dddd d MMMM yyyy"
    assert settings.get_system_setting("hijri_adjustment") == 0
    assert settings.get_system_setting("hijri_adjustment", raw=True) is None


def test_user_setting_has_priority_over_system():
    settings = reload_settings()
    settings.set_system_setting("format_pattern", "yy/M/d")
    settings.set_user_setting("format_pattern", "yyyy-MM-dd", user="demo@example.com")
    resolved = settings.resolve_setting("format_pattern", user="demo@example.com")
    assert resolved.value == "yyyy-MM-dd"
    assert resolved.source == "user"
    assert settings.resolve_setting("format_pattern", user="other@example.com").source == "system"
    assert settings.get_user_setting("format_pattern", user="demo@example.com") == "yyyy-MM-dd"


def test_zero_adjustment_is_a_real_override():
    settings = reload_settings()
    settings.set_system_setting("hijri_adjustment", 2)
    settings.set_user_setting("hijri_adjustment", 0, user="demo@example.com")
    resolved = settings.resolve_setting("hijri_adjustment", user="demo@example.com")
    assert resolved.value == 0
    assert resolved.source == "user"
    assert settings.resolve_setting("hijri_adjustment").value == 2


def test_adjustment_strings_are_coerced():
    settings = reload_settings()
    settings.set_system_setting("hijri_adjustment", "-1")
    assert settings.resolve_setting("hijri_adjustment").value == -1


@pytest.mark.parametrize(
    "name,value",
    [
        ("calendar", "jalali"),
        ("separator_pattern", "("),
        ("separator_pattern", ""),
        ("format_pattern", "   "),
        ("hijri_adjustment", 5),
        ("hijri_adjustment", "one"),
        ("hijri_adjustment", True),
    ],
)
def test_invalid_values_raise_value_error(name, value):
    settings = reload_settings()
    with pytest.raises(ValueError):
        settings.set_system_setting(name, value)


def test_user_scope_needs_a_user_without_frappe():
    settings = reload_settings()
    with pytest.raises(RuntimeError):
        settings.set_user_setting("format_pattern", "yyyy")
    assert settings.get_user_setting("format_pattern") is None


def test_set_setting_dispatches_on_scope():
    settings = reload_settings()
    context = settings.set_setting("system", "separator_pattern", r"\.")
    assert context["separator_pattern"] == r"\."
    assert context["sources"]["separator_pattern"] == "system"

    context = settings.set_setting(" USER ", "hijri_adjustment", 1, user="demo@example.com")
    assert context["hijri_adjustment"] == 1
    assert context["sources"]["hijri_adjustment"] == "user"

    assert settings.get_settings("demo@example.com") == context
    with pytest.raises(ValueError):
        settings.set_setting("site", "format_pattern", "yyyy")
