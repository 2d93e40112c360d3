"""Formatting and parsing defaults, configurable per site and per user."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional

from . import hijri
from ._frappe import frappe, maybe_whitelist, session_user
from .errors import RangeError
from .formatter import DEFAULT_PATTERN
from .parser import DEFAULT_SEPARATOR_PATTERN

__all__ = [
    "DEFAULT_SETTINGS",
    "SettingSelection",
    "get_settings",
    "get_settings_context",
    "get_system_setting",
    "get_user_setting",
    "resolve_setting",
    "set_setting",
    "set_system_setting",
    "set_user_setting",
]

logger = logging.getLogger(__name__)

SettingSource = Literal["default", "system", "user"]

DEFAULT_SETTINGS: Dict[str, Any] = {
    "format_pattern": DEFAULT_PATTERN,
    "separator_pattern": DEFAULT_SEPARATOR_PATTERN,
    "hijri_adjustment": 0,
}
_DEFAULT_KEYS = {name: f"jalaali_{name}" for name in DEFAULT_SETTINGS}


@dataclass(frozen=True)
class SettingSelection:
    """Resolved setting value and the scope it came from."""

    name: str
    value: Any
    source: SettingSource


_FALLBACK_STORE: Dict[str, Dict[Optional[str], Dict[str, Any]]] = {
    "system": {None: {}},
    "user": {},
}


def _normalize_pattern(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _normalize_separator(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return None
    try:
        re.compile(value)
    except re.error:
        return None
    return value


def _normalize_adjustment(value: Any) -> Optional[int]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return hijri.check_adjustment(int(value))
    except (TypeError, ValueError, RangeError):
        return None


_NORMALIZERS: Dict[str, Callable[[Any], Any]] = {
    "format_pattern": _normalize_pattern,
    "separator_pattern": _normalize_separator,
    "hijri_adjustment": _normalize_adjustment,
}


def _require_name(name: str) -> str:
    if name not in DEFAULT_SETTINGS:
        raise ValueError(
            "setting must be one of: {}".format(", ".join(sorted(DEFAULT_SETTINGS)))
        )
    return name


def _normalize(name: str, value: Any) -> Any:
    return _NORMALIZERS[_require_name(name)](value)


def _require_value(name: str, value: Any) -> Any:
    normalized = _normalize(name, value)
    if normalized is None:
        raise ValueError(f"invalid value for {name}: {value!r}")
    return normalized


def _read_system_value(name: str) -> Any:
    if frappe:
        stored = frappe.db.get_default(_DEFAULT_KEYS[name])  # type: ignore[attr-defined]
        return _normalize(name, stored)
    return _FALLBACK_STORE["system"][None].get(name)


def _write_system_value(name: str, value: Any) -> None:
    if frappe:
        frappe.db.set_default(_DEFAULT_KEYS[name], value)  # type: ignore[attr-defined]
        if hasattr(frappe, "clear_cache"):
            frappe.clear_cache()
        return
    logger.warning("frappe is not available, keeping %s=%r in the local store", name, value)
    _FALLBACK_STORE["system"][None][name] = value


def _read_user_value(name: str, user: Optional[str]) -> Any:
    if frappe:
        user = session_user(user)
        if not user or user == "Guest":
            return None
        stored = frappe.db.get_default(_DEFAULT_KEYS[name], user=user)  # type: ignore[attr-defined]
        return _normalize(name, stored)
    if user is None:
        return None
    return _FALLBACK_STORE["user"].get(user, {}).get(name)


def _write_user_value(name: str, value: Any, user: Optional[str]) -> None:
    if frappe:
        user = session_user(user)
        if not user or user == "Guest":  # pragma: no cover - depends on Frappe session
            raise ValueError("Cannot store settings for anonymous sessions")
        frappe.db.set_default(_DEFAULT_KEYS[name], value, user=user)  # type: ignore[attr-defined]
        if hasattr(frappe, "defaults") and hasattr(frappe.defaults, "clear_cache"):
            frappe.defaults.clear_cache(user=user)  # type: ignore[attr-defined]
        return
    if user is None:
        raise RuntimeError("user must be provided when frappe is unavailable")
    logger.warning("frappe is not available, keeping %s=%r for %s in the local store", name, value, user)
    _FALLBACK_STORE["user"].setdefault(user, {})[name] = value


def get_system_setting(name: str, *, raw: bool = False) -> Any:
    """Return the site-wide value of a setting."""

    stored = _read_system_value(_require_name(name))
    if raw:
        return stored
    return DEFAULT_SETTINGS[name] if stored is None else stored


def set_system_setting(name: str, value: Any) -> SettingSelection:
    """Persist a site-wide setting."""

    selected = _require_value(name, value)
    _write_system_value(name, selected)
    return resolve_setting(name)


def get_user_setting(name: str, user: Optional[str] = None) -> Any:
    """Return the value stored for a user, if any."""

    return _read_user_value(_require_name(name), user)


def set_user_setting(name: str, value: Any, user: Optional[str] = None) -> SettingSelection:
    """Persist a setting for a specific user."""

    selected = _require_value(name, value)
    _write_user_value(name, selected, user)
    return resolve_setting(name, user)


def resolve_setting(name: str, user: Optional[str] = None) -> SettingSelection:
    """Resolve a setting for a user taking overrides into account."""

    user_value = get_user_setting(name, user)
    if user_value is not None:
        return SettingSelection(name, user_value, "user")

    system_raw = get_system_setting(name, raw=True)
    if system_raw is not None:
        return SettingSelection(name, system_raw, "system")

    return SettingSelection(name, DEFAULT_SETTINGS[name], "default")


def get_settings_context(user: Optional[str] = None) -> Dict[str, object]:
    """Return a serialisable representation of every resolved setting."""

    context: Dict[str, object] = {}
    sources: Dict[str, str] = {}
    for name in DEFAULT_SETTINGS:
        resolved = resolve_setting(name, user)
        context[name] = resolved.value
        sources[name] = resolved.source
    context["sources"] = sources
    return context


def set_setting(scope: str, name: str, value: Any, user: Optional[str] = None) -> Dict[str, object]:
    """Update a setting and return the resulting context."""

    normalized_scope = (scope or "user").strip().lower()
    if normalized_scope == "system":
        set_system_setting(name, value)
        return get_settings_context()
    if normalized_scope == "user":
        set_user_setting(name, value, user)
        return get_settings_context(user)
    raise ValueError("scope must be either 'system' or 'user'")


def get_settings(user: Optional[str] = None) -> Dict[str, object]:
    """Return the currently resolved settings."""

    return get_settings_context(user)


get_settings = maybe_whitelist(get_settings)
set_setting = maybe_whitelist(set_setting)
