"""Optional Frappe integration shared by the server-side modules."""
from __future__ import annotations

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except Exception:  # pragma: no cover - callers fall back to local behaviour
    frappe = None  # type: ignore

__all__ = ["frappe", "maybe_whitelist", "session_user"]


def session_user(user=None):
    if user or not frappe:
        return user
    return getattr(getattr(frappe, "session", None), "user", None)  # type: ignore[attr-defined]


def maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func
