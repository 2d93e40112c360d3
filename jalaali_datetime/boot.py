"""Hook implementations that integrate Jalaali dates with Frappe."""
from __future__ import annotations

from .api import settings
from .api.date_time import JalaaliDateTime


def get_boot_context(user=None):
    """Resolved settings plus today's date rendered with the resolved pattern."""

    context = settings.get_settings_context(user)
    today = JalaaliDateTime.today()
    context["today"] = today.format(context["format_pattern"])
    context["today_gregorian"] = today.instant.date().isoformat()
    return context


def boot_session(bootinfo):  # pragma: no cover - executed in Frappe runtime
    """Inject the resolved settings into the boot payload."""

    context = get_boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("jalaali_datetime", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "jalaali_datetime", context)
