"""Maintenance-mode gate for the public site."""

from __future__ import annotations

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/login"


def is_admin_path(current_path: str) -> bool:
    """True for ``/login`` and anything under ``/admin``."""
    return current_path == LOGIN_PATH or current_path.startswith(ADMIN_PREFIX)


def should_show_maintenance(
    maintenance_flag: bool,
    has_session: bool,
    current_path: str,
) -> bool:
    """Return ``True`` when the maintenance view replaces the requested page.

    Only call this once both the settings fetch and the session check have
    resolved; evaluating it on their defaults would let visitors through.
    """
    return maintenance_flag and not has_session and not is_admin_path(current_path)
