"""Truth table for the maintenance gate."""

from __future__ import annotations

import pytest

from portfolio.maintenance import is_admin_path, should_show_maintenance


@pytest.mark.parametrize(
    ("flag", "has_session", "path", "expected"),
    [
        (True, False, "/", True),
        (True, False, "/api/projects", True),
        (True, False, "/admin", False),
        (True, False, "/admin/settings", False),
        (True, False, "/login", False),
        (True, True, "/", False),
        (False, False, "/", False),
        (False, True, "/", False),
        (False, False, "/admin", False),
    ],
)
def test_should_show_maintenance(flag, has_session, path, expected):
    assert should_show_maintenance(flag, has_session, path) is expected


def test_login_subpaths_are_not_admin():
    assert is_admin_path("/login")
    assert not is_admin_path("/login/extra")
