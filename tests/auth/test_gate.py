from __future__ import annotations

import pytest

from src.ems_portal.ems_portal.auth import gate
from src.ems_portal.ems_portal.auth.model import User
from src.ems_portal.ems_portal.core.enums import Role, RouteAccess, RouteDecision, SessionState


def _user(role: Role) -> User:
    return User(user_id=1, first_name="Ada", last_name="Lovelace", role=role)


@pytest.mark.parametrize("role", list(Role))
def test_is_admin_only_for_admin_role(role):
    assert gate.is_admin(_user(role)) is (role == Role.ADMIN)


def test_anonymous_is_neither_authenticated_nor_admin():
    assert gate.is_authenticated(None) is False
    assert gate.is_admin(None) is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ROLE_ADMIN", Role.ADMIN),
        ("ADMIN", Role.ADMIN),
        ("role_employee", Role.EMPLOYEE),
        ("EMPLOYEE", Role.EMPLOYEE),
    ],
)
def test_role_parse_accepts_wire_and_bare_names(raw, expected):
    assert Role.parse(raw) is expected


def test_role_parse_rejects_unknown_roles():
    with pytest.raises(ValueError):
        Role.parse("ROLE_MANAGER")


def test_routes_wait_while_session_is_loading():
    for access in (RouteAccess.PROTECTED, RouteAccess.ADMIN):
        assert gate.decide(access, SessionState.LOADING, None) is RouteDecision.WAIT


def test_public_routes_are_always_allowed():
    assert gate.decide(RouteAccess.PUBLIC, SessionState.LOADING, None) is RouteDecision.ALLOW
    assert gate.decide(RouteAccess.PUBLIC, SessionState.ANONYMOUS, None) is RouteDecision.ALLOW


def test_anonymous_is_sent_to_login():
    assert gate.decide(RouteAccess.PROTECTED, SessionState.ANONYMOUS, None) is RouteDecision.REDIRECT_LOGIN
    assert gate.decide(RouteAccess.ADMIN, SessionState.ANONYMOUS, None) is RouteDecision.REDIRECT_LOGIN


def test_employee_is_sent_home_from_admin_routes():
    employee = _user(Role.EMPLOYEE)
    assert gate.decide(RouteAccess.PROTECTED, SessionState.AUTHENTICATED, employee) is RouteDecision.ALLOW
    assert gate.decide(RouteAccess.ADMIN, SessionState.AUTHENTICATED, employee) is RouteDecision.REDIRECT_HOME


def test_admin_reaches_admin_routes():
    admin = _user(Role.ADMIN)
    assert gate.decide(RouteAccess.ADMIN, SessionState.AUTHENTICATED, admin) is RouteDecision.ALLOW


def test_navigation_adds_admin_entries_for_admins_only():
    employee_nav = [item.endpoint for item in gate.navigation_for(_user(Role.EMPLOYEE))]
    admin_nav = [item.endpoint for item in gate.navigation_for(_user(Role.ADMIN))]

    assert employee_nav == ["dashboard", "worklogs", "profile"]
    assert admin_nav == ["dashboard", "worklogs", "profile", "users", "payroll"]
    assert gate.navigation_for(None) == []
