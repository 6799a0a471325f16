"""Authorization gate.

Pure derivations from the current user. Nothing here holds state, so every
decision point can call these freely.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.enums import Role, RouteAccess, RouteDecision, SessionState
from .model import User


@dataclass(frozen=True)
class NavItem:
    name: str
    endpoint: str


def is_authenticated(user: Optional[User]) -> bool:
    return user is not None


def is_admin(user: Optional[User]) -> bool:
    if user is None:
        return False
    if user.role is Role.ADMIN:
        return True
    if user.role is Role.EMPLOYEE:
        return False
    raise ValueError(f"Unhandled role: {user.role!r}")


def decide(access: RouteAccess, state: SessionState, user: Optional[User]) -> RouteDecision:
    if access is RouteAccess.PUBLIC:
        return RouteDecision.ALLOW
    if state is SessionState.LOADING:
        return RouteDecision.WAIT
    if not is_authenticated(user):
        return RouteDecision.REDIRECT_LOGIN
    if access is RouteAccess.PROTECTED:
        return RouteDecision.ALLOW
    if access is RouteAccess.ADMIN:
        return RouteDecision.ALLOW if is_admin(user) else RouteDecision.REDIRECT_HOME
    raise ValueError(f"Unhandled route access: {access!r}")


def navigation_for(user: Optional[User]) -> List[NavItem]:
    if not is_authenticated(user):
        return []
    items = [
        NavItem("Dashboard", "dashboard"),
        NavItem("Work Logs", "worklogs"),
        NavItem("Profile", "profile"),
    ]
    if is_admin(user):
        items += [
            NavItem("Users", "users"),
            NavItem("Payroll", "payroll"),
        ]
    return items
