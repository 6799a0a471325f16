from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization decisions."""

    ADMIN = "ROLE_ADMIN"
    EMPLOYEE = "ROLE_EMPLOYEE"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Accept both the wire value (ROLE_ADMIN) and the bare name (ADMIN)."""
        v = (value or "").strip().upper()
        for role in cls:
            if v in {role.value, role.name}:
                return role
        raise ValueError(f"Unknown role: {value!r}")


class WorkLogStatus(str, Enum):
    """Approval workflow state of a work log."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class WorkLogAction(str, Enum):
    EDIT = "edit"
    DELETE = "delete"
    APPROVE = "approve"
    REJECT = "reject"


class SessionState(str, Enum):
    LOADING = "LOADING"
    AUTHENTICATED = "AUTHENTICATED"
    ANONYMOUS = "ANONYMOUS"


class RouteAccess(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    ADMIN = "admin"


class RouteDecision(str, Enum):
    ALLOW = "allow"
    WAIT = "wait"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_HOME = "redirect_home"
