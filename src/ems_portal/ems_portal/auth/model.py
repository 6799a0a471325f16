from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: the signed-in user as reported by the API.

    Note: Immutable. A profile update replaces the whole record.
    """

    user_id: int
    first_name: str
    last_name: str
    role: Role
    username: Optional[str] = None
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User
