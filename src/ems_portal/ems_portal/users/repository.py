from __future__ import annotations

from typing import Protocol, Sequence

from ..auth.model import User


class UserRepository(Protocol):
    """User administration endpoints of the EMS API."""

    def list_all(self, *, token: str) -> Sequence[User]:
        raise NotImplementedError

    def delete_by_id(self, *, token: str, user_id: int) -> None:
        raise NotImplementedError
