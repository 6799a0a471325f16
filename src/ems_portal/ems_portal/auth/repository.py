from __future__ import annotations

from typing import Any, Mapping, Protocol

from .model import LoginResult, User


class AuthRepository(Protocol):
    """Authentication endpoints of the EMS API.

    Note: Services depend on this interface, never on the HTTP client directly.
    """

    def validate(self, *, token: str) -> User:
        raise NotImplementedError

    def login(self, *, username: str, password: str) -> LoginResult:
        raise NotImplementedError

    def register(self, *, payload: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def update_profile(self, *, token: str, fields: Mapping[str, Any]) -> User:
        raise NotImplementedError
