from __future__ import annotations

from typing import Optional, Protocol

from flask import session

from ..core.constants import TOKEN_STORAGE_KEY


class CredentialStorage(Protocol):
    """Durable storage for exactly one bearer credential under a fixed key."""

    def load(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FlaskSessionCredentialStorage(CredentialStorage):
    """Keeps the credential in the signed Flask session cookie.

    The session is marked permanent so the credential survives browser restarts
    until PERMANENT_SESSION_LIFETIME elapses.
    """

    def __init__(self, key: str = TOKEN_STORAGE_KEY):
        self._key = key

    def load(self) -> Optional[str]:
        return session.get(self._key) or None

    def save(self, token: str) -> None:
        session.permanent = True
        session[self._key] = token

    def clear(self) -> None:
        session.pop(self._key, None)


class InMemoryCredentialStorage(CredentialStorage):
    """Process-local storage, used outside a Flask request (scripts, tests)."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None
