from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import SessionState
from ..core.exceptions import AuthenticationError, DomainError
from . import gate
from .model import User
from .repository import AuthRepository
from .storage import CredentialStorage

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("firstName", "lastName", "email")


class SessionStore:
    """Use case: hold the bearer credential and the signed-in user.

    Lifecycle: LOADING until restore() runs, then AUTHENTICATED or ANONYMOUS.
    AUTHENTICATED falls back to ANONYMOUS on logout or when the stored
    credential fails validation. Only login() moves ANONYMOUS to AUTHENTICATED.
    """

    def __init__(self, auth: AuthRepository, storage: CredentialStorage):
        self._auth = auth
        self._storage = storage
        self._state = SessionState.LOADING
        self._credential: Optional[str] = None
        self._user: Optional[User] = None
        self.last_error: Optional[str] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return gate.is_authenticated(self._user)

    @property
    def is_admin(self) -> bool:
        return gate.is_admin(self._user)

    def _become_anonymous(self) -> None:
        self._storage.clear()
        self._credential = None
        self._user = None
        self._state = SessionState.ANONYMOUS

    def _become_authenticated(self, token: str, user: User) -> None:
        self._credential = token
        self._user = user
        self._state = SessionState.AUTHENTICATED

    def restore(self) -> SessionState:
        token = self._storage.load()
        if not token:
            self._credential = None
            self._user = None
            self._state = SessionState.ANONYMOUS
            return self._state

        try:
            user = self._auth.validate(token=token)
        except DomainError as e:
            logger.info("Stored credential rejected: %s", e)
            self._become_anonymous()
            return self._state

        self._become_authenticated(token, user)
        return self._state

    def login(self, username: str, password: str) -> bool:
        self.last_error = None
        try:
            username = require_non_empty(username, "Username")
            password = require_non_empty(password, "Password")
            result = self._auth.login(username=username, password=password)
        except DomainError as e:
            self.last_error = str(e) or "Login failed"
            self._become_anonymous()
            return False

        self._storage.save(result.token)
        self._become_authenticated(result.token, result.user)
        logger.info("User %s signed in", result.user.user_id)
        return True

    def register(self, fields: Mapping[str, Any]) -> bool:
        self.last_error = None
        try:
            payload = {
                "firstName": require_non_empty(str(fields.get("firstName") or ""), "First name"),
                "lastName": require_non_empty(str(fields.get("lastName") or ""), "Last name"),
                "username": require_non_empty(str(fields.get("username") or ""), "Username"),
                "email": require_non_empty(str(fields.get("email") or ""), "Email"),
                "password": require_min_length(str(fields.get("password") or ""), "Password", MIN_PASSWORD_LENGTH),
            }
            self._auth.register(payload=payload)
        except DomainError as e:
            self.last_error = str(e) or "Registration failed"
            return False
        return True

    def logout(self) -> None:
        if self._user:
            logger.info("User %s signed out", self._user.user_id)
        self._become_anonymous()

    def update_profile(self, fields: Mapping[str, Any]) -> User:
        if not self._credential or not self._user:
            raise AuthenticationError("Please sign in to continue")

        changes = {k: v for k, v in fields.items() if k in PROFILE_FIELDS and v is not None}
        try:
            user = self._auth.update_profile(token=self._credential, fields=changes)
        except AuthenticationError:
            self.expire()
            raise
        self._user = user
        return user

    def expire(self) -> None:
        """Drop a credential the API no longer accepts."""
        self._become_anonymous()
