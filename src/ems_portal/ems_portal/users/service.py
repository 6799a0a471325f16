from __future__ import annotations

from typing import List

from ..auth.model import User
from ..auth.service import SessionStore
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .repository import UserRepository


class UserDirectory:
    """Use case: manage user accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    @staticmethod
    def _admin_token(session: SessionStore) -> str:
        if not session.credential or not session.is_authenticated:
            raise AuthenticationError("Please sign in to continue")
        if not session.is_admin:
            raise AuthorizationError("Only administrators can manage users")
        return session.credential

    def list_users(self, *, session: SessionStore) -> List[User]:
        token = self._admin_token(session)
        try:
            return list(self._users.list_all(token=token))
        except AuthenticationError:
            session.expire()
            raise

    def delete_user(self, *, session: SessionStore, user_id: int) -> None:
        token = self._admin_token(session)
        if session.current_user and session.current_user.user_id == int(user_id):
            raise ValidationError("You cannot delete your own account")
        try:
            self._users.delete_by_id(token=token, user_id=int(user_id))
        except AuthenticationError:
            session.expire()
            raise
