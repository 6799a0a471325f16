from __future__ import annotations

import pytest

from src.ems_portal.ems_portal.auth.model import User
from src.ems_portal.ems_portal.auth.service import SessionStore
from src.ems_portal.ems_portal.auth.storage import InMemoryCredentialStorage
from src.ems_portal.ems_portal.core.enums import Role
from src.ems_portal.ems_portal.core.exceptions import AuthorizationError, ValidationError
from src.ems_portal.ems_portal.users.service import UserDirectory

ADMIN = User(user_id=1, first_name="Root", last_name="Admin", role=Role.ADMIN)
ALICE = User(user_id=2, first_name="Alice", last_name="Nguyen", role=Role.EMPLOYEE)
TOKENS = {"admin-token": ADMIN, "alice-token": ALICE}


class FakeAuthRepo:
    def validate(self, *, token):
        return TOKENS[token]


class FakeUserRepo:
    def __init__(self):
        self.users = {u.user_id: u for u in TOKENS.values()}

    def list_all(self, *, token):
        return list(self.users.values())

    def delete_by_id(self, *, token, user_id):
        del self.users[user_id]


def _session(token: str) -> SessionStore:
    store = SessionStore(FakeAuthRepo(), InMemoryCredentialStorage(token))
    store.restore()
    return store


def test_admin_lists_and_deletes_users():
    repo = FakeUserRepo()
    directory = UserDirectory(repo)
    admin = _session("admin-token")

    assert len(directory.list_users(session=admin)) == 2
    directory.delete_user(session=admin, user_id=2)
    assert list(repo.users) == [1]


def test_admin_cannot_delete_self():
    repo = FakeUserRepo()
    with pytest.raises(ValidationError):
        UserDirectory(repo).delete_user(session=_session("admin-token"), user_id=1)
    assert 1 in repo.users


def test_employee_cannot_manage_users():
    directory = UserDirectory(FakeUserRepo())
    with pytest.raises(AuthorizationError):
        directory.list_users(session=_session("alice-token"))
    with pytest.raises(AuthorizationError):
        directory.delete_user(session=_session("alice-token"), user_id=1)
