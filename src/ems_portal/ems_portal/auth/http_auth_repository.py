from __future__ import annotations

from typing import Any, Mapping

from ..api.connection import ApiConnection
from ..api.http_base import get_json, send_json
from ..core.enums import Role
from ..core.exceptions import ApiError
from .model import LoginResult, User
from .repository import AuthRepository


def user_from_payload(data: Mapping[str, Any]) -> User:
    if not isinstance(data, Mapping):
        raise ApiError("Unexpected user payload from server")
    try:
        role = Role.parse(str(data.get("role") or ""))
        return User(
            user_id=int(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            role=role,
            username=data.get("username"),
            email=data.get("email"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Unexpected user payload from server: {e}")


class HttpAuthRepository(AuthRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def validate(self, *, token: str) -> User:
        return user_from_payload(get_json(self._conn, "/api/auth/validate", token=token))

    def login(self, *, username: str, password: str) -> LoginResult:
        data = send_json(
            self._conn,
            "POST",
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        if not isinstance(data, Mapping) or not data.get("token"):
            raise ApiError("Login response did not include a token")
        user_data = {k: v for k, v in data.items() if k != "token"}
        return LoginResult(token=str(data["token"]), user=user_from_payload(user_data))

    def register(self, *, payload: Mapping[str, Any]) -> None:
        send_json(self._conn, "POST", "/api/auth/register", json=dict(payload))

    def update_profile(self, *, token: str, fields: Mapping[str, Any]) -> User:
        data = send_json(self._conn, "PUT", "/api/users/profile", token=token, json=dict(fields))
        return user_from_payload(data)
