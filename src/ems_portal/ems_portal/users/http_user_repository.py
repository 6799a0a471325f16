from __future__ import annotations

from typing import Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, get_list
from ..auth.http_auth_repository import user_from_payload
from ..auth.model import User
from .repository import UserRepository


class HttpUserRepository(UserRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self, *, token: str) -> Sequence[User]:
        return [user_from_payload(r) for r in get_list(self._conn, "/api/users", token=token)]

    def delete_by_id(self, *, token: str, user_id: int) -> None:
        api_request(self._conn, "DELETE", f"/api/users/{int(user_id)}", token=token)
