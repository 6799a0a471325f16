from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StateConflictError,
    TransportError,
    ValidationError,
)
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def bearer_headers(token: Optional[str]) -> Dict[str, str]:
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def extract_message(response: requests.Response) -> Optional[str]:
    """Return the `message` field of an error body, if the server sent one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    return None


def error_for_response(response: requests.Response) -> DomainError:
    status = response.status_code
    message = extract_message(response)

    if status == 401:
        return AuthenticationError(message or "Authentication failed")
    if status == 403:
        return AuthorizationError(message or "You do not have permission to do that")
    if status == 404:
        return NotFoundError(message or "Resource not found")
    if status == 409:
        return StateConflictError(message or "The resource was changed by someone else")
    if status in {400, 422}:
        return ValidationError(message or "Invalid request")
    return ApiError(message or "An unexpected error occurred", status_code=status)


def api_request(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    json: Any = None,
) -> requests.Response:
    try:
        response = conn.session().request(
            method,
            conn.url(path),
            headers=bearer_headers(token),
            json=json,
            timeout=conn.config.timeout,
        )
    except requests.RequestException as e:
        logger.warning("%s %s failed: %s", method, path, e)
        raise TransportError("Unable to reach the server. Please try again.") from e

    if not response.ok:
        logger.info("%s %s -> %s", method, path, response.status_code)
        raise error_for_response(response)
    return response


def read_json(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json(parse_float=Decimal)
    except ValueError:
        raise ApiError("Unexpected response from server", status_code=response.status_code)


def get_json(conn: ApiConnection, path: str, *, token: Optional[str] = None) -> Any:
    return read_json(api_request(conn, "GET", path, token=token))


def get_list(conn: ApiConnection, path: str, *, token: Optional[str] = None) -> List[Dict[str, Any]]:
    data = get_json(conn, path, token=token)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ApiError("Unexpected response from server")
    return list(data)


def send_json(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    json: Any = None,
) -> Any:
    return read_json(api_request(conn, method, path, token=token, json=json))


def get_bytes(conn: ApiConnection, path: str, *, token: Optional[str] = None) -> bytes:
    return api_request(conn, "GET", path, token=token).content
