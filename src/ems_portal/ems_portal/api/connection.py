from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import requests


@dataclass
class ApiConfig:
    base_url: str
    timeout: Optional[float] = None


class ApiConnection:
    """Singleton-like factory for the HTTP session used to reach the EMS REST API.

    Note: One requests.Session is created lazily and reused for every call so
    connections are pooled. The bearer credential is passed per request, the
    session itself never stores it.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, *, session_factory: Callable[[], requests.Session] = requests.Session):
        self._config = config
        self._session_factory = session_factory
        self._session: Optional[requests.Session] = None

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def config(self) -> ApiConfig:
        return self._config

    def url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = self._session_factory()
        return self._session
