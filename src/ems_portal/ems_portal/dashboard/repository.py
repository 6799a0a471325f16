from __future__ import annotations

from typing import Protocol

from .model import DashboardStats


class DashboardRepository(Protocol):
    def get_stats(self, *, token: str) -> DashboardStats:
        raise NotImplementedError
