from __future__ import annotations

from typing import Mapping

from ..api.connection import ApiConnection
from ..api.http_base import get_json
from ..common.validators import to_decimal
from ..core.exceptions import ApiError
from .model import DashboardStats
from .repository import DashboardRepository


class HttpDashboardRepository(DashboardRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_stats(self, *, token: str) -> DashboardStats:
        data = get_json(self._conn, "/api/dashboard/stats", token=token) or {}
        if not isinstance(data, Mapping):
            raise ApiError("Unexpected dashboard payload from server")
        try:
            return DashboardStats(
                total_hours=to_decimal(data.get("totalHours")),
                pending_logs=int(data.get("pendingLogs") or 0),
                approved_logs=int(data.get("approvedLogs") or 0),
                total_earnings=to_decimal(data.get("totalEarnings")),
            )
        except (TypeError, ValueError) as e:
            raise ApiError(f"Unexpected dashboard payload from server: {e}")
