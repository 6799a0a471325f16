from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..auth.service import SessionStore
from ..core.exceptions import AuthenticationError
from .model import DashboardStats
from .repository import DashboardRepository


@dataclass(frozen=True)
class StatCard:
    name: str
    value: str


class DashboardService:
    def __init__(self, dashboard: DashboardRepository):
        self._dashboard = dashboard

    def fetch_stats(self, *, session: SessionStore) -> DashboardStats:
        if not session.credential or not session.is_authenticated:
            raise AuthenticationError("Please sign in to continue")
        try:
            return self._dashboard.get_stats(token=session.credential)
        except AuthenticationError:
            session.expire()
            raise

    @staticmethod
    def cards(stats: DashboardStats) -> List[StatCard]:
        return [
            StatCard("Total Hours", f"{stats.total_hours:.1f}"),
            StatCard("Pending Logs", str(stats.pending_logs)),
            StatCard("Approved Logs", str(stats.approved_logs)),
            StatCard("Total Earnings", f"${stats.total_earnings:,.2f}"),
        ]
