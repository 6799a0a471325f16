from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DashboardStats:
    total_hours: Decimal = Decimal("0")
    pending_logs: int = 0
    approved_logs: int = 0
    total_earnings: Decimal = Decimal("0")
