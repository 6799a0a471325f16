from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PayrollRecord:
    """One employee's payroll line for a month, computed by the server."""

    employee_id: int
    employee_name: str
    department: str
    position: str
    hours_worked: Decimal
    hourly_rate: Decimal
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal


@dataclass(frozen=True)
class PayrollTotals:
    gross_pay: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    net_pay: Decimal = Decimal("0")


@dataclass(frozen=True)
class PayrollReport:
    month: str
    content: bytes
    content_type: str

    @property
    def filename(self) -> str:
        return f"payroll-{self.month}.pdf"
