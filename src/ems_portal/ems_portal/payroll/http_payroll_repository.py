from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, get_bytes, get_list
from ..common.validators import to_decimal
from ..core.exceptions import ApiError
from .model import PayrollRecord
from .repository import PayrollRepository


def payroll_from_payload(row: Mapping[str, Any]) -> PayrollRecord:
    try:
        return PayrollRecord(
            employee_id=int(row["employeeId"]),
            employee_name=row.get("employeeName") or "",
            department=row.get("department") or "-",
            position=row.get("position") or "-",
            hours_worked=to_decimal(row.get("hoursWorked")),
            hourly_rate=to_decimal(row.get("hourlyRate")),
            gross_pay=to_decimal(row.get("grossPay")),
            deductions=to_decimal(row.get("deductions")),
            net_pay=to_decimal(row.get("netPay")),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Unexpected payroll payload from server: {e}")


class HttpPayrollRepository(PayrollRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_month(self, *, token: str, month: str) -> Sequence[PayrollRecord]:
        return [payroll_from_payload(r) for r in get_list(self._conn, f"/api/payroll/{month}", token=token)]

    def generate(self, *, token: str, month: str) -> None:
        api_request(self._conn, "POST", f"/api/payroll/generate/{month}", token=token)

    def download_report(self, *, token: str, month: str) -> bytes:
        return get_bytes(self._conn, f"/api/payroll/{month}/report", token=token)
