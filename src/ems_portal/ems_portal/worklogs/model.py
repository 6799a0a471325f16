from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_decimal_in_range
from ..core.constants import MAX_HOURS_PER_DAY, MIN_HOURS_PER_DAY
from ..core.enums import WorkLogStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkLog:
    log_id: int
    work_date: date
    hours_worked: Decimal
    remarks: str
    status: WorkLogStatus
    employee_id: Optional[int] = None
    employee_name: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status is WorkLogStatus.PENDING


@dataclass(frozen=True)
class WorkLogEntry:
    """Fields an employee submits when creating or editing a work log."""

    work_date: date
    hours_worked: Decimal
    remarks: str = ""

    @classmethod
    def from_form(cls, *, work_date: Any, hours_worked: Any, remarks: Any = "") -> "WorkLogEntry":
        if isinstance(work_date, date):
            parsed_date = work_date
        else:
            try:
                parsed_date = parse_iso_date((work_date or "").strip())
            except ValueError:
                raise ValidationError("Date is invalid (YYYY-MM-DD)")

        if hours_worked is None or str(hours_worked).strip() == "":
            raise ValidationError("Hours worked is required")
        hours = require_decimal_in_range(hours_worked, "Hours worked", MIN_HOURS_PER_DAY, MAX_HOURS_PER_DAY)

        return cls(work_date=parsed_date, hours_worked=hours, remarks=(remarks or "").strip())

    def to_payload(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "hoursWorked": float(self.hours_worked),
            "remarks": self.remarks,
        }
