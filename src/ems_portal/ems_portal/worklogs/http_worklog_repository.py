from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, get_list, send_json
from ..common.datetime_utils import parse_iso_date
from ..common.validators import to_decimal
from ..core.enums import WorkLogStatus
from ..core.exceptions import ApiError
from .model import WorkLog, WorkLogEntry
from .repository import WorkLogRepository


def worklog_from_payload(row: Mapping[str, Any]) -> WorkLog:
    try:
        employee_id = row.get("userId", row.get("employeeId"))
        return WorkLog(
            log_id=int(row["id"]),
            work_date=parse_iso_date(str(row["date"])[:10]),
            hours_worked=to_decimal(row.get("hoursWorked")),
            remarks=row.get("remarks") or "",
            status=WorkLogStatus(str(row.get("status") or WorkLogStatus.PENDING.value).upper()),
            employee_id=int(employee_id) if employee_id is not None else None,
            employee_name=row.get("employeeName") or row.get("userName"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Unexpected work log payload from server: {e}")


def _maybe_worklog(data: Any) -> Optional[WorkLog]:
    # Some endpoints answer with an empty acknowledgement instead of the entity.
    if not data:
        return None
    return worklog_from_payload(data)


class HttpWorkLogRepository(WorkLogRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self, *, token: str) -> Sequence[WorkLog]:
        return [worklog_from_payload(r) for r in get_list(self._conn, "/api/worklogs", token=token)]

    def create(self, *, token: str, entry: WorkLogEntry) -> Optional[WorkLog]:
        data = send_json(self._conn, "POST", "/api/worklogs", token=token, json=entry.to_payload())
        return _maybe_worklog(data)

    def update(self, *, token: str, log_id: int, entry: WorkLogEntry) -> Optional[WorkLog]:
        data = send_json(self._conn, "PUT", f"/api/worklogs/{int(log_id)}", token=token, json=entry.to_payload())
        return _maybe_worklog(data)

    def delete(self, *, token: str, log_id: int) -> None:
        api_request(self._conn, "DELETE", f"/api/worklogs/{int(log_id)}", token=token)

    def approve(self, *, token: str, log_id: int) -> Optional[WorkLog]:
        data = send_json(self._conn, "PUT", f"/api/worklogs/{int(log_id)}/approve", token=token)
        return _maybe_worklog(data)

    def reject(self, *, token: str, log_id: int) -> Optional[WorkLog]:
        data = send_json(self._conn, "PUT", f"/api/worklogs/{int(log_id)}/reject", token=token)
        return _maybe_worklog(data)
