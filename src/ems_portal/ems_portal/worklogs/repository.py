from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkLog, WorkLogEntry


class WorkLogRepository(Protocol):
    """Work-log endpoints of the EMS API. Every call carries the caller's token."""

    def list_all(self, *, token: str) -> Sequence[WorkLog]:
        """Logs visible to the caller; the server decides the per-role filter."""

        raise NotImplementedError

    def create(self, *, token: str, entry: WorkLogEntry) -> Optional[WorkLog]:
        raise NotImplementedError

    def update(self, *, token: str, log_id: int, entry: WorkLogEntry) -> Optional[WorkLog]:
        raise NotImplementedError

    def delete(self, *, token: str, log_id: int) -> None:
        raise NotImplementedError

    def approve(self, *, token: str, log_id: int) -> Optional[WorkLog]:
        raise NotImplementedError

    def reject(self, *, token: str, log_id: int) -> Optional[WorkLog]:
        raise NotImplementedError
