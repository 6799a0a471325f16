from __future__ import annotations

import logging
from typing import Callable, FrozenSet, List, Optional, Tuple, TypeVar

from ..auth import gate
from ..auth.model import User
from ..auth.service import SessionStore
from ..core.enums import WorkLogAction, WorkLogStatus
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, StateConflictError
from .model import WorkLog, WorkLogEntry
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def actions_for(log: WorkLog, user: Optional[User]) -> FrozenSet[WorkLogAction]:
    """Actions the view may offer on a row.

    Edit/delete belong to the owner while PENDING. When the API does not report
    an owner the list only holds the caller's own logs, so ownership is assumed.
    Approve/reject belong to admins while PENDING.
    """
    if user is None or not log.is_pending:
        return frozenset()

    actions = set()
    if log.employee_id is None or log.employee_id == user.user_id:
        actions |= {WorkLogAction.EDIT, WorkLogAction.DELETE}
    if gate.is_admin(user):
        actions |= {WorkLogAction.APPROVE, WorkLogAction.REJECT}
    return frozenset(actions)


class WorkLogRegistry:
    """Client-side cache of the caller's work logs.

    Every mutation goes to the API and is followed by a full re-fetch. On
    failure the cache is refreshed from the server instead of being patched.
    A re-fetch that fails after the server accepted a change is only logged:
    the change itself succeeded.
    """

    def __init__(self, logs: WorkLogRepository, session: SessionStore):
        self._logs = logs
        self._session = session
        self._entries: List[WorkLog] = []

    @property
    def entries(self) -> Tuple[WorkLog, ...]:
        return tuple(self._entries)

    def get(self, log_id: int) -> Optional[WorkLog]:
        for log in self._entries:
            if log.log_id == int(log_id):
                return log
        return None

    def actions_for(self, log: WorkLog) -> FrozenSet[WorkLogAction]:
        return actions_for(log, self._session.current_user)

    def _token(self) -> str:
        token = self._session.credential
        if not token or not self._session.is_authenticated:
            raise AuthenticationError("Please sign in to continue")
        return token

    def _require_pending(self, log_id: int, action: str) -> None:
        log = self.get(log_id)
        if log is not None and log.status is not WorkLogStatus.PENDING:
            raise StateConflictError(f"Cannot {action} a work log that is already {log.status.value.lower()}")

    def _call(self, operation: Callable[[str], T]) -> T:
        token = self._token()
        try:
            return operation(token)
        except AuthenticationError:
            self._session.expire()
            raise
        except DomainError:
            self._refresh()
            raise

    def _refresh(self) -> None:
        try:
            self.list()
        except DomainError as e:
            logger.warning("Could not refresh work logs: %s", e)

    def list(self) -> Tuple[WorkLog, ...]:
        token = self._token()
        try:
            self._entries = list(self._logs.list_all(token=token))
        except AuthenticationError:
            self._session.expire()
            raise
        return self.entries

    def create(self, entry: WorkLogEntry) -> Optional[WorkLog]:
        created = self._call(lambda token: self._logs.create(token=token, entry=entry))
        self._refresh()
        return created

    def update(self, log_id: int, entry: WorkLogEntry) -> Optional[WorkLog]:
        self._require_pending(log_id, "edit")
        updated = self._call(lambda token: self._logs.update(token=token, log_id=int(log_id), entry=entry))
        self._refresh()
        return updated

    def delete(self, log_id: int, *, confirmed: bool) -> bool:
        if not confirmed:
            return False
        self._require_pending(log_id, "delete")
        self._call(lambda token: self._logs.delete(token=token, log_id=int(log_id)))
        self._refresh()
        return True

    def _decide(self, log_id: int, status: WorkLogStatus) -> Optional[WorkLog]:
        if not self._session.is_admin:
            raise AuthorizationError("Only administrators can review work logs")
        verb = "approve" if status is WorkLogStatus.APPROVED else "reject"
        self._require_pending(log_id, verb)

        if status is WorkLogStatus.APPROVED:
            decided = self._call(lambda token: self._logs.approve(token=token, log_id=int(log_id)))
        else:
            decided = self._call(lambda token: self._logs.reject(token=token, log_id=int(log_id)))
        self._refresh()
        return decided

    def approve(self, log_id: int) -> Optional[WorkLog]:
        return self._decide(log_id, WorkLogStatus.APPROVED)

    def reject(self, log_id: int) -> Optional[WorkLog]:
        return self._decide(log_id, WorkLogStatus.REJECTED)
