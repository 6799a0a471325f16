from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.ems_portal.ems_portal.auth.model import User
from src.ems_portal.ems_portal.auth.service import SessionStore
from src.ems_portal.ems_portal.auth.storage import InMemoryCredentialStorage
from src.ems_portal.ems_portal.core.enums import Role, SessionState, WorkLogAction, WorkLogStatus
from src.ems_portal.ems_portal.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    StateConflictError,
    TransportError,
)
from src.ems_portal.ems_portal.worklogs.model import WorkLog, WorkLogEntry
from src.ems_portal.ems_portal.worklogs.service import WorkLogRegistry

ADMIN = User(user_id=1, first_name="Root", last_name="Admin", role=Role.ADMIN)
ALICE = User(user_id=2, first_name="Alice", last_name="Nguyen", role=Role.EMPLOYEE)
TOKENS = {"admin-token": ADMIN, "alice-token": ALICE}


class FakeAuthRepo:
    def validate(self, *, token):
        if token not in TOKENS:
            raise AuthenticationError("Token expired")
        return TOKENS[token]


class FakeWorkLogRepo:
    """Plays the server: assigns ids, enforces PENDING-only changes."""

    def __init__(self):
        self._next_id = 1
        self.logs: dict[int, WorkLog] = {}
        self.calls: list[str] = []
        self.fail_next: Exception | None = None
        self.list_error: Exception | None = None

    def _maybe_fail(self):
        if self.fail_next:
            err, self.fail_next = self.fail_next, None
            raise err

    def _replace(self, log: WorkLog, **changes) -> WorkLog:
        data = dict(log.__dict__)
        data.update(changes)
        self.logs[log.log_id] = WorkLog(**data)
        return self.logs[log.log_id]

    def _pending(self, log_id: int) -> WorkLog:
        log = self.logs[log_id]
        if log.status is not WorkLogStatus.PENDING:
            raise StateConflictError("Work log is no longer pending")
        return log

    def list_all(self, *, token):
        self.calls.append("list")
        self._maybe_fail()
        if self.list_error:
            raise self.list_error
        user = TOKENS[token]
        if user.role is Role.ADMIN:
            return list(self.logs.values())
        return [log for log in self.logs.values() if log.employee_id == user.user_id]

    def create(self, *, token, entry):
        self.calls.append("create")
        self._maybe_fail()
        log = WorkLog(
            log_id=self._next_id,
            work_date=entry.work_date,
            hours_worked=entry.hours_worked,
            remarks=entry.remarks,
            status=WorkLogStatus.PENDING,
            employee_id=TOKENS[token].user_id,
        )
        self.logs[log.log_id] = log
        self._next_id += 1
        return log

    def update(self, *, token, log_id, entry):
        self.calls.append("update")
        self._maybe_fail()
        log = self._pending(log_id)
        return self._replace(log, work_date=entry.work_date, hours_worked=entry.hours_worked, remarks=entry.remarks)

    def delete(self, *, token, log_id):
        self.calls.append("delete")
        self._maybe_fail()
        self._pending(log_id)
        del self.logs[log_id]

    def approve(self, *, token, log_id):
        self.calls.append("approve")
        self._maybe_fail()
        return self._replace(self._pending(log_id), status=WorkLogStatus.APPROVED)

    def reject(self, *, token, log_id):
        self.calls.append("reject")
        self._maybe_fail()
        return self._replace(self._pending(log_id), status=WorkLogStatus.REJECTED)


def _session(token: str) -> SessionStore:
    store = SessionStore(FakeAuthRepo(), InMemoryCredentialStorage(token))
    store.restore()
    return store


def _entry(**overrides) -> WorkLogEntry:
    fields = {"work_date": "2024-01-05", "hours_worked": "8", "remarks": "on-site"}
    fields.update(overrides)
    return WorkLogEntry.from_form(**fields)


def test_employee_submission_appears_pending_after_refresh():
    repo = FakeWorkLogRepo()
    registry = WorkLogRegistry(repo, _session("alice-token"))

    registry.create(_entry())

    assert repo.calls == ["create", "list"]
    (log,) = registry.entries
    assert log.status is WorkLogStatus.PENDING
    assert log.work_date == date(2024, 1, 5)
    assert log.hours_worked == Decimal("8")
    assert log.remarks == "on-site"


def test_only_owner_and_admin_may_act_on_a_pending_log():
    repo = FakeWorkLogRepo()
    WorkLogRegistry(repo, _session("alice-token")).create(_entry())

    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.list()
    admin = WorkLogRegistry(repo, _session("admin-token"))
    admin.list()

    assert alice.actions_for(alice.entries[0]) == {WorkLogAction.EDIT, WorkLogAction.DELETE}
    assert admin.actions_for(admin.entries[0]) == {WorkLogAction.APPROVE, WorkLogAction.REJECT}


def test_no_actions_offered_once_decided():
    repo = FakeWorkLogRepo()
    WorkLogRegistry(repo, _session("alice-token")).create(_entry())
    admin = WorkLogRegistry(repo, _session("admin-token"))
    admin.list()
    admin.approve(1)

    assert admin.entries[0].status is WorkLogStatus.APPROVED
    assert admin.actions_for(admin.entries[0]) == frozenset()

    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.list()
    assert alice.actions_for(alice.entries[0]) == frozenset()


@pytest.mark.parametrize("decided", [WorkLogStatus.APPROVED, WorkLogStatus.REJECTED])
@pytest.mark.parametrize("action", ["approve", "reject"])
def test_decisions_on_terminal_logs_fail_without_touching_cache(decided, action):
    repo = FakeWorkLogRepo()
    WorkLogRegistry(repo, _session("alice-token")).create(_entry())
    repo.logs[1] = WorkLog(**{**repo.logs[1].__dict__, "status": decided})

    admin = WorkLogRegistry(repo, _session("admin-token"))
    admin.list()
    before = admin.entries
    repo.calls.clear()

    with pytest.raises(StateConflictError):
        getattr(admin, action)(1)

    assert admin.entries == before
    assert repo.calls == []


def test_employee_cannot_approve():
    repo = FakeWorkLogRepo()
    registry = WorkLogRegistry(repo, _session("alice-token"))
    registry.create(_entry())

    with pytest.raises(AuthorizationError):
        registry.approve(1)
    assert repo.logs[1].status is WorkLogStatus.PENDING


def test_update_conflict_from_server_refreshes_cache():
    repo = FakeWorkLogRepo()
    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.create(_entry())

    # An admin decides after Alice's cache was filled.
    WorkLogRegistry(repo, _session("admin-token")).reject(1)
    assert alice.entries[0].status is WorkLogStatus.PENDING

    with pytest.raises(StateConflictError):
        alice.update(1, _entry(hours_worked="7.5"))

    assert alice.entries[0].status is WorkLogStatus.REJECTED
    assert alice.entries[0].hours_worked == Decimal("8")


def test_update_pending_log_refetches():
    repo = FakeWorkLogRepo()
    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.create(_entry())
    repo.calls.clear()

    alice.update(1, _entry(hours_worked="7.5", remarks="remote"))

    assert repo.calls == ["update", "list"]
    assert alice.entries[0].hours_worked == Decimal("7.5")
    assert alice.entries[0].remarks == "remote"


def test_delete_requires_confirmation():
    repo = FakeWorkLogRepo()
    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.create(_entry())
    repo.calls.clear()

    assert alice.delete(1, confirmed=False) is False
    assert repo.calls == []
    assert len(alice.entries) == 1

    assert alice.delete(1, confirmed=True) is True
    assert alice.entries == ()


def test_network_failure_is_reported_once_and_cache_kept():
    repo = FakeWorkLogRepo()
    alice = WorkLogRegistry(repo, _session("alice-token"))
    alice.create(_entry())
    before = alice.entries
    repo.calls.clear()

    repo.fail_next = TransportError("Unable to reach the server")
    with pytest.raises(TransportError):
        alice.create(_entry(work_date="2024-01-06"))

    # No retry of the create; the follow-up refresh is a plain list.
    assert repo.calls == ["create", "list"]
    assert alice.entries == before


def test_create_succeeds_when_follow_up_refresh_fails():
    repo = FakeWorkLogRepo()
    registry = WorkLogRegistry(repo, _session("alice-token"))

    repo.list_error = TransportError("Unable to reach the server")
    created = registry.create(_entry())

    assert created.log_id == 1
    assert len(repo.logs) == 1
    assert repo.calls == ["create", "list"]


def test_decision_succeeds_when_follow_up_refresh_fails():
    repo = FakeWorkLogRepo()
    WorkLogRegistry(repo, _session("alice-token")).create(_entry())
    admin = WorkLogRegistry(repo, _session("admin-token"))
    admin.list()

    repo.list_error = TransportError("Unable to reach the server")
    admin.approve(1)

    assert repo.logs[1].status is WorkLogStatus.APPROVED


def test_operations_require_an_authenticated_session():
    store = SessionStore(FakeAuthRepo(), InMemoryCredentialStorage())
    store.restore()
    registry = WorkLogRegistry(FakeWorkLogRepo(), store)

    with pytest.raises(AuthenticationError):
        registry.list()


def test_expired_token_during_list_ends_session():
    repo = FakeWorkLogRepo()
    store = _session("alice-token")
    registry = WorkLogRegistry(repo, store)

    repo.fail_next = AuthenticationError("Token expired")
    with pytest.raises(AuthenticationError):
        registry.list()

    assert store.state is SessionState.ANONYMOUS
