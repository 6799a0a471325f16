from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .api.connection import ApiConfig, ApiConnection
from .auth.http_auth_repository import HttpAuthRepository
from .auth.repository import AuthRepository
from .auth.service import SessionStore
from .auth.storage import CredentialStorage, FlaskSessionCredentialStorage
from .dashboard.http_dashboard_repository import HttpDashboardRepository
from .dashboard.repository import DashboardRepository
from .dashboard.service import DashboardService
from .payroll.http_payroll_repository import HttpPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .users.http_user_repository import HttpUserRepository
from .users.repository import UserRepository
from .users.service import UserDirectory
from .worklogs.http_worklog_repository import HttpWorkLogRepository
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogRegistry


@dataclass(frozen=True)
class Container:
    auth_repo: AuthRepository
    worklogs_repo: WorkLogRepository
    dashboard_repo: DashboardRepository
    payroll_repo: PayrollRepository
    users_repo: UserRepository

    dashboard_service: DashboardService
    payroll_service: PayrollService
    user_directory: UserDirectory

    storage_factory: Callable[[], CredentialStorage] = FlaskSessionCredentialStorage
    conn: Optional[ApiConnection] = None

    def open_session(self, storage: Optional[CredentialStorage] = None) -> SessionStore:
        """New per-request session store; call restore() before use."""
        return SessionStore(self.auth_repo, storage or self.storage_factory())

    def worklog_registry(self, session: SessionStore) -> WorkLogRegistry:
        return WorkLogRegistry(self.worklogs_repo, session)


def build_container(*, api_config: dict) -> Container:
    timeout = api_config.get("timeout")
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(timeout) if timeout else None,
    )
    conn = ApiConnection.get_instance(config)

    auth_repo = HttpAuthRepository(conn)
    worklogs_repo = HttpWorkLogRepository(conn)
    dashboard_repo = HttpDashboardRepository(conn)
    payroll_repo = HttpPayrollRepository(conn)
    users_repo = HttpUserRepository(conn)

    return Container(
        conn=conn,
        auth_repo=auth_repo,
        worklogs_repo=worklogs_repo,
        dashboard_repo=dashboard_repo,
        payroll_repo=payroll_repo,
        users_repo=users_repo,
        dashboard_service=DashboardService(dashboard_repo),
        payroll_service=PayrollService(payroll_repo),
        user_directory=UserDirectory(users_repo),
    )
