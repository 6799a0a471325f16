"""Example: drive the service layer without Flask.

Controllers stay thin; signing in and listing work logs happen in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.ems_portal.ems_portal.auth.storage import InMemoryCredentialStorage
from src.ems_portal.ems_portal.container import build_container


def main(username: str, password: str):
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config={"base_url": settings.API_BASE_URL, "timeout": settings.API_TIMEOUT})

    session = container.open_session(InMemoryCredentialStorage())
    if not session.login(username, password):
        print(f"login failed: {session.last_error}")
        return 1

    print(f"signed in as {session.current_user.full_name} ({session.current_user.role.value})")
    for log in container.worklog_registry(session).list():
        print(log.work_date.isoformat(), log.hours_worked, log.status.value, log.remarks)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:3]))
