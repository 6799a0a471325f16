from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_SESSION_DAYS
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users
from .worklogs.controller import register as register_worklogs

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(
        days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    )

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    api_config = {
        "base_url": getattr(settings, "API_BASE_URL", DEFAULT_API_BASE_URL),
        "timeout": getattr(settings, "API_TIMEOUT", None),
    }
    logger.info("[ems-portal] settings=%s api=%s", settings_module, api_config["base_url"])

    container = container or build_container(api_config=api_config)

    register_auth(app, container)
    register_dashboard(app, container)
    register_worklogs(app, container)
    register_payroll(app, container)
    register_users(app, container)

    return app
