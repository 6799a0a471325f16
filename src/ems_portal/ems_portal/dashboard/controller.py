from __future__ import annotations

import logging

from flask import Flask, g, redirect, render_template, url_for

from ..auth.guards import login_required
from ..core.exceptions import DomainError
from ..container import Container
from .model import DashboardStats

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        store = g.session_store
        try:
            stats = container.dashboard_service.fetch_stats(session=store)
        except DomainError as e:
            # Stats are informational: fall back to zeros instead of blocking the page.
            logger.error("Failed to fetch dashboard stats: %s", e)
            if not store.is_authenticated:
                return redirect(url_for("login"))
            stats = DashboardStats()

        return render_template(
            "dashboard.html",
            name=store.current_user.first_name,
            cards=container.dashboard_service.cards(stats),
            active_page="dashboard",
        )
