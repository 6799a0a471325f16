from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, url_for

from ..auth.guards import admin_required
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/users", endpoint="users")
    @admin_required
    def users():
        accounts = []
        try:
            accounts = container.user_directory.list_users(session=g.session_store)
        except AuthorizationError:
            return redirect(url_for("dashboard"))
        except AuthenticationError as e:
            flash(str(e), "danger")
            return redirect(url_for("login"))
        except DomainError:
            flash("Failed to fetch users", "danger")
        return render_template("users/index.html", users=accounts, active_page="users")

    @app.route("/users/<int:user_id>/delete", methods=["POST"], endpoint="delete_user")
    @admin_required
    def delete_user(user_id: int):
        try:
            container.user_directory.delete_user(session=g.session_store, user_id=user_id)
            flash("User deleted", "success")
        except AuthorizationError:
            return redirect(url_for("dashboard"))
        except DomainError as e:
            flash(str(e) or "Failed to delete user", "danger")
        except Exception:
            logger.exception("Deleting user %s failed", user_id)
            flash("Failed to delete user", "danger")
        return redirect(url_for("users"))
