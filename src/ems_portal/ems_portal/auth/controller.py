from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..core.exceptions import DomainError
from ..container import Container
from . import gate
from .guards import login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def restore_session():
        g.session_store = container.open_session()
        if request.endpoint == "static":
            return None
        g.session_store.restore()
        return None

    @app.context_processor
    def inject_current_user():
        store = g.get("session_store")
        user = store.current_user if store else None
        return {
            "current_user": user,
            "is_admin": gate.is_admin(user),
            "navigation": gate.navigation_for(user),
        }

    @app.route("/", endpoint="index")
    @login_required
    def index():
        return redirect(url_for("dashboard"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        store = g.session_store
        if store.is_authenticated:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            if store.login(username, password):
                flash("Login successful", "success")
                return redirect(url_for("dashboard"))
            flash(store.last_error or "Login failed", "danger")

        return render_template("auth/login.html")

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_account():
        store = g.session_store
        if store.is_authenticated:
            return redirect(url_for("dashboard"))

        form = {}
        if request.method == "POST":
            form = {
                "firstName": request.form.get("firstName", ""),
                "lastName": request.form.get("lastName", ""),
                "username": request.form.get("username", ""),
                "email": request.form.get("email", ""),
                "password": request.form.get("password", ""),
            }
            if store.register(form):
                flash("Registration successful", "success")
                return redirect(url_for("login"))
            flash(store.last_error or "Registration failed", "danger")
            form.pop("password", None)

        return render_template("auth/register.html", form=form)

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        g.session_store.logout()
        flash("Logged out successfully", "info")
        return redirect(url_for("login"))

    @app.route("/profile", methods=["GET", "POST"], endpoint="profile")
    @login_required
    def profile():
        store = g.session_store
        if request.method == "POST":
            try:
                store.update_profile(
                    {
                        "firstName": request.form.get("firstName"),
                        "lastName": request.form.get("lastName"),
                        "email": request.form.get("email"),
                    }
                )
                flash("Profile updated successfully", "success")
                return redirect(url_for("profile"))
            except DomainError as e:
                flash(str(e) or "Profile update failed", "danger")
                if not store.is_authenticated:
                    return redirect(url_for("login"))
            except Exception:
                logger.exception("Profile update failed")
                flash("Profile update failed", "danger")

        return render_template("auth/profile.html", user=store.current_user, active_page="profile")

    @app.errorhandler(404)
    def not_found(_error):
        return render_template("not_found.html"), 404
