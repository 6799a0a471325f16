from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..auth.guards import login_required
from ..core.enums import WorkLogAction
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from ..container import Container
from .model import WorkLogEntry
from .service import WorkLogRegistry

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _registry() -> WorkLogRegistry:
        return container.worklog_registry(g.session_store)

    def _entry_from_form() -> WorkLogEntry:
        return WorkLogEntry.from_form(
            work_date=request.form.get("date", ""),
            hours_worked=request.form.get("hoursWorked", ""),
            remarks=request.form.get("remarks", ""),
        )

    def _after_failure(e: DomainError, fallback: str):
        if isinstance(e, AuthorizationError):
            return redirect(url_for("worklogs"))
        flash(str(e) or fallback, "danger")
        if isinstance(e, AuthenticationError):
            return redirect(url_for("login"))
        return redirect(url_for("worklogs"))

    def _load(registry: WorkLogRegistry) -> bool:
        try:
            registry.list()
            return True
        except DomainError:
            flash("Failed to fetch work logs", "danger")
            return False

    def _render(registry: WorkLogRegistry, *, show_form: bool, editing=None, form=None):
        rows = [(log, registry.actions_for(log)) for log in registry.entries]
        return render_template(
            "worklogs/index.html",
            rows=rows,
            actions=WorkLogAction,
            show_form=show_form,
            editing=editing,
            form=form or {"date": "", "hoursWorked": "", "remarks": ""},
            active_page="worklogs",
        )

    @app.route("/worklogs", methods=["GET"], endpoint="worklogs")
    @login_required
    def worklogs():
        registry = _registry()
        if not _load(registry) and not g.session_store.is_authenticated:
            return redirect(url_for("login"))
        return _render(registry, show_form=request.args.get("new") == "1")

    @app.route("/worklogs", methods=["POST"], endpoint="create_worklog")
    @login_required
    def create_worklog():
        registry = _registry()
        try:
            registry.create(_entry_from_form())
            flash("Work log created successfully", "success")
        except DomainError as e:
            if isinstance(e, AuthenticationError):
                return _after_failure(e, "Operation failed")
            flash(str(e) or "Operation failed", "danger")
            _load(registry)
            return _render(registry, show_form=True, form=request.form)
        except Exception:
            logger.exception("Creating a work log failed")
            flash("Operation failed", "danger")
        return redirect(url_for("worklogs"))

    @app.route("/worklogs/<int:log_id>/edit", methods=["GET", "POST"], endpoint="edit_worklog")
    @login_required
    def edit_worklog(log_id: int):
        registry = _registry()
        if not _load(registry):
            return redirect(url_for("worklogs"))

        log = registry.get(log_id)
        if log is None or WorkLogAction.EDIT not in registry.actions_for(log):
            flash("Only pending work logs can be edited", "warning")
            return redirect(url_for("worklogs"))

        if request.method == "POST":
            try:
                registry.update(log_id, _entry_from_form())
                flash("Work log updated successfully", "success")
                return redirect(url_for("worklogs"))
            except DomainError as e:
                if isinstance(e, AuthenticationError):
                    return _after_failure(e, "Operation failed")
                flash(str(e) or "Operation failed", "danger")
                return _render(registry, show_form=True, editing=log, form=request.form)
            except Exception:
                logger.exception("Updating work log %s failed", log_id)
                flash("Operation failed", "danger")
                return redirect(url_for("worklogs"))

        form = {"date": log.work_date.isoformat(), "hoursWorked": log.hours_worked, "remarks": log.remarks}
        return _render(registry, show_form=True, editing=log, form=form)

    @app.route("/worklogs/<int:log_id>/delete", methods=["GET", "POST"], endpoint="delete_worklog")
    @login_required
    def delete_worklog(log_id: int):
        registry = _registry()
        if not _load(registry):
            return redirect(url_for("worklogs"))

        log = registry.get(log_id)
        if log is None or WorkLogAction.DELETE not in registry.actions_for(log):
            flash("Only pending work logs can be deleted", "warning")
            return redirect(url_for("worklogs"))

        if request.method == "GET":
            return render_template("worklogs/confirm_delete.html", log=log, active_page="worklogs")

        confirmed = request.form.get("confirm") == "yes"
        try:
            if registry.delete(log_id, confirmed=confirmed):
                flash("Work log deleted successfully", "success")
        except DomainError as e:
            return _after_failure(e, "Failed to delete work log")
        except Exception:
            logger.exception("Deleting work log %s failed", log_id)
            flash("Failed to delete work log", "danger")
        return redirect(url_for("worklogs"))

    @app.route("/worklogs/<int:log_id>/approve", methods=["POST"], endpoint="approve_worklog")
    @login_required
    def approve_worklog(log_id: int):
        registry = _registry()
        try:
            registry.list()
            registry.approve(log_id)
            flash("Work log approved", "success")
        except DomainError as e:
            return _after_failure(e, "Failed to approve work log")
        except Exception:
            logger.exception("Approving work log %s failed", log_id)
            flash("Failed to approve work log", "danger")
        return redirect(url_for("worklogs"))

    @app.route("/worklogs/<int:log_id>/reject", methods=["POST"], endpoint="reject_worklog")
    @login_required
    def reject_worklog(log_id: int):
        registry = _registry()
        try:
            registry.list()
            registry.reject(log_id)
            flash("Work log rejected", "success")
        except DomainError as e:
            return _after_failure(e, "Failed to reject work log")
        except Exception:
            logger.exception("Rejecting work log %s failed", log_id)
            flash("Failed to reject work log", "danger")
        return redirect(url_for("worklogs"))
