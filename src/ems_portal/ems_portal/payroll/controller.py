from __future__ import annotations

import io
import logging

from flask import Flask, flash, g, redirect, render_template, request, send_file, url_for

from ..auth.guards import admin_required
from ..common.datetime_utils import current_month
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError
from ..container import Container
from .service import summarize

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _selected_month() -> str:
        return (request.values.get("month") or "").strip() or current_month()

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @admin_required
    def payroll():
        month = _selected_month()
        records = []
        try:
            records = container.payroll_service.list_month(session=g.session_store, month=month)
        except ValidationError as e:
            flash(str(e), "danger")
        except AuthorizationError:
            return redirect(url_for("dashboard"))
        except AuthenticationError as e:
            flash(str(e), "danger")
            return redirect(url_for("login"))
        except DomainError:
            flash("Failed to fetch payroll data", "danger")

        return render_template(
            "payroll/index.html",
            month=month,
            records=records,
            totals=summarize(records),
            active_page="payroll",
        )

    @app.route("/payroll/generate", methods=["POST"], endpoint="generate_payroll")
    @admin_required
    def generate_payroll():
        month = _selected_month()
        try:
            container.payroll_service.generate(session=g.session_store, month=month)
            flash("Payroll generated successfully", "success")
        except AuthorizationError:
            return redirect(url_for("dashboard"))
        except DomainError as e:
            flash(str(e) or "Failed to generate payroll", "danger")
        except Exception:
            logger.exception("Generating payroll for %s failed", month)
            flash("Failed to generate payroll", "danger")
        return redirect(url_for("payroll", month=month))

    @app.route("/payroll/report", methods=["GET"], endpoint="payroll_report")
    @admin_required
    def payroll_report():
        month = _selected_month()
        try:
            report = container.payroll_service.download_report(session=g.session_store, month=month)
        except AuthorizationError:
            return redirect(url_for("dashboard"))
        except DomainError:
            flash("Failed to download payroll report", "danger")
            return redirect(url_for("payroll", month=month))

        return send_file(
            io.BytesIO(report.content),
            mimetype=report.content_type,
            as_attachment=True,
            download_name=report.filename,
        )
