from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, render_template, url_for

from ..core.enums import RouteAccess, RouteDecision
from . import gate


def _guard(access: RouteAccess):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            store = g.session_store
            decision = gate.decide(access, store.state, store.current_user)
            if decision is RouteDecision.ALLOW:
                return view(*args, **kwargs)
            if decision is RouteDecision.WAIT:
                return render_template("loading.html")
            if decision is RouteDecision.REDIRECT_LOGIN:
                flash("Please sign in to continue.", "warning")
                return redirect(url_for("login"))
            # Role mismatch: silent redirect to the default landing page.
            return redirect(url_for("dashboard"))

        return wrapper

    return decorator


login_required = _guard(RouteAccess.PROTECTED)
admin_required = _guard(RouteAccess.ADMIN)
