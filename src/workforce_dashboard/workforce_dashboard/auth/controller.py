from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError, RemoteError
from ..resources.controller import report_unexpected
from .session import SessionContext, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_session_context():
        ctx = SessionContext(session)
        ctx.rehydrate()
        g.session_context = ctx

    @app.context_processor
    def inject_current_user():
        ctx = getattr(g, "session_context", None)
        return {"current_user": ctx.profile if ctx is not None else None}

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.session_context.is_authenticated:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            try:
                profile = container.auth_service.login(email, password)
                session.permanent = True
                g.session_context.begin(profile)
                logger.info("User %s logged in", profile.user_id)
                flash("Login successful", "success")
                return redirect(url_for("dashboard"))
            except (AuthenticationError, RemoteError) as e:
                flash(str(e), "danger")
            except Exception as e:
                report_unexpected(app, "log in", e)

        return render_template("auth/login.html", email=request.form.get("email", ""))

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        g.session_context.end()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        return render_template("dashboard.html", active_page="dashboard")
