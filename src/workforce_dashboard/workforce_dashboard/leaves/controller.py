from __future__ import annotations

from flask import Flask, flash, redirect, url_for

from ..auth.session import login_required
from ..container import Container
from ..core.exceptions import RemoteError, ValidationError
from ..resources.controller import register_resource, report_unexpected


def register(app: Flask, container: Container) -> None:
    register_resource(app, container.leaves, url_prefix="/employees/leaves", list_template="leaves/list.html")

    def _decide(leave_id: int, approve: bool):
        try:
            if approve:
                container.leave_service.approve(leave_id)
                flash("Leave request approved", "success")
            else:
                container.leave_service.reject(leave_id)
                flash("Leave request rejected", "success")
        except (ValidationError, RemoteError) as e:
            flash(str(e), "danger")
        except Exception as e:
            report_unexpected(app, "process the leave request", e)
        return redirect(url_for("leaves_list"))

    @app.route("/employees/leaves/<int:leave_id>/approve", methods=["POST"], endpoint="leaves_approve")
    @login_required
    def approve_leave(leave_id: int):
        return _decide(leave_id, True)

    @app.route("/employees/leaves/<int:leave_id>/reject", methods=["POST"], endpoint="leaves_reject")
    @login_required
    def reject_leave(leave_id: int):
        return _decide(leave_id, False)
