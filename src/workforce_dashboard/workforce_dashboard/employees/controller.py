from __future__ import annotations

import dataclasses

from flask import Flask, render_template, request

from ..auth.session import login_required
from ..container import Container
from ..resources.controller import register_resource
from ..resources.notifications import FlashNotifier


def register(app: Flask, container: Container) -> None:
    manager = container.employees

    @app.route("/employees", endpoint="employees_list")
    @login_required
    def employees_list():
        page = manager.open_page(FlashNotifier())
        listing = page.listing

        department = request.args.get("department", "").strip()
        listing.query = dataclasses.replace(
            listing.query,
            id_filter=request.args.get("id", "").strip(),
            name_filter=request.args.get("name", "").strip(),
            department_filter="" if department == "all_departments" else department,
            page=max(1, request.args.get("page", 1, type=int) or 1),
        )
        listing.load()

        return render_template(
            "employees/list.html",
            resource=manager.config,
            listing=listing,
            items=listing.items,
            query=listing.query,
            pager=listing.page,
            departments=listing.options_for("department_id"),
            active_page="employees",
        )

    register_resource(
        app,
        manager,
        url_prefix="/employees",
        lookup=lambda page, row_id: container.employees_repo.get(row_id),
        with_list=False,
    )
