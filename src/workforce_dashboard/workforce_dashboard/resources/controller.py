from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Mapping, Optional

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..auth.session import login_required
from ..core.enums import DialogMode, FieldKind
from ..core.exceptions import RemoteError
from .manager import ResourceManager, ResourcePage
from .notifications import FlashNotifier
from .schema import ResourceConfig

logger = logging.getLogger(__name__)

SUBMIT_TOKENS_KEY = "submit_tokens"
MAX_SUBMIT_TOKENS = 20


def form_values(config: ResourceConfig, mode: DialogMode, form: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the dialog's fields out of a posted form.

    Unchecked checkboxes are not posted at all, so a missing boolean means False.
    """
    values: dict[str, Any] = {}
    for f in config.form_fields(mode):
        if f.kind == FieldKind.BOOLEAN:
            values[f.name] = f.name in form
        elif f.name in form:
            values[f.name] = form.get(f.name)
    return values


def issue_submit_token() -> str:
    """Hand out a one-shot token for the form about to be rendered."""
    token = uuid.uuid4().hex
    tokens = list(session.get(SUBMIT_TOKENS_KEY, []))[-(MAX_SUBMIT_TOKENS - 1):]
    tokens.append(token)
    session[SUBMIT_TOKENS_KEY] = tokens
    return token


def consume_submit_token(token: Optional[str]) -> bool:
    """False when the token is unknown or was already used by an earlier POST."""
    tokens = list(session.get(SUBMIT_TOKENS_KEY, []))
    if not token or token not in tokens:
        return False
    tokens.remove(token)
    session[SUBMIT_TOKENS_KEY] = tokens
    return True


def report_unexpected(app: Flask, action: str, e: Exception) -> None:
    logger.exception("Unexpected error while trying to %s", action)
    if bool(app.config.get("DEBUG", False)):
        flash(f"System error while trying to {action}: {e}", "danger")
    else:
        flash(f"System error while trying to {action}", "danger")


def register_resource(
    app: Flask,
    manager: ResourceManager,
    *,
    url_prefix: str,
    list_template: str = "resources/list.html",
    extra_context: Optional[Mapping[str, Any]] = None,
    lookup: Optional[Callable[[ResourcePage, int], Any]] = None,
    with_list: bool = True,
) -> None:
    """Mount list / add / edit / delete pages for one resource under ``url_prefix``.

    Endpoints are ``<key>_list``, ``<key>_add``, ``<key>_edit`` and ``<key>_delete``.
    ``lookup`` finds the edit/delete target (default: the loaded list);
    ``with_list=False`` leaves the list page to a feature controller.
    """
    config = manager.config
    key = config.key
    list_endpoint = f"{key}_list"

    def _open() -> ResourcePage:
        page = manager.open_page(FlashNotifier())
        page.listing.load()
        return page

    def _context(page: ResourcePage, **kwargs: Any) -> dict[str, Any]:
        ctx = {
            "resource": config,
            "listing": page.listing,
            "endpoints": {
                "list": list_endpoint,
                "add": f"{key}_add",
                "edit": f"{key}_edit",
                "delete": f"{key}_delete",
            },
            "active_page": key,
        }
        ctx.update(extra_context or {})
        ctx.update(kwargs)
        return ctx

    def _repeated_post() -> bool:
        if consume_submit_token(request.form.get("submit_token")):
            return False
        logger.info("Ignoring repeated %s submission to %s", key, request.path)
        flash("This form was already submitted.", "info")
        return True

    def _render_form(page: ResourcePage):
        return render_template(
            "resources/form.html",
            **_context(page, form=page.form, submit_token=issue_submit_token()),
        )

    def _target(page: ResourcePage, row_id: int):
        try:
            entity = (lookup or (lambda p, i: p.listing.find(i)))(page, row_id)
        except RemoteError as e:
            flash(str(e), "danger")
            return None
        if entity is None:
            flash(f"{config.singular} not found", "danger")
        return entity

    if with_list:

        @app.route(url_prefix, endpoint=list_endpoint)
        @login_required
        def list_view():
            page = _open()
            term = request.args.get("q", "").strip()
            selected_id = request.args.get("selected", type=int)
            if selected_id is not None:
                page.listing.select(page.listing.find(selected_id))
            return render_template(
                list_template,
                **_context(page, items=page.listing.filter(term), term=term),
            )

    @app.route(f"{url_prefix}/add", methods=["GET", "POST"], endpoint=f"{key}_add")
    @login_required
    def add_view():
        page = _open()
        page.form.open_add()
        if request.method == "POST":
            if _repeated_post():
                return redirect(url_for(list_endpoint))
            try:
                page.form.update_fields(form_values(config, DialogMode.ADD, request.form))
                if page.form.submit() is not None:
                    return redirect(url_for(list_endpoint))
            except Exception as e:
                report_unexpected(app, f"add {config.singular.lower()}", e)
        return _render_form(page)

    @app.route(f"{url_prefix}/<int:row_id>/edit", methods=["GET", "POST"], endpoint=f"{key}_edit")
    @login_required
    def edit_view(row_id: int):
        page = _open()
        entity = _target(page, row_id)
        if entity is None:
            return redirect(url_for(list_endpoint))
        page.form.open_edit(entity)
        if request.method == "POST":
            if _repeated_post():
                return redirect(url_for(list_endpoint))
            try:
                page.form.update_fields(form_values(config, DialogMode.EDIT, request.form))
                if page.form.submit() is not None:
                    return redirect(url_for(list_endpoint))
            except Exception as e:
                report_unexpected(app, f"update {config.singular.lower()}", e)
        return _render_form(page)

    @app.route(f"{url_prefix}/<int:row_id>/delete", methods=["GET", "POST"], endpoint=f"{key}_delete")
    @login_required
    def delete_view(row_id: int):
        page = _open()
        entity = _target(page, row_id)
        if entity is None:
            return redirect(url_for(list_endpoint))
        page.delete.open(entity)
        if request.method == "POST":
            if _repeated_post():
                return redirect(url_for(list_endpoint))
            try:
                if page.delete.confirm():
                    return redirect(url_for(list_endpoint))
            except Exception as e:
                report_unexpected(app, f"delete {config.singular.lower()}", e)
        return render_template(
            "resources/delete.html",
            **_context(page, target=entity, submit_token=issue_submit_token()),
        )
