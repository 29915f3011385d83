from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps
from typing import Any, MutableMapping, Optional

from flask import flash, g, redirect, url_for

from ..employees.model import EmployeeProfile

logger = logging.getLogger(__name__)


class SessionContext:
    """The logged-in identity for one request.

    Lifecycle: ``rehydrate()`` when a request starts (reads the persisted
    profile back from ``storage``), ``begin()`` after a successful login,
    ``end()`` on logout. ``storage`` is the Flask session in the app and a plain
    dict in tests.
    """

    STORAGE_KEY = "user"

    def __init__(self, storage: MutableMapping[str, Any]):
        self._storage = storage
        self.profile: Optional[EmployeeProfile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.profile is not None

    def rehydrate(self) -> Optional[EmployeeProfile]:
        raw = self._storage.get(self.STORAGE_KEY)
        self.profile = None
        if not raw:
            return None
        try:
            self.profile = EmployeeProfile(**raw)
        except TypeError:
            logger.warning("Dropping unreadable session profile")
            self._storage.pop(self.STORAGE_KEY, None)
        return self.profile

    def begin(self, profile: EmployeeProfile) -> None:
        self._storage[self.STORAGE_KEY] = asdict(profile)
        self.profile = profile

    def end(self) -> None:
        self._storage.pop(self.STORAGE_KEY, None)
        self.profile = None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = getattr(g, "session_context", None)
        if ctx is None or not ctx.is_authenticated:
            flash("Please log in to continue.", "info")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper
