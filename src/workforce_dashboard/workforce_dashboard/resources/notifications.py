from __future__ import annotations

from typing import Protocol

from flask import flash


class Notifier(Protocol):
    """Transient user-facing messages (toasts)."""

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError

    def info(self, message: str) -> None:
        raise NotImplementedError


class FlashNotifier(Notifier):
    """Notifier backed by Flask's message flashing (needs a request context)."""

    def success(self, message: str) -> None:
        flash(message, "success")

    def error(self, message: str) -> None:
        flash(message, "danger")

    def info(self, message: str) -> None:
        flash(message, "info")
