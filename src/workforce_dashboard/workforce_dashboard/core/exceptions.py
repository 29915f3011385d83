from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a draft is incomplete or violates a field rule."""

    def __init__(self, message: str, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class RemoteError(DomainError):
    """Raised when the backing store rejects or fails a call.

    The message is the backend's own and is shown to the user as-is.
    """


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no profile matches."""
