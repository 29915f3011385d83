from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid login credentials"


@dataclass(frozen=True)
class AuthIdentity:
    """What the identity provider hands back after a successful sign-in."""

    user_id: str
    email: str


class AuthProvider(Protocol):
    def sign_in_with_password(self, email: str, password: str) -> AuthIdentity:
        raise NotImplementedError


class MySQLAuthProvider(AuthProvider):
    """Email/password accounts kept in ``auth_users`` with werkzeug hashes."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def sign_in_with_password(self, email: str, password: str) -> AuthIdentity:
        email = (email or "").strip().lower()
        if not email or not password:
            raise AuthenticationError(INVALID_CREDENTIALS)

        with db_cursor(self._conn_factory, action="auth lookup") as (_, cur):
            cur.execute(
                "SELECT id, email, password_hash, is_active FROM auth_users WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)

        if not row or not bool(row.get("is_active", True)):
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(row["password_hash"], password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False
        if not ok:
            logger.info("Rejected password for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return AuthIdentity(user_id=str(row["id"]), email=row["email"])
