from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.workforce_dashboard.workforce_dashboard.auth.provider import AuthIdentity, MySQLAuthProvider
from src.workforce_dashboard.workforce_dashboard.auth.service import AuthService
from src.workforce_dashboard.workforce_dashboard.core.exceptions import AuthenticationError
from src.workforce_dashboard.workforce_dashboard.employees.model import EmployeeProfile


class FakeProvider:
    def __init__(self, accounts):
        self.accounts = accounts

    def sign_in_with_password(self, email, password):
        user_id = self.accounts.get((email, password))
        if user_id is None:
            raise AuthenticationError("Invalid login credentials")
        return AuthIdentity(user_id=user_id, email=email)


class FakeEmployeesRepo:
    def __init__(self, profiles):
        self.profiles = profiles

    def find_profile(self, user_id):
        return self.profiles.get(user_id)


def test_login_returns_employee_profile():
    profile = EmployeeProfile(user_id="u-1", name="Alex Morgan", badge_number="EMP001", department="Engineering")
    service = AuthService(FakeProvider({("alex@example.com", "pw"): "u-1"}), FakeEmployeesRepo({"u-1": profile}))

    assert service.login("alex@example.com", "pw") == profile


def test_bad_credentials():
    service = AuthService(FakeProvider({}), FakeEmployeesRepo({}))

    with pytest.raises(AuthenticationError, match="Invalid login credentials"):
        service.login("alex@example.com", "wrong")


def test_account_without_employee_is_a_login_failure():
    service = AuthService(FakeProvider({("ghost@example.com", "pw"): "u-9"}), FakeEmployeesRepo({}))

    with pytest.raises(AuthenticationError, match="Failed to fetch user data after login."):
        service.login("ghost@example.com", "pw")


class FakeCursor:
    def __init__(self, row):
        self._row = row
        self.params = None

    def execute(self, sql, params=()):
        self.params = params

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, row):
        self.cur = FakeCursor(row)

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, row):
        self.conn = FakeConnection(row)

    def connect(self):
        return self.conn


def _account(**overrides):
    row = {"id": "u-1", "email": "alex@example.com", "password_hash": generate_password_hash("secret"), "is_active": 1}
    row.update(overrides)
    return row


def test_mysql_provider_checks_password_hash():
    factory = FakeConnFactory(_account())
    provider = MySQLAuthProvider(factory)

    identity = provider.sign_in_with_password("  Alex@Example.com ", "secret")

    assert identity == AuthIdentity(user_id="u-1", email="alex@example.com")
    assert factory.conn.cur.params == ("alex@example.com",)

    with pytest.raises(AuthenticationError):
        provider.sign_in_with_password("alex@example.com", "nope")


def test_mysql_provider_rejects_inactive_and_placeholder_hashes():
    with pytest.raises(AuthenticationError):
        MySQLAuthProvider(FakeConnFactory(_account(is_active=0))).sign_in_with_password("alex@example.com", "secret")

    with pytest.raises(AuthenticationError):
        MySQLAuthProvider(FakeConnFactory(_account(password_hash="CHANGE_ME"))).sign_in_with_password(
            "alex@example.com", "secret"
        )

    with pytest.raises(AuthenticationError):
        MySQLAuthProvider(FakeConnFactory(None)).sign_in_with_password("alex@example.com", "")
