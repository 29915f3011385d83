from __future__ import annotations

from datetime import date

from src.workforce_dashboard.workforce_dashboard.employees.model import EmployeeQuery
from src.workforce_dashboard.workforce_dashboard.employees.mysql_employee_repository import (
    MySQLEmployeeRepository,
    like_pattern,
)


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))

    def fetchone(self):
        return self._conn.results.pop(0) if self._conn.results else None

    def fetchall(self):
        return self._conn.results.pop(0) if self._conn.results else []

    def close(self):
        pass


class FakeConnection:
    def __init__(self, results=()):
        self.results = list(results)
        self.executed = []

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def _row(i):
    return {
        "id": i,
        "badge_number": f"EMP{i:03d}",
        "first_name": "Alex",
        "last_name": "Morgan",
        "gender": None,
        "department_id": 1,
        "position_id": None,
        "email": "alex@example.com",
        "phone": None,
        "mobile": None,
        "hire_date": date(2020, 3, 2),
        "card_no": None,
        "passport_no": None,
        "user_id": None,
        "created_at": None,
        "updated_at": None,
    }


def test_like_pattern_escapes_wildcards():
    assert like_pattern("50%_off") == "%50\\%\\_off%"


def test_search_counts_then_pages_with_all_filters():
    conn = FakeConnection([{"total": 41}, [_row(21)]])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    page = repo.search(EmployeeQuery(id_filter="EMP", name_filter="alex m", department_filter="1", page=2))

    count_sql, count_params = conn.executed[0]
    assert count_sql.startswith("SELECT COUNT(*) AS total FROM employees WHERE badge_number LIKE %s AND (first_name LIKE %s")
    assert count_params == ("%EMP%", "%alex m%", "%alex m%", "%alex m%", 1)

    select_sql, select_params = conn.executed[1]
    assert select_sql.endswith("ORDER BY badge_number ASC LIMIT %s OFFSET %s")
    assert select_params[-2:] == (20, 20)

    assert page.count == 41
    assert page.data[0].hire_date == "2020-03-02"
    assert page.page == 2 and page.has_next


def test_search_without_filters_has_no_where_clause():
    conn = FakeConnection([{"total": 0}, []])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    page = repo.search(EmployeeQuery(department_filter="all_departments"))

    assert conn.executed[0] == ("SELECT COUNT(*) AS total FROM employees", ())
    assert page.data == []


def test_find_profile_builds_display_identity():
    conn = FakeConnection(
        [{"first_name": "Alex", "last_name": "Morgan", "badge_number": "EMP001", "department_id": None, "department_name": None}]
    )
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    profile = repo.find_profile("u-1")

    assert profile.name == "Alex Morgan"
    assert profile.badge_number == "EMP001"
    assert profile.department == "N/A"
    assert conn.executed[0][1] == ("u-1",)


def test_find_profile_missing():
    repo = MySQLEmployeeRepository(FakeConnFactory(FakeConnection([None])))

    assert repo.find_profile("nobody") is None
