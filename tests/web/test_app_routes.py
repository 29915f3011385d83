from __future__ import annotations

import re

import pytest

from src.workforce_dashboard.workforce_dashboard.areas.model import AREAS
from src.workforce_dashboard.workforce_dashboard.auth.provider import AuthIdentity
from src.workforce_dashboard.workforce_dashboard.container import assemble_container
from src.workforce_dashboard.workforce_dashboard.core.exceptions import AuthenticationError
from src.workforce_dashboard.workforce_dashboard.departments.model import DEPARTMENTS, Department
from src.workforce_dashboard.workforce_dashboard.employees.model import (
    EMPLOYEES,
    Employee,
    EmployeePage,
    EmployeeProfile,
)
from src.workforce_dashboard.workforce_dashboard.holidays.model import HOLIDAYS
from src.workforce_dashboard.workforce_dashboard.main import create_app
from src.workforce_dashboard.workforce_dashboard.positions.model import POSITIONS, Position
from src.workforce_dashboard.workforce_dashboard.resources.memory_resource_repository import InMemoryResourceRepository
from src.workforce_dashboard.workforce_dashboard.shifts.model import SHIFTS
from src.workforce_dashboard.workforce_dashboard.timetables.model import TIMETABLES


class FakeEmployeesRepo(InMemoryResourceRepository):
    def __init__(self, rows):
        super().__init__(EMPLOYEES, rows)

    def search(self, query):
        rows = self.fetch_all("badge_number")
        if query.name_filter:
            rows = [e for e in rows if query.name_filter.lower() in e.full_name.lower()]
        if query.department_id is not None:
            rows = [e for e in rows if e.department_id == query.department_id]
        return EmployeePage(
            data=rows[query.offset : query.offset + query.page_size],
            count=len(rows),
            page=query.page,
            page_size=query.page_size,
        )

    def get(self, row_id):
        for e in self.fetch_all():
            if e.id == row_id:
                return e
        return None

    def find_profile(self, user_id):
        for e in self.fetch_all():
            if e.user_id == user_id:
                return EmployeeProfile(user_id=user_id, name=e.full_name, badge_number=e.badge_number, department="Engineering")
        return None


class FakeProvider:
    def sign_in_with_password(self, email, password):
        if (email, password) == ("alex@example.com", "secret"):
            return AuthIdentity(user_id="u-1", email=email)
        raise AuthenticationError("Invalid login credentials")


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    employees = [
        Employee(1, "EMP001", "Alex", "Morgan", "alex@example.com", "2020-03-02", department_id=1, user_id="u-1"),
        Employee(2, "EMP002", "Sam", "Lee", "sam@example.com", "2021-07-19", department_id=1),
    ]
    container = assemble_container(
        areas_repo=InMemoryResourceRepository(AREAS),
        positions_repo=InMemoryResourceRepository(POSITIONS, [Position(1, "Engineer")]),
        departments_repo=InMemoryResourceRepository(DEPARTMENTS, [Department(1, "Engineering"), Department(2, "Sales")]),
        holidays_repo=InMemoryResourceRepository(HOLIDAYS),
        timetables_repo=InMemoryResourceRepository(TIMETABLES),
        shifts_repo=InMemoryResourceRepository(SHIFTS),
        employees_repo=FakeEmployeesRepo(employees),
        auth_provider=FakeProvider(),
        page_size=20,
    )
    return create_app(container)


@pytest.fixture()
def client(app):
    return app.test_client()


def _submit_token(client, url):
    match = re.search(rb'name="submit_token" value="(\w+)"', client.get(url).data)
    assert match is not None
    return match.group(1).decode()


def _login(client):
    return client.post("/", data={"email": "alex@example.com", "password": "secret"})


def test_pages_require_login(client):
    resp = client.get("/employees/departments")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_failed_login_shows_message(client):
    resp = client.post("/", data={"email": "alex@example.com", "password": "bad"})

    assert resp.status_code == 200
    assert b"Invalid login credentials" in resp.data


def test_login_then_dashboard_shows_profile(client):
    resp = _login(client)
    assert resp.status_code == 302

    page = client.get("/dashboard")
    assert page.status_code == 200
    assert b"Alex Morgan" in page.data
    assert b"EMP001" in page.data


def test_logout_ends_session(client):
    _login(client)
    client.get("/logout")

    assert client.get("/dashboard").status_code == 302


def test_department_crud_round(client, app):
    _login(client)

    token = _submit_token(client, "/employees/departments/add")
    resp = client.post("/employees/departments/add", data={"name": "Legal", "description": "", "submit_token": token})
    assert resp.status_code == 302

    listing = client.get("/employees/departments?q=leg")
    assert b"Legal" in listing.data
    assert b"Engineering" not in listing.data.split(b"<tbody>")[1]

    token = _submit_token(client, "/employees/departments/3/edit")
    resp = client.post(
        "/employees/departments/3/edit",
        data={"name": "Legal & Compliance", "description": "Contracts", "submit_token": token},
    )
    assert resp.status_code == 302
    assert b"Legal &amp; Compliance" in client.get("/employees/departments").data

    token = _submit_token(client, "/employees/departments/3/delete")
    resp = client.post("/employees/departments/3/delete", data={"submit_token": token})
    assert resp.status_code == 302
    assert b"Legal" not in client.get("/employees/departments").data


def test_add_with_missing_required_field_rerenders_form(client):
    _login(client)

    token = _submit_token(client, "/employees/holidays/add")
    resp = client.post("/employees/holidays/add", data={"name": "", "date": "", "submit_token": token})

    assert resp.status_code == 200
    assert b"Holiday name and date are required" in resp.data
    assert b'name="submit_token"' in resp.data


def test_repeated_add_post_creates_one_row(client):
    _login(client)
    token = _submit_token(client, "/employees/areas/add")

    first = client.post("/employees/areas/add", data={"name": "North", "submit_token": token})
    second = client.post("/employees/areas/add", data={"name": "North", "submit_token": token})

    assert first.status_code == 302 and second.status_code == 302
    page = client.get("/employees/areas").data
    assert page.split(b"<tbody>")[1].count(b"North") == 1
    assert b"This form was already submitted." in page


def test_add_post_without_token_is_ignored(client):
    _login(client)

    resp = client.post("/employees/areas/add", data={"name": "North"}, follow_redirects=True)

    assert b"This form was already submitted." in resp.data
    assert b"No areas found. Add your first area!" in resp.data


def test_repeated_delete_post_is_ignored(client):
    _login(client)
    token = _submit_token(client, "/employees/departments/2/delete")

    client.post("/employees/departments/2/delete", data={"submit_token": token})
    resp = client.post("/employees/departments/1/delete", data={"submit_token": token}, follow_redirects=True)

    assert b"Engineering" in resp.data
    assert b"This form was already submitted." in resp.data


def test_form_disables_its_button_on_submit(client):
    _login(client)

    resp = client.get("/employees/areas/add")

    assert b"disabled = true" in resp.data


def test_edit_and_delete_need_a_selection(client):
    _login(client)

    unselected = client.get("/employees/departments").data
    selected = client.get("/employees/departments?selected=1").data

    assert b"/employees/departments/1/edit" not in unselected
    assert b"/employees/departments/1/delete" not in unselected
    assert selected.count(b"/employees/departments/1/edit") == 1
    assert selected.count(b"/employees/departments/1/delete") == 1
    assert b"/employees/departments/2/edit" not in selected


def test_edit_unknown_row_redirects_with_message(client):
    _login(client)

    resp = client.get("/employees/areas/99/edit", follow_redirects=True)

    assert b"Area not found" in resp.data


def test_empty_list_message(client):
    _login(client)

    resp = client.get("/employees/areas")

    assert b"No areas found. Add your first area!" in resp.data


def test_employee_list_filters_and_resolves_departments(client):
    _login(client)

    resp = client.get("/employees?name=sam&department=all_departments")

    assert resp.status_code == 200
    assert b"Sam Lee" in resp.data
    assert b"Alex Morgan</td>" not in resp.data
    assert b"Showing 1 to 1 of 1 entries" in resp.data


def test_employee_page_past_the_end(client):
    _login(client)

    resp = client.get("/employees?page=5")

    assert b"Showing 0 to 0 of 2 entries" in resp.data


def test_employee_edit_uses_store_lookup(client):
    _login(client)

    resp = client.post(
        "/employees/2/edit",
        data={
            "submit_token": _submit_token(client, "/employees/2/edit"),
            "badge_number": "EMP002",
            "first_name": "Samuel",
            "last_name": "Lee",
            "email": "sam@example.com",
            "hire_date": "2021-07-19",
            "department_id": "2",
        },
    )

    assert resp.status_code == 302
    assert b"Samuel Lee" in client.get("/employees").data


def test_leave_approval(client):
    _login(client)

    resp = client.post("/employees/leaves/3/approve", follow_redirects=True)
    assert b"Leave request approved" in resp.data

    resp = client.post("/employees/leaves/3/reject", follow_redirects=True)
    assert b"Leave request has already been processed" in resp.data


def test_system_users_page(client):
    _login(client)

    resp = client.get("/system/users?q=manager")

    assert resp.status_code == 200
    assert b"Mary Manager" in resp.data
    assert b"John Admin" not in resp.data
