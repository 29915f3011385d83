from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Optional

from .areas.model import AREAS
from .auth.provider import AuthProvider, MySQLAuthProvider
from .auth.service import AuthService
from .core.constants import DEFAULT_EMPLOYEE_PAGE_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .departments.model import DEPARTMENTS
from .employees.listing import EmployeeListController
from .employees.model import EMPLOYEES
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .holidays.model import HOLIDAYS
from .leaves.fixtures import initial_leaves
from .leaves.model import LEAVE_REQUESTS
from .leaves.service import LeaveService
from .positions.model import POSITIONS
from .resources.manager import ResourceManager
from .resources.memory_resource_repository import InMemoryResourceRepository
from .resources.mysql_resource_repository import MySQLResourceRepository
from .resources.repository import ResourceRepository
from .shifts.model import SHIFTS
from .timetables.model import TIMETABLES
from .users.fixtures import initial_users
from .users.model import SYSTEM_USERS


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    areas: ResourceManager
    positions: ResourceManager
    departments: ResourceManager
    holidays: ResourceManager
    timetables: ResourceManager
    shifts: ResourceManager
    employees: ResourceManager
    users: ResourceManager
    leaves: ResourceManager

    employees_repo: EmployeeRepository

    leave_service: LeaveService
    auth_service: AuthService


def assemble_container(
    *,
    areas_repo: ResourceRepository,
    positions_repo: ResourceRepository,
    departments_repo: ResourceRepository,
    holidays_repo: ResourceRepository,
    timetables_repo: ResourceRepository,
    shifts_repo: ResourceRepository,
    employees_repo: EmployeeRepository,
    auth_provider: AuthProvider,
    users_repo: Optional[ResourceRepository] = None,
    leaves_repo: Optional[ResourceRepository] = None,
    page_size: int = DEFAULT_EMPLOYEE_PAGE_SIZE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire managers and services around already-built repositories."""
    users_repo = users_repo or InMemoryResourceRepository(SYSTEM_USERS, initial_users())
    leaves_repo = leaves_repo or InMemoryResourceRepository(LEAVE_REQUESTS, initial_leaves())

    departments = ResourceManager(DEPARTMENTS, departments_repo)
    positions = ResourceManager(POSITIONS, positions_repo)
    timetables = ResourceManager(TIMETABLES, timetables_repo)

    return Container(
        conn=conn,
        areas=ResourceManager(AREAS, areas_repo),
        positions=positions,
        departments=departments,
        holidays=ResourceManager(HOLIDAYS, holidays_repo),
        timetables=timetables,
        shifts=ResourceManager(
            SHIFTS,
            shifts_repo,
            references={"timetables": timetables, "departments": departments},
        ),
        employees=ResourceManager(
            EMPLOYEES,
            employees_repo,
            references={"departments": departments, "positions": positions},
            listing_factory=functools.partial(EmployeeListController, page_size=page_size),
        ),
        users=ResourceManager(SYSTEM_USERS, users_repo),
        leaves=ResourceManager(LEAVE_REQUESTS, leaves_repo),
        employees_repo=employees_repo,
        leave_service=LeaveService(leaves_repo),
        auth_service=AuthService(auth_provider, employees_repo),
    )


def build_container(*, db_config: dict, page_size: int = DEFAULT_EMPLOYEE_PAGE_SIZE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble_container(
        conn=conn,
        areas_repo=MySQLResourceRepository(conn, AREAS),
        positions_repo=MySQLResourceRepository(conn, POSITIONS),
        departments_repo=MySQLResourceRepository(conn, DEPARTMENTS),
        holidays_repo=MySQLResourceRepository(conn, HOLIDAYS),
        timetables_repo=MySQLResourceRepository(conn, TIMETABLES),
        shifts_repo=MySQLResourceRepository(conn, SHIFTS),
        employees_repo=MySQLEmployeeRepository(conn),
        auth_provider=MySQLAuthProvider(conn),
        page_size=page_size,
    )
