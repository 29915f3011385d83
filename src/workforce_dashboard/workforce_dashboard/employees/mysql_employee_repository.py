from __future__ import annotations

from typing import Optional

from ..core.constants import MISSING_LABEL
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..resources.mysql_resource_repository import MySQLResourceRepository
from .model import EMPLOYEES, EmployeePage, EmployeeProfile, EmployeeQuery
from .repository import EmployeeRepository


def like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MySQLEmployeeRepository(MySQLResourceRepository, EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, EMPLOYEES)

    def search(self, query: EmployeeQuery) -> EmployeePage:
        clauses: list[str] = []
        params: list[object] = []

        id_filter = (query.id_filter or "").strip()
        if id_filter:
            clauses.append("badge_number LIKE %s")
            params.append(like_pattern(id_filter))

        name_filter = (query.name_filter or "").strip()
        if name_filter:
            clauses.append("(first_name LIKE %s OR last_name LIKE %s OR CONCAT(first_name, ' ', last_name) LIKE %s)")
            params.extend([like_pattern(name_filter)] * 3)

        if query.department_id is not None:
            clauses.append("department_id=%s")
            params.append(query.department_id)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory, action="employee search") as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM employees{where}", tuple(params))
            total = int((fetchone(cur) or {}).get("total") or 0)

            cur.execute(
                f"{self._select_sql()}{where} ORDER BY badge_number ASC LIMIT %s OFFSET %s",
                tuple(params) + (query.page_size, query.offset),
            )
            rows = fetchall(cur)

        return EmployeePage(
            data=[self._config.to_entity(r) for r in rows],
            count=total,
            page=query.page,
            page_size=query.page_size,
        )

    def find_profile(self, user_id: str) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory, action="profile lookup") as (_, cur):
            cur.execute(
                """
                SELECT e.first_name, e.last_name, e.badge_number, e.department_id,
                       d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.id = e.department_id
                WHERE e.user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
        if not row:
            return None
        return EmployeeProfile(
            user_id=str(user_id),
            name=f"{row['first_name']} {row['last_name']}",
            badge_number=str(row["badge_number"]),
            department=row.get("department_name") or MISSING_LABEL,
        )
