from __future__ import annotations

from typing import Optional

from ..resources.repository import ResourceRepository
from .model import Employee, EmployeePage, EmployeeProfile, EmployeeQuery


class EmployeeRepository(ResourceRepository):
    """Employees are too many to load whole: listing goes through ``search``."""

    def search(self, query: EmployeeQuery) -> EmployeePage:
        raise NotImplementedError

    def get(self, row_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def find_profile(self, user_id: str) -> Optional[EmployeeProfile]:
        """Employee linked to an auth account, or None."""

        raise NotImplementedError
