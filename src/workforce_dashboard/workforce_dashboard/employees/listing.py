from __future__ import annotations

import dataclasses
from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_EMPLOYEE_PAGE_SIZE
from ..resources.listing import ListController
from .model import EmployeePage, EmployeeQuery


class EmployeeListController(ListController):
    """Paginated, server-filtered variant of the list controller.

    ``items`` only ever holds the current page; ``page`` carries the total
    count for the pager.
    """

    def __init__(self, *args: Any, page_size: int = DEFAULT_EMPLOYEE_PAGE_SIZE, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.query = EmployeeQuery(page_size=page_size)
        self.page = EmployeePage(page_size=page_size)

    def _fetch(self) -> Sequence[Any]:
        self.page = self._repository.search(self.query)
        return self.page.data

    def search(self, *, id_filter: str = "", name_filter: str = "", department_filter: str = "") -> bool:
        """Apply new filters and go back to the first page."""
        self.query = dataclasses.replace(
            self.query,
            id_filter=id_filter or "",
            name_filter=name_filter or "",
            department_filter="" if department_filter in (None, "all_departments") else department_filter,
            page=1,
        )
        return self.load()

    def go_to(self, page: int) -> bool:
        self.query = dataclasses.replace(self.query, page=max(1, int(page)))
        return self.load()

    def next_page(self) -> bool:
        if not self.page.has_next:
            return False
        return self.go_to(self.query.page + 1)

    def previous_page(self) -> bool:
        if self.query.page <= 1:
            return False
        return self.go_to(self.query.page - 1)

    def filter(self, term: Optional[str] = None) -> list[Any]:
        # filtering already happened in the store
        return list(self.items)

    def empty_message(self, term: Optional[str] = None) -> str:
        return "No employees found"
