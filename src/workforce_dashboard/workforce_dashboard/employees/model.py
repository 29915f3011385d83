from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none, today_iso
from ..core.constants import DEFAULT_EMPLOYEE_PAGE_SIZE
from ..core.enums import GENDERS, FieldKind
from ..resources.schema import FieldSpec, ReferenceSpec, ResourceConfig


@dataclass(frozen=True)
class Employee:
    id: int
    badge_number: str
    first_name: str
    last_name: str
    email: str
    hire_date: str
    gender: Optional[str] = None
    department_id: Optional[int] = None
    position_id: Optional[int] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    card_no: Optional[str] = None
    passport_no: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        return cls(
            id=int(row["id"]),
            badge_number=str(row["badge_number"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            hire_date=iso_or_none(row.get("hire_date")) or "",
            gender=row.get("gender"),
            department_id=row.get("department_id"),
            position_id=row.get("position_id"),
            phone=row.get("phone"),
            mobile=row.get("mobile"),
            card_no=row.get("card_no"),
            passport_no=row.get("passport_no"),
            user_id=row.get("user_id"),
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


@dataclass(frozen=True)
class EmployeeProfile:
    """Display identity of the logged-in employee."""

    user_id: str
    name: str
    badge_number: str
    department: str


@dataclass(frozen=True)
class EmployeeQuery:
    id_filter: str = ""
    name_filter: str = ""
    department_filter: str = ""
    page: int = 1
    page_size: int = DEFAULT_EMPLOYEE_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (max(self.page, 1) - 1) * self.page_size

    @property
    def department_id(self) -> Optional[int]:
        value = (self.department_filter or "").strip()
        return int(value) if value.isdigit() else None


@dataclass(frozen=True)
class EmployeePage:
    """One page of the filtered employee list plus the total match count."""

    data: list[Employee] = field(default_factory=list)
    count: int = 0
    page: int = 1
    page_size: int = DEFAULT_EMPLOYEE_PAGE_SIZE

    @property
    def first_index(self) -> int:
        return (self.page - 1) * self.page_size + 1 if self.data else 0

    @property
    def last_index(self) -> int:
        return min(self.page * self.page_size, self.count) if self.data else 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.count

    @property
    def summary(self) -> str:
        return f"Showing {self.first_index} to {self.last_index} of {self.count} entries"


EMPLOYEES = ResourceConfig(
    key="employees",
    singular="Employee",
    plural="Employees",
    entity_type=Employee,
    table="employees",
    order_field="badge_number",
    row_mapper=Employee.from_row,
    extra_columns=("user_id",),
    fields=(
        FieldSpec("badge_number", "Badge Number", required=True, searchable=True),
        FieldSpec("first_name", "First Name", required=True, searchable=True),
        FieldSpec("last_name", "Last Name", required=True, searchable=True),
        FieldSpec("gender", "Gender", FieldKind.CHOICE, choices=GENDERS),
        FieldSpec("department_id", "Department", FieldKind.REFERENCE, reference="departments"),
        FieldSpec("position_id", "Position", FieldKind.REFERENCE, reference="positions"),
        FieldSpec("email", "Email", FieldKind.EMAIL, required=True),
        FieldSpec("phone", "Phone"),
        FieldSpec("mobile", "Mobile", listed=False),
        FieldSpec("hire_date", "Hired Date", FieldKind.DATE, required=True, default=today_iso),
        FieldSpec("card_no", "Card No", listed=False),
        FieldSpec("passport_no", "Passport No", listed=False),
    ),
    references=(
        ReferenceSpec("departments", "department_id", lambda d: d.name),
        ReferenceSpec("positions", "position_id", lambda p: p.title),
    ),
)
