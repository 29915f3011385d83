from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import FieldKind
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Department":
        return cls(
            id=int(row["id"]),
            name=row["name"],
            description=row.get("description"),
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


DEPARTMENTS = ResourceConfig(
    key="departments",
    singular="Department",
    plural="Departments",
    entity_type=Department,
    table="departments",
    order_field="name",
    required_message="Department name is required",
    row_mapper=Department.from_row,
    fields=(
        FieldSpec("name", "Name", required=True, searchable=True),
        FieldSpec("description", "Description", FieldKind.TEXTAREA, searchable=True),
    ),
)
