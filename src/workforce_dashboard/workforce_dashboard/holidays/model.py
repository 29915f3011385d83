from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none, today_iso
from ..core.enums import FieldKind
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class Holiday:
    id: int
    name: str
    date: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Holiday":
        return cls(
            id=int(row["id"]),
            name=row["name"],
            date=iso_or_none(row["date"]) or "",
            description=row.get("description"),
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


HOLIDAYS = ResourceConfig(
    key="holidays",
    singular="Holiday",
    plural="Holidays",
    entity_type=Holiday,
    table="holidays",
    order_field="date",
    descending=True,
    required_message="Holiday name and date are required",
    row_mapper=Holiday.from_row,
    fields=(
        FieldSpec("name", "Holiday Name", required=True, searchable=True),
        FieldSpec("date", "Date", FieldKind.DATE, required=True, default=today_iso),
        FieldSpec("description", "Description", FieldKind.TEXTAREA, searchable=True),
    ),
)
