from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none, today_iso
from ..core.enums import FieldKind
from ..resources.schema import FieldSpec, ReferenceSpec, ResourceConfig


@dataclass(frozen=True)
class Shift:
    """A named timetable assignment for a department over a date range."""

    id: int
    name: str
    timetable_id: Optional[int] = None
    department_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    color: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Shift":
        return cls(
            id=int(row["id"]),
            name=row["name"],
            timetable_id=row.get("timetable_id"),
            department_id=row.get("department_id"),
            start_date=iso_or_none(row.get("start_date")),
            end_date=iso_or_none(row.get("end_date")),
            color=row.get("color"),
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


def _timetable_label(timetable: Any) -> str:
    return f"{timetable.name} ({timetable.start_time} - {timetable.end_time})"


SHIFTS = ResourceConfig(
    key="shifts",
    singular="Shift",
    plural="Shifts",
    entity_type=Shift,
    table="shifts",
    order_field="start_date",
    descending=True,
    required_message="Shift name is required",
    row_mapper=Shift.from_row,
    fields=(
        FieldSpec("name", "Shift Name", required=True, searchable=True),
        FieldSpec("timetable_id", "Timetable", FieldKind.REFERENCE, reference="timetables"),
        FieldSpec("department_id", "Department", FieldKind.REFERENCE, reference="departments"),
        FieldSpec("start_date", "Start Date", FieldKind.DATE, default=today_iso),
        FieldSpec("end_date", "End Date", FieldKind.DATE, default=today_iso),
        FieldSpec("color", "Color", FieldKind.COLOR),
    ),
    references=(
        ReferenceSpec("timetables", "timetable_id", _timetable_label),
        ReferenceSpec("departments", "department_id", lambda d: d.name),
    ),
)
