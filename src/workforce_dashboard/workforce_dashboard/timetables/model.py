from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import FieldKind
from ..database.mysql_base import clock_or_none
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class Timetable:
    """Working hours template that shifts point at."""

    id: int
    name: str
    start_time: str
    end_time: str
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Timetable":
        return cls(
            id=int(row["id"]),
            name=row["name"],
            start_time=clock_or_none(row["start_time"]) or "",
            end_time=clock_or_none(row["end_time"]) or "",
            break_start=clock_or_none(row.get("break_start")),
            break_end=clock_or_none(row.get("break_end")),
            description=row.get("description"),
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )

    @property
    def hours(self) -> str:
        return f"{self.start_time} - {self.end_time}"


TIMETABLES = ResourceConfig(
    key="timetables",
    singular="Timetable",
    plural="Timetables",
    entity_type=Timetable,
    table="timetables",
    order_field="name",
    required_message="Timetable name, start time, and end time are required",
    row_mapper=Timetable.from_row,
    fields=(
        FieldSpec("name", "Name", required=True, searchable=True),
        FieldSpec("start_time", "Start Time", FieldKind.TIME, required=True, default=lambda: "09:00"),
        FieldSpec("end_time", "End Time", FieldKind.TIME, required=True, default=lambda: "17:00"),
        FieldSpec("break_start", "Break Start", FieldKind.TIME, default=lambda: "12:00"),
        FieldSpec("break_end", "Break End", FieldKind.TIME, default=lambda: "13:00"),
        FieldSpec("description", "Description", FieldKind.TEXTAREA, searchable=True),
    ),
)
