from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class Position:
    id: int
    title: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Position":
        return cls(
            id=int(row["id"]),
            title=row["title"],
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


POSITIONS = ResourceConfig(
    key="positions",
    singular="Position",
    plural="Positions",
    entity_type=Position,
    table="positions",
    order_field="title",
    required_message="Position title is required",
    row_mapper=Position.from_row,
    fields=(FieldSpec("title", "Title", required=True, searchable=True),),
)
