from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import FieldKind
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class Area:
    id: int
    name: str
    coordinates: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Area":
        coordinates = row.get("coordinates")
        return cls(
            id=int(row["id"]),
            name=row["name"],
            # POINT/JSON columns come back as bytes or dicts depending on the driver
            coordinates=str(coordinates) if coordinates else None,
            created_at=iso_or_none(row.get("created_at")),
            updated_at=iso_or_none(row.get("updated_at")),
        )


AREAS = ResourceConfig(
    key="areas",
    singular="Area",
    plural="Areas",
    entity_type=Area,
    table="areas",
    order_field="name",
    required_message="Area name is required",
    row_mapper=Area.from_row,
    fields=(
        FieldSpec("name", "Name", required=True, searchable=True),
        FieldSpec("coordinates", "Coordinates", FieldKind.TEXT),
    ),
)
