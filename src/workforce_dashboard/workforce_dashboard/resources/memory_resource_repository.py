from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.exceptions import RemoteError
from .repository import ResourceRepository
from .schema import ResourceConfig


class InMemoryResourceRepository(ResourceRepository):
    """Process-local fixture store for resources that have no table yet.

    Same contract as the MySQL adapter: ids are assigned here (max + 1), missing
    ids raise RemoteError. Nothing survives a restart.
    """

    def __init__(self, config: ResourceConfig, fixtures: Iterable[Any] = ()):
        self._config = config
        self._rows: list[Any] = list(fixtures)

    @property
    def config(self) -> ResourceConfig:
        return self._config

    def _next_id(self) -> int:
        return max((int(r.id) for r in self._rows), default=0) + 1

    def _index_of(self, row_id: Any) -> int:
        for i, r in enumerate(self._rows):
            if r.id == row_id:
                return i
        raise RemoteError(f"{self._config.singular} {row_id} does not exist")

    def _known(self, values: Mapping[str, Any]) -> dict[str, Any]:
        names = {f.name for f in dataclasses.fields(self._config.entity_type)} - {"id", "created_at", "updated_at"}
        return {k: v for k, v in values.items() if k in names}

    def fetch_all(self, order_field: Optional[str] = None, *, descending: bool = False) -> Sequence[Any]:
        rows = list(self._rows)
        if order_field:
            rows.sort(key=lambda r: (getattr(r, order_field) is None, getattr(r, order_field)), reverse=descending)
        return rows

    def insert(self, values: Mapping[str, Any]) -> Any:
        row = self._config.to_entity({"id": self._next_id(), **self._known(values)})
        self._rows.append(row)
        return row

    def update(self, row_id: Any, patch: Mapping[str, Any]) -> Any:
        i = self._index_of(row_id)
        row = dataclasses.replace(self._rows[i], **self._known(patch))
        self._rows[i] = row
        return row

    def delete(self, row_id: Any) -> None:
        del self._rows[self._index_of(row_id)]
