from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import RemoteError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import ResourceRepository
from .schema import ResourceConfig

READONLY_COLUMNS = {"id", "created_at", "updated_at"}


class MySQLResourceRepository(ResourceRepository):
    """Generic table adapter driven by a ResourceConfig.

    Identifiers only ever come from the config; values are always bound as
    parameters.
    """

    def __init__(self, conn_factory: DatabaseConnection, config: ResourceConfig):
        if not config.table:
            raise ValueError(f"Resource {config.key!r} has no table")
        self._conn_factory = conn_factory
        self._config = config
        self._table = config.table
        self._columns = config.columns
        self._writable = tuple(c for c in self._columns if c not in READONLY_COLUMNS)

    @property
    def config(self) -> ResourceConfig:
        return self._config

    def _select_sql(self) -> str:
        return f"SELECT {', '.join(self._columns)} FROM {self._table}"

    def _check_column(self, name: str) -> str:
        if name not in self._columns:
            raise ValueError(f"Unknown column {name!r} for table {self._table}")
        return name

    def _writable_values(self, values: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in values.items() if k in self._writable}

    def _get(self, cur, row_id: Any) -> Optional[dict]:
        cur.execute(f"{self._select_sql()} WHERE id=%s", (row_id,))
        return fetchone(cur)

    def _missing(self, row_id: Any) -> RemoteError:
        return RemoteError(f"{self._config.singular} {row_id} does not exist")

    def get(self, row_id: Any) -> Optional[Any]:
        with db_cursor(self._conn_factory, action=f"get {self._table}") as (_, cur):
            row = self._get(cur, row_id)
        return self._config.to_entity(row) if row else None

    def fetch_all(self, order_field: Optional[str] = None, *, descending: bool = False) -> Sequence[Any]:
        sql = self._select_sql()
        if order_field:
            sql += f" ORDER BY {self._check_column(order_field)} {'DESC' if descending else 'ASC'}"
        with db_cursor(self._conn_factory, action=f"fetch {self._table}") as (_, cur):
            cur.execute(sql)
            rows = fetchall(cur)
        return [self._config.to_entity(r) for r in rows]

    def insert(self, values: Mapping[str, Any]) -> Any:
        data = self._writable_values(values)
        if not data:
            raise ValueError("Nothing to insert")
        cols = ", ".join(data)
        marks = ", ".join(["%s"] * len(data))
        with db_cursor(self._conn_factory, action=f"insert into {self._table}") as (_, cur):
            cur.execute(f"INSERT INTO {self._table}({cols}) VALUES({marks})", tuple(data.values()))
            row = self._get(cur, cur.lastrowid)
        if not row:
            raise RemoteError(f"Inserted {self._config.singular.lower()} could not be read back")
        return self._config.to_entity(row)

    def update(self, row_id: Any, patch: Mapping[str, Any]) -> Any:
        data = self._writable_values(patch)
        with db_cursor(self._conn_factory, action=f"update {self._table}") as (_, cur):
            if not self._get(cur, row_id):
                raise self._missing(row_id)
            if data:
                assignments = ", ".join(f"{k}=%s" for k in data)
                cur.execute(
                    f"UPDATE {self._table} SET {assignments} WHERE id=%s",
                    tuple(data.values()) + (row_id,),
                )
            row = self._get(cur, row_id)
        if not row:
            raise self._missing(row_id)
        return self._config.to_entity(row)

    def delete(self, row_id: Any) -> None:
        with db_cursor(self._conn_factory, action=f"delete from {self._table}") as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE id=%s", (row_id,))
            affected = cur.rowcount
        # 0 rows affected: the id was already gone
        if affected <= 0:
            raise self._missing(row_id)
