from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class ResourceRepository(Protocol):
    """Remote store adapter for one table.

    Note (DIP): list/dialog controllers depend on this interface, never on a
    concrete database. Every failure surfaces as RemoteError.
    """

    def fetch_all(self, order_field: Optional[str] = None, *, descending: bool = False) -> Sequence[Any]:
        raise NotImplementedError

    def insert(self, values: Mapping[str, Any]) -> Any:
        """Persist a new row (no id/timestamps) and return the stored entity."""

        raise NotImplementedError

    def update(self, row_id: Any, patch: Mapping[str, Any]) -> Any:
        """Apply ``patch`` to the row keyed by ``row_id`` and return the stored entity."""

        raise NotImplementedError

    def delete(self, row_id: Any) -> None:
        raise NotImplementedError
