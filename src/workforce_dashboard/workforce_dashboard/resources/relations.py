from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence

from ..core.constants import MISSING_LABEL


class ReferenceCollection:
    """A secondary list loaded once per page visit to resolve foreign keys."""

    def __init__(self, key: str, items: Iterable[Any] = (), *, label: Callable[[Any], str]):
        self.key = key
        self._label = label
        self.items: list[Any] = []
        self._by_id: dict[Any, Any] = {}
        self.replace(items)

    def replace(self, items: Iterable[Any]) -> None:
        self.items = list(items)
        self._by_id = {getattr(i, "id"): i for i in self.items}

    def get(self, ref_id: Any) -> Optional[Any]:
        if ref_id is None:
            return None
        found = self._by_id.get(ref_id)
        if found is None and isinstance(ref_id, str) and ref_id.isdigit():
            found = self._by_id.get(int(ref_id))
        return found

    def label(self, ref_id: Any) -> str:
        item = self.get(ref_id)
        return self._label(item) if item is not None else MISSING_LABEL

    def options(self) -> Sequence[tuple[Any, str]]:
        return [(getattr(i, "id"), self._label(i)) for i in self.items]
