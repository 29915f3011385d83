from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import MISSING_LABEL
from ..core.exceptions import RemoteError
from .notifications import Notifier
from .relations import ReferenceCollection
from .repository import ResourceRepository
from .schema import ResourceConfig

logger = logging.getLogger(__name__)


class ListController:
    """In-memory collection of one resource with search and single selection."""

    def __init__(
        self,
        config: ResourceConfig,
        repository: ResourceRepository,
        notifier: Notifier,
        *,
        reference_sources: Optional[Mapping[str, tuple[ResourceRepository, ResourceConfig]]] = None,
    ):
        self.config = config
        self._repository = repository
        self._notifier = notifier
        self._reference_sources = dict(reference_sources or {})
        self.items: list[Any] = []
        self.references: dict[str, ReferenceCollection] = {}
        self.selected: Optional[Any] = None
        self.loading = False

    def _fetch(self) -> Sequence[Any]:
        return self._repository.fetch_all(self.config.order_field, descending=self.config.descending)

    def _load_references(self) -> bool:
        for spec in self.config.references:
            repository, ref_config = self._reference_sources[spec.key]
            try:
                items = repository.fetch_all(ref_config.order_field, descending=ref_config.descending)
            except RemoteError:
                logger.exception("Error fetching %s", spec.key)
                self._notifier.error(f"Failed to load {ref_config.plural.lower()}")
                return False
            self.references[spec.field] = ReferenceCollection(spec.key, items, label=spec.label)
        return True

    def load(self) -> bool:
        """Replace the collection from the store.

        On failure the previous collection stays visible and the user is told.
        """
        self.loading = True
        try:
            if not self._load_references():
                return False
            try:
                self.items = list(self._fetch())
            except RemoteError:
                logger.exception("Error fetching %s", self.config.key)
                self._notifier.error(f"Failed to load {self.config.plural.lower()}")
                return False
            if self.selected is not None and self.find(self.selected.id) is None:
                self.selected = None
            return True
        finally:
            self.loading = False

    def filter(self, term: Optional[str] = None) -> list[Any]:
        if not term:
            return list(self.items)
        return [e for e in self.items if self.config.matches(e, term)]

    def select(self, entity: Optional[Any]) -> None:
        self.selected = entity

    @property
    def can_edit(self) -> bool:
        return self.selected is not None

    can_delete = can_edit

    def find(self, row_id: Any) -> Optional[Any]:
        for e in self.items:
            if e.id == row_id:
                return e
        return None

    def apply_saved(self, entity: Any) -> None:
        for i, e in enumerate(self.items):
            if e.id == entity.id:
                self.items[i] = entity
                return
        self.items.append(entity)

    def discard(self, row_id: Any) -> None:
        self.items = [e for e in self.items if e.id != row_id]
        if self.selected is not None and self.selected.id == row_id:
            self.selected = None

    def empty_message(self, term: Optional[str] = None) -> str:
        if term:
            return f"No {self.config.plural.lower()} match your search."
        return f"No {self.config.plural.lower()} found. Add your first {self.config.singular.lower()}!"

    def label_for(self, entity: Any, field_name: str) -> str:
        collection = self.references.get(field_name)
        if collection is None:
            return MISSING_LABEL
        return collection.label(getattr(entity, field_name, None))

    def options_for(self, field_name: str) -> Sequence[tuple[Any, str]]:
        collection = self.references.get(field_name)
        return collection.options() if collection else []
