from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .dialogs import DeleteDialog, FormDialog
from .listing import ListController
from .notifications import Notifier
from .repository import ResourceRepository
from .schema import ResourceConfig


@dataclass
class ResourcePage:
    """Everything one management page works with during a visit."""

    listing: ListController
    form: FormDialog
    delete: DeleteDialog


ListingFactory = Callable[..., ListController]


class ResourceManager:
    """One entity's CRUD wiring: config + store + the references it joins."""

    def __init__(
        self,
        config: ResourceConfig,
        repository: ResourceRepository,
        *,
        references: Optional[Mapping[str, "ResourceManager"]] = None,
        listing_factory: ListingFactory = ListController,
    ):
        self.config = config
        self.repository = repository
        self._references = dict(references or {})
        self._listing_factory = listing_factory

        missing = [spec.key for spec in config.references if spec.key not in self._references]
        if missing:
            raise ValueError(f"{config.key}: missing reference managers {missing}")

    @property
    def key(self) -> str:
        return self.config.key

    def reference_sources(self) -> dict[str, tuple[ResourceRepository, ResourceConfig]]:
        return {k: (m.repository, m.config) for k, m in self._references.items()}

    def open_page(self, notifier: Notifier) -> ResourcePage:
        listing = self._listing_factory(
            self.config,
            self.repository,
            notifier,
            reference_sources=self.reference_sources(),
        )
        return ResourcePage(
            listing=listing,
            form=FormDialog(self.config, self.repository, listing, notifier),
            delete=DeleteDialog(self.config, self.repository, listing, notifier),
        )
