from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.enums import DialogMode, DialogState
from ..core.exceptions import RemoteError, ValidationError
from .listing import ListController
from .notifications import Notifier
from .repository import ResourceRepository
from .schema import ResourceConfig, apply_hooks

logger = logging.getLogger(__name__)


class FormDialog:
    """Add/edit dialog: owns a draft and turns it into one insert or update.

    States: CLOSED -> OPEN -> SUBMITTING -> CLOSED on success, or back to OPEN
    (draft kept) on a validation or store failure.
    """

    def __init__(self, config: ResourceConfig, repository: ResourceRepository, listing: ListController, notifier: Notifier):
        self.config = config
        self._repository = repository
        self._listing = listing
        self._notifier = notifier
        self.state = DialogState.CLOSED
        self.mode = DialogMode.ADD
        self.draft: Optional[dict[str, Any]] = None
        self.target_id: Any = None
        self.errors: tuple[str, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.state != DialogState.CLOSED

    @property
    def submitting(self) -> bool:
        return self.state == DialogState.SUBMITTING

    def open_add(self) -> dict[str, Any]:
        self.mode = DialogMode.ADD
        self.target_id = None
        self.draft = self.config.new_draft()
        self.errors = ()
        self.state = DialogState.OPEN
        return self.draft

    def open_edit(self, entity: Any) -> dict[str, Any]:
        self.mode = DialogMode.EDIT
        self.target_id = entity.id
        self.draft = self.config.draft_from(entity)
        self.errors = ()
        self.state = DialogState.OPEN
        return self.draft

    def set_field(self, name: str, value: Any) -> None:
        if self.state != DialogState.OPEN or self.draft is None:
            raise RuntimeError("Dialog is not open")
        self.config.field(name)
        self.draft[name] = value
        apply_hooks(self.config, self.draft, name)

    def update_fields(self, values: dict[str, Any]) -> None:
        for f in self.config.form_fields(self.mode):
            if f.name in values and not f.readonly:
                self.set_field(f.name, values[f.name])

    def cancel(self) -> None:
        self.state = DialogState.CLOSED
        self.draft = None
        self.target_id = None
        self.errors = ()

    def submit(self) -> Optional[Any]:
        """Validate and persist the draft.

        Returns the stored entity, or None when the dialog stays open (or was
        not open to begin with, e.g. a repeated click while submitting).
        """
        if self.state != DialogState.OPEN or self.draft is None:
            return None

        try:
            values = self.config.clean(self.draft, self.mode)
        except ValidationError as e:
            self.errors = e.fields
            self._notifier.error(str(e))
            return None

        self.state = DialogState.SUBMITTING
        verb = "added" if self.mode == DialogMode.ADD else "updated"
        try:
            if self.mode == DialogMode.ADD:
                saved = self._repository.insert(values)
            else:
                saved = self._repository.update(self.target_id, values)
        except RemoteError as e:
            logger.warning("Error saving %s: %s", self.config.singular.lower(), e)
            self.state = DialogState.OPEN
            self._notifier.error(str(e))
            return None

        self._listing.apply_saved(saved)
        self._listing.load()
        self._notifier.success(f"{self.config.singular} {verb} successfully")
        self.cancel()
        return saved


class DeleteDialog:
    """Two-state confirm dialog: CLOSED -> OPEN(target) -> CLOSED."""

    def __init__(self, config: ResourceConfig, repository: ResourceRepository, listing: ListController, notifier: Notifier):
        self.config = config
        self._repository = repository
        self._listing = listing
        self._notifier = notifier
        self.target: Optional[Any] = None

    @property
    def is_open(self) -> bool:
        return self.target is not None

    def open(self, entity: Any) -> None:
        self.target = entity

    def cancel(self) -> None:
        self.target = None

    def confirm(self) -> bool:
        if self.target is None:
            return False
        row_id = self.target.id
        try:
            self._repository.delete(row_id)
        except RemoteError as e:
            logger.warning("Error deleting %s %s: %s", self.config.singular.lower(), row_id, e)
            self._notifier.error(str(e))
            return False

        self._listing.discard(row_id)
        self._listing.load()
        self._notifier.success(f"{self.config.singular} deleted successfully")
        self.target = None
        return True
