from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..common.validators import is_blank, require_clock_time, require_fields, require_iso_date
from ..core.enums import DialogMode, FieldKind
from ..core.exceptions import ValidationError

TRUTHY = {"1", "on", "true", "yes"}


@dataclass(frozen=True)
class FieldSpec:
    """One column of a resource: how it is drafted, validated and stored."""

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    searchable: bool = False
    choices: tuple[str, ...] = ()
    reference: Optional[str] = None
    default: Optional[Callable[[], Any]] = None
    # persisted=False: draft-only (password confirmation etc.)
    persisted: bool = True
    on_add: bool = True
    on_edit: bool = True
    # readonly: shown and stored, but only ever set by on_change hooks
    readonly: bool = False
    listed: bool = True

    def initial(self) -> Any:
        if self.default is not None:
            return self.default()
        if self.kind == FieldKind.BOOLEAN:
            return False
        if self.kind == FieldKind.REFERENCE:
            return None
        if self.kind == FieldKind.CHOICE and self.required and self.choices:
            return self.choices[0]
        return ""

    def clean(self, value: Any) -> Any:
        """Turn a draft value into the value sent to the store.

        Blank optional values become None, never an empty string.
        """
        if self.kind == FieldKind.BOOLEAN:
            if isinstance(value, bool):
                return value
            return str(value or "").strip().lower() in TRUTHY

        if is_blank(value):
            return None

        try:
            if self.kind == FieldKind.DATE:
                return require_iso_date(str(value), self.label)
            if self.kind == FieldKind.TIME:
                return require_clock_time(str(value), self.label)
        except ValidationError as e:
            raise ValidationError(str(e), fields=(self.name,)) from e
        if self.kind == FieldKind.INTEGER:
            try:
                return int(str(value).strip())
            except ValueError as e:
                raise ValidationError(f"{self.label} must be a whole number", fields=(self.name,)) from e
        if self.kind == FieldKind.REFERENCE:
            s = str(value).strip()
            return int(s) if s.isdigit() else s
        if self.kind == FieldKind.CHOICE:
            s = str(value).strip()
            if self.choices and s not in self.choices:
                raise ValidationError(f"{self.label} is not a valid option", fields=(self.name,))
            return s

        return str(value).strip()


@dataclass(frozen=True)
class ReferenceSpec:
    """A foreign key resolved against a separately loaded collection."""

    key: str
    field: str
    label: Callable[[Any], str]


Validator = Callable[[Mapping[str, Any], DialogMode], None]
ChangeHook = Callable[[dict, str], None]


@dataclass(frozen=True)
class ResourceConfig:
    key: str
    singular: str
    plural: str
    entity_type: type
    fields: tuple[FieldSpec, ...]
    table: Optional[str] = None
    order_field: Optional[str] = None
    descending: bool = False
    required_message: str = "Please fill in all required fields"
    validators: tuple[Validator, ...] = ()
    on_change: tuple[ChangeHook, ...] = ()
    references: tuple[ReferenceSpec, ...] = ()
    row_mapper: Optional[Callable[[Mapping[str, Any]], Any]] = None
    extra_columns: tuple[str, ...] = ()

    def field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    @property
    def persisted_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.persisted)

    @property
    def listed_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.listed and f.persisted)

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.searchable)

    @property
    def columns(self) -> tuple[str, ...]:
        """Every column the table adapter may read or write."""
        return ("id",) + tuple(f.name for f in self.persisted_fields) + self.extra_columns + ("created_at", "updated_at")

    def form_fields(self, mode: DialogMode) -> tuple[FieldSpec, ...]:
        if mode == DialogMode.ADD:
            return tuple(f for f in self.fields if f.on_add)
        return tuple(f for f in self.fields if f.on_edit)

    def new_draft(self) -> dict[str, Any]:
        return {f.name: f.initial() for f in self.fields}

    def draft_from(self, entity: Any) -> dict[str, Any]:
        """Copy an entity's values into a fresh draft.

        The draft is a new dict, so editing it never touches ``entity``.
        """
        values = dataclasses.asdict(entity)
        draft = {f.name: values.get(f.name, f.initial()) if f.persisted else f.initial() for f in self.fields}
        draft["id"] = values.get("id")
        return draft

    def clean(self, draft: Mapping[str, Any], mode: DialogMode) -> dict[str, Any]:
        """Validate ``draft`` and return the values to persist.

        Raises ValidationError when a required field is blank, a value does not
        parse, or one of the extra validators rejects the draft.
        """
        fields = self.form_fields(mode)
        require_fields(
            draft,
            [(f.name, f.label) for f in fields if f.required],
            message=self.required_message,
        )
        values = {f.name: f.clean(draft.get(f.name)) for f in fields if f.persisted}
        for validator in self.validators:
            validator(draft, mode)
        return values

    def to_entity(self, row: Mapping[str, Any]) -> Any:
        if self.row_mapper is not None:
            return self.row_mapper(row)
        names = {f.name for f in dataclasses.fields(self.entity_type)}
        return self.entity_type(**{k: v for k, v in row.items() if k in names})

    def matches(self, entity: Any, term: str) -> bool:
        needle = term.lower()
        for name in self.searchable_fields:
            value = getattr(entity, name, None)
            if value is not None and needle in str(value).lower():
                return True
        return False


def apply_hooks(config: ResourceConfig, draft: dict, changed: str) -> None:
    for hook in config.on_change:
        hook(draft, changed)
