from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_matching_passwords
from ..core.constants import NEVER_LOGGED_IN
from ..core.enums import SYSTEM_ROLES, DialogMode, FieldKind
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class SystemUser:
    """Dashboard operator account (kept in memory, see fixtures)."""

    id: int
    name: str
    email: str
    role: str
    department: Optional[str] = None
    last_login: str = NEVER_LOGGED_IN
    active: bool = True


def passwords_match(draft: Mapping[str, Any], mode: DialogMode) -> None:
    # passwords are only part of the add dialog and are never stored
    if mode == DialogMode.ADD:
        require_matching_passwords(draft.get("password") or "", draft.get("confirm_password") or "")


SYSTEM_USERS = ResourceConfig(
    key="users",
    singular="User",
    plural="Users",
    entity_type=SystemUser,
    validators=(passwords_match,),
    fields=(
        FieldSpec("name", "Name", required=True, searchable=True),
        FieldSpec("email", "Email", FieldKind.EMAIL, required=True, searchable=True),
        FieldSpec("role", "Role", FieldKind.CHOICE, required=True, searchable=True, choices=SYSTEM_ROLES),
        FieldSpec("department", "Department", searchable=True),
        FieldSpec("password", "Password", FieldKind.PASSWORD, persisted=False, on_edit=False, listed=False),
        FieldSpec("confirm_password", "Confirm Password", FieldKind.PASSWORD, persisted=False, on_edit=False, listed=False),
        FieldSpec("active", "Active", FieldKind.BOOLEAN, default=lambda: True),
        FieldSpec("last_login", "Last Login", on_add=False, on_edit=False, readonly=True),
    ),
)
