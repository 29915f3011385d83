from __future__ import annotations

from enum import Enum


class FieldKind(str, Enum):
    """How a draft value is parsed and rendered."""

    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    DATE = "date"
    TIME = "time"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    CHOICE = "choice"
    REFERENCE = "reference"
    PASSWORD = "password"
    COLOR = "color"


class DialogState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class DialogMode(str, Enum):
    ADD = "add"
    EDIT = "edit"


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


LEAVE_TYPES = ("Annual", "Sick", "Personal", "Maternity", "Paternity", "Bereavement", "Study")

SYSTEM_ROLES = ("Administrator", "Manager", "Supervisor", "Viewer")

GENDERS = ("Male", "Female", "Other")
