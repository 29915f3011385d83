from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_non_empty(value: str, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required", fields=(field_name,))
    return value.strip()


def require_fields(values: Mapping[str, Any], required: Iterable[tuple[str, str]], *, message: str) -> None:
    """Raise one ValidationError naming every blank required field.

    ``required`` yields ``(field_name, label)`` pairs.
    """
    missing = [name for name, _ in required if is_blank(values.get(name))]
    if missing:
        raise ValidationError(message, fields=missing)


def require_iso_date(value: str, field_name: str) -> str:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date().isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)", fields=(field_name,))


def require_clock_time(value: str, field_name: str) -> str:
    v = value.strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).strftime("%H:%M")
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be a time (HH:MM)", fields=(field_name,))


def require_matching_passwords(password: str, confirm_password: str) -> None:
    if is_blank(password):
        raise ValidationError("Password is required", fields=("password",))
    if password != confirm_password:
        raise ValidationError("Passwords do not match", fields=("password", "confirm_password"))
