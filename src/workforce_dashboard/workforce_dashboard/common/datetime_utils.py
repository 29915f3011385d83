from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_iso() -> str:
    """Today's date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it.
    """
    return date.today().isoformat()


def inclusive_day_count(start: Any, end: Any) -> int:
    """Number of calendar days covered by ``start``..``end``, both ends included.

    The order of the two dates does not matter. Anything that does not parse as
    a date yields 0.
    """
    try:
        start_d = start if isinstance(start, date) else parse_iso_date(str(start).strip())
        end_d = end if isinstance(end, date) else parse_iso_date(str(end).strip())
    except (TypeError, ValueError):
        return 0
    return abs((end_d - start_d).days) + 1


def iso_or_none(value: Any) -> Optional[str]:
    """Render a date/datetime column as an ISO string, keeping None."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
