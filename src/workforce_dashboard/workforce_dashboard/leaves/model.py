from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import inclusive_day_count
from ..core.enums import LEAVE_TYPES, FieldKind, LeaveStatus
from ..resources.schema import FieldSpec, ResourceConfig


@dataclass(frozen=True)
class LeaveRequest:
    id: int
    employee_id: str = ""
    employee_name: str = ""
    leave_type: str = LEAVE_TYPES[0]
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    days: Optional[int] = 0
    reason: Optional[str] = None
    status: str = LeaveStatus.PENDING.value

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING.value


def recompute_days(draft: dict, changed: str) -> None:
    if changed in ("start_date", "end_date"):
        draft["days"] = inclusive_day_count(draft.get("start_date"), draft.get("end_date"))


LEAVE_REQUESTS = ResourceConfig(
    key="leaves",
    singular="Leave request",
    plural="Leave requests",
    entity_type=LeaveRequest,
    on_change=(recompute_days,),
    fields=(
        FieldSpec("employee_id", "Employee ID", searchable=True),
        FieldSpec("employee_name", "Employee Name", searchable=True),
        FieldSpec("leave_type", "Leave Type", FieldKind.CHOICE, searchable=True, choices=LEAVE_TYPES, default=lambda: LEAVE_TYPES[0]),
        FieldSpec("start_date", "Start Date", FieldKind.DATE),
        FieldSpec("end_date", "End Date", FieldKind.DATE),
        FieldSpec("days", "Days", FieldKind.INTEGER, readonly=True, default=lambda: 0),
        FieldSpec("reason", "Reason", FieldKind.TEXTAREA),
        FieldSpec(
            "status",
            "Status",
            FieldKind.CHOICE,
            choices=tuple(s.value for s in LeaveStatus),
            default=lambda: LeaveStatus.PENDING.value,
            on_add=False,
        ),
    ),
)
