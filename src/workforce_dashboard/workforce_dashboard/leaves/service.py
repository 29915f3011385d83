from __future__ import annotations

from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..resources.repository import ResourceRepository
from .model import LeaveRequest


class LeaveService:
    """Use case: approve or reject a pending leave request."""

    def __init__(self, leaves: ResourceRepository):
        self._leaves = leaves

    def _get(self, leave_id: int) -> LeaveRequest:
        for leave in self._leaves.fetch_all():
            if leave.id == int(leave_id):
                return leave
        raise ValidationError("Leave request does not exist")

    def _decide(self, leave_id: int, status: LeaveStatus) -> LeaveRequest:
        leave = self._get(leave_id)
        if not leave.is_pending:
            raise ValidationError("Leave request has already been processed")
        return self._leaves.update(leave.id, {"status": status.value})

    def approve(self, leave_id: int) -> LeaveRequest:
        return self._decide(leave_id, LeaveStatus.APPROVED)

    def reject(self, leave_id: int) -> LeaveRequest:
        return self._decide(leave_id, LeaveStatus.REJECTED)
