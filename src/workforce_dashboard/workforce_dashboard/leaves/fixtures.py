"""Seed rows for the in-memory leave request store."""

from __future__ import annotations

from .model import LeaveRequest


def initial_leaves() -> list[LeaveRequest]:
    return [
        LeaveRequest(1, "EMP001", "John Doe", "Annual", "2023-05-10", "2023-05-15", 6, "Family vacation", "Approved"),
        LeaveRequest(2, "EMP002", "Jane Smith", "Sick", "2023-05-05", "2023-05-06", 2, "Flu", "Approved"),
        LeaveRequest(3, "EMP003", "Michael Johnson", "Personal", "2023-05-20", "2023-05-22", 3, "Personal matters", "Pending"),
        LeaveRequest(4, "EMP004", "Sarah Williams", "Annual", "2023-06-01", "2023-06-05", 5, "Vacation", "Pending"),
        LeaveRequest(5, "EMP005", "David Brown", "Maternity", "2023-07-01", "2023-10-01", 93, "Maternity leave", "Approved"),
    ]
