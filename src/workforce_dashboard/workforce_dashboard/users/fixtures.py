"""Seed accounts for the in-memory user store.

System users have no table yet; these rows live for the lifetime of the
process.
"""

from __future__ import annotations

from .model import SystemUser


def initial_users() -> list[SystemUser]:
    return [
        SystemUser(1, "John Admin", "john.admin@isanda.com", "Administrator", "IT", "2023-06-04 09:30 AM", True),
        SystemUser(2, "Mary Manager", "mary.manager@isanda.com", "Manager", "HR", "2023-06-04 08:15 AM", True),
        SystemUser(3, "Sam Supervisor", "sam.supervisor@isanda.com", "Supervisor", "Operations", "2023-06-03 04:45 PM", True),
        SystemUser(4, "David Viewer", "david.viewer@isanda.com", "Viewer", "Finance", "2023-06-01 11:20 AM", False),
    ]
