from __future__ import annotations

import logging

from ..core.exceptions import AuthenticationError
from ..employees.model import EmployeeProfile
from ..employees.repository import EmployeeRepository
from .provider import AuthProvider

logger = logging.getLogger(__name__)

PROFILE_NOT_FOUND = "Failed to fetch user data after login."


class AuthService:
    """Use case: log in with email/password and build the display profile."""

    def __init__(self, provider: AuthProvider, employees: EmployeeRepository):
        self._provider = provider
        self._employees = employees

    def login(self, email: str, password: str) -> EmployeeProfile:
        identity = self._provider.sign_in_with_password(email, password)

        # A valid account without an employee record still cannot use the dashboard.
        profile = self._employees.find_profile(identity.user_id)
        if profile is None:
            logger.warning("No employee linked to auth user %s", identity.user_id)
            raise AuthenticationError(PROFILE_NOT_FOUND)
        return profile
