"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_EMPLOYEE_PAGE_SIZE = 20
MISSING_LABEL = "N/A"
NEVER_LOGGED_IN = "Never"
