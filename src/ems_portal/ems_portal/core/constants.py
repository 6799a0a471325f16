"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_SESSION_DAYS = 7

# Key of the bearer credential inside the persisted client session.
TOKEN_STORAGE_KEY = "token"

DEFAULT_API_BASE_URL = "http://localhost:8080"

MIN_HOURS_PER_DAY = 0
MAX_HOURS_PER_DAY = 24
MIN_PASSWORD_LENGTH = 6

REPORT_CONTENT_TYPE = "application/pdf"
