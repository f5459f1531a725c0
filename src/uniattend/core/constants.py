"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

MAX_CODE_LENGTH = 5
UNSET_CODE = ""

DEFAULT_DATA_FILENAME = "attendance.json"
DEFAULT_PORT = 3000
DEFAULT_WEEK_COUNT = 15
# Week 10 contains Tue 6 January 2026, so week 1 starts nine weeks earlier.
DEFAULT_FIRST_WEEK_START = date(2025, 11, 3)

DEFAULT_DEBOUNCE_SECONDS = 0.4
DEFAULT_SYNC_TIMEOUT_SECONDS = 10.0
DEFAULT_API_BASE_URL = "http://localhost:3000"

EXPORT_FILENAME_PREFIX = "uni_attendance_backup_"
