"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SYSTEM_NAME = "Soran Institute Sync API"
SYSTEM_VERSION = "1.0.0"
API_VERSION = "v1"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_SOURCE = "teacher-system"
DEFAULT_SYNC_TYPE = "unknown"
API_SOURCE = "API"
UNKNOWN_STUDENT_NAME = "unknown"

RECENT_DETAIL_LIMIT = 10
RECENT_DATES_LIMIT = 30
