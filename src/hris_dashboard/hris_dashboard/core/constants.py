"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_UTC_OFFSET_HOURS = 7
DEFAULT_ANNUAL_LEAVE_QUOTA = 12
DEFAULT_RANGE = "week"
RECENT_HIRES_LIMIT = 5
MONTH_BUCKET_DAYS = 7
MAX_MONTH_BUCKETS = 5

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
