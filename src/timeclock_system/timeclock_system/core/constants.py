"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_EXPECTED_MINUTES = 492
DEFAULT_MINIMUM_BREAK_MINUTES = 60
DEFAULT_TOLERANCE_MINUTES = 0
DEFAULT_MAX_DAILY_MINUTES = 600
DEFAULT_MIN_REST_MINUTES = 660

DEFAULT_MAX_ENTRIES_PER_DAY = 10
DEFAULT_BREAK_LENIENCY_MINUTES = 10

DEFAULT_FUTURE_TOLERANCE_MINUTES = 5
DEFAULT_BACKFILL_DAYS = 7
DEFAULT_STALE_ENTRY_DAYS = 30
DEFAULT_LONG_SHIFT_MINUTES = 360
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_EXPECTED_HOURS_TOLERANCE_MINUTES = 60

DEFAULT_WEEK_START = 0  # Monday
DEFAULT_MONTH_START_DAY = 1
