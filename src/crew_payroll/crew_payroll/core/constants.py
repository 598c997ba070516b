"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DAYS_PER_MONTH = 30
OT_MULTIPLIER = 1.5
# Hourly rate for overtime pay is always daily rate / 10, regardless of base hours.
OT_RATE_HOURS = 10

DEFAULT_BASE_HOURS = 10
DEFAULT_BREAK_MINUTES = 60
DEFAULT_CHECK_IN = "08:00 AM"
DEFAULT_CHECK_OUT = "06:00 PM"

LEAVE_TIME_PLACEHOLDER = "--"
MONEY_DECIMALS = 2
TOP_OT_WORKERS = 5

# Column widths in database/schema.sql
TIME_TEXT_MAX_LENGTH = 16
NOTES_MAX_LENGTH = 500
NAME_MAX_LENGTH = 120
TRADE_MAX_LENGTH = 80
