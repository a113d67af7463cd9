"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_START_DAYS = (1, 15)
MIN_START_DAY = 1
MAX_START_DAY = 31

# Largest value of the DECIMAL(10, 2) rate column
MAX_HOURLY_RATE = "99999999.99"

MINUTES_PER_HOUR = 60

SUMMARY_CSV_HEADER = "Pay Period Start,Employee,Total Hours,Total Pay"
SUMMARY_CSV_FILENAME = "timekeeper_summary.csv"

NO_PUNCH_MESSAGE = "No punch in record found for today."
