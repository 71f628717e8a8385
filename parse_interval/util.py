"""Unit lengths and numeric limits for interval parsing.

Each constant is the length of a fixed-size unit in seconds. Years and
months vary in length with the calendar, so they have no entry here and are
applied to a reference date instead.
"""

SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Largest magnitude accepted for a parsed number (signed 64-bit)
MAX_NUMBER = 2**63 - 1

# Fractional digits kept per number; later digits are consumed but ignored.
# Enough for whole-second truncation of the longest unit (WEEK).
FRACTION_DIGITS = 18
