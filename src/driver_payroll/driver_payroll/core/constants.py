"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOUR_SECONDS = 3600
DAY_SECONDS = 24 * HOUR_SECONDS

# Delivery window, seconds since local midnight.
DELIVERY_START_SECONDS = 8 * HOUR_SECONDS
DELIVERY_END_SECONDS = 22 * HOUR_SECONDS

DAILY_MINIMUM_NORMAL_SECONDS = 8 * HOUR_SECONDS + 24 * 60
DAILY_MINIMUM_HOLIDAY_SECONDS = 6 * HOUR_SECONDS

DEFAULT_HOLIDAY_START = "2025-04-10"
DEFAULT_HOLIDAY_END = "2025-04-30"

BONUS_CREDIT_HOURS = 2
DEDUCTION_DIVISOR = 185

TIER_ALLOWANCE_HOURS = {1: 50, 2: 20, 3: 10, 4: 3}

SHIFT_FIELD_COUNT = 10
SHIFT_KEY_FIELD_COUNT = 5
RATE_FIELD_COUNT = 4
