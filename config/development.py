import os

# Shift and rate tables (plain text, one record per line)
SHIFTS_FILE = os.getenv("SHIFTS_FILE", "data/shifts.txt")
RATES_FILE = os.getenv("RATES_FILE", "data/driverRates.txt")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Holiday period with the reduced daily quota (inclusive, yyyy-mm-dd)
HOLIDAY_START = os.getenv("HOLIDAY_START", "2025-04-10")
HOLIDAY_END = os.getenv("HOLIDAY_END", "2025-04-30")

# floor | ceil | exact
MISSING_HOURS_ROUNDING = os.getenv("MISSING_HOURS_ROUNDING", "floor")
