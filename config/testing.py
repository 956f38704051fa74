import os

SHIFTS_FILE = os.getenv("SHIFTS_FILE", "shifts.txt")
RATES_FILE = os.getenv("RATES_FILE", "driverRates.txt")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

HOLIDAY_START = os.getenv("HOLIDAY_START", "2025-04-10")
HOLIDAY_END = os.getenv("HOLIDAY_END", "2025-04-30")

MISSING_HOURS_ROUNDING = os.getenv("MISSING_HOURS_ROUNDING", "floor")
