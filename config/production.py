import os

SHIFTS_FILE = os.getenv("SHIFTS_FILE", "/var/lib/driver-payroll/shifts.txt")
RATES_FILE = os.getenv("RATES_FILE", "/var/lib/driver-payroll/driverRates.txt")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

HOLIDAY_START = os.getenv("HOLIDAY_START", "2025-04-10")
HOLIDAY_END = os.getenv("HOLIDAY_END", "2025-04-30")

MISSING_HOURS_ROUNDING = os.getenv("MISSING_HOURS_ROUNDING", "floor")
