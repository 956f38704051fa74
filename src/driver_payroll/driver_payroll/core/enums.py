from __future__ import annotations

from datetime import date
from enum import Enum

from .exceptions import InvalidFormatError


class Weekday(str, Enum):
    """Weekday names as written in the rate table (matched case-insensitively)."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_name(cls, value: str) -> "Weekday":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidFormatError(f"Unknown weekday: {value!r}")

    @classmethod
    def of(cls, day: date) -> "Weekday":
        # Enum members keep definition order, which matches date.weekday().
        return list(cls)[day.weekday()]


class MissingHoursRounding(str, Enum):
    """How missing time is turned into hours before the tier allowance applies."""

    FLOOR = "floor"
    CEIL = "ceil"
    EXACT = "exact"
