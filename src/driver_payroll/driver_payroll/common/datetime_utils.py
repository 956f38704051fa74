from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import DAY_SECONDS
from ..core.exceptions import InvalidFormatError


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decoding a clock or duration string.

    Either ``value`` is set (success) or ``error`` explains the failure.
    """

    value: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        if self.error is not None:
            raise InvalidFormatError(self.error)
        return int(self.value)


def is_ascii_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts that int() rejects.
    return text.isascii() and text.isdecimal()


def try_parse_seconds(text: object) -> ParseResult:
    """Decode ``h:mm:ss`` with an optional ``am``/``pm`` modifier.

    Without a modifier the value is read as 24-hour time or elapsed duration,
    so hours above 23 are accepted there.
    """

    if not isinstance(text, str):
        return ParseResult(error=f"Expected a time string, got {type(text).__name__}")

    parts = text.strip().lower().split()
    if not parts or len(parts) > 2:
        return ParseResult(error=f"Invalid time string: {text!r}")

    modifier = parts[1] if len(parts) == 2 else None
    pieces = parts[0].split(":")
    if len(pieces) != 3 or not all(is_ascii_digits(p) for p in pieces):
        return ParseResult(error=f"Invalid time string (h:mm:ss): {text!r}")

    hours, minutes, seconds = (int(p) for p in pieces)
    if minutes > 59 or seconds > 59:
        return ParseResult(error=f"Minutes and seconds must be below 60: {text!r}")

    if modifier is not None:
        if modifier not in ("am", "pm"):
            return ParseResult(error=f"Unknown time modifier {modifier!r} in {text!r}")
        if not 1 <= hours <= 12:
            return ParseResult(error=f"12-hour clock hour must be 1-12: {text!r}")
        if modifier == "pm" and hours != 12:
            hours += 12
        elif modifier == "am" and hours == 12:
            hours = 0

    return ParseResult(value=hours * 3600 + minutes * 60 + seconds)


def parse_seconds(text: str) -> int:
    return try_parse_seconds(text).unwrap()


def parse_clock_seconds(text: str) -> int:
    """Like parse_seconds, but the value must be a time of day below 24h."""
    seconds = parse_seconds(text)
    if seconds >= DAY_SECONDS:
        raise InvalidFormatError(f"Clock time must be below 24:00:00: {text!r}")
    return seconds


def format_seconds(seconds: int) -> str:
    """Format seconds as ``h:mm:ss``; negatives clamp to zero, hours are not capped."""
    seconds = max(int(seconds), 0)
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    return f"{h}:{m:02d}:{s:02d}"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise InvalidFormatError(f"Invalid date (yyyy-mm-dd): {value!r}")


def parse_month(value: Union[int, str]) -> int:
    """Accept 1-12 as an int or as an ``m``/``mm`` string."""

    if isinstance(value, bool):
        raise InvalidFormatError(f"Invalid month: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not is_ascii_digits(text) or len(text) > 2:
            raise InvalidFormatError(f"Invalid month: {value!r}")
        value = int(text)
    if not isinstance(value, int) or not 1 <= value <= 12:
        raise InvalidFormatError(f"Month must be 1-12, got {value!r}")
    return value


def parse_flag(value: str) -> bool:
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InvalidFormatError(f"Invalid boolean flag: {value!r}")


def format_flag(value: bool) -> str:
    return "true" if value else "false"
