from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Mapping

from .constants import (
    BONUS_CREDIT_HOURS,
    DAILY_MINIMUM_HOLIDAY_SECONDS,
    DAILY_MINIMUM_NORMAL_SECONDS,
    DAY_SECONDS,
    DEDUCTION_DIVISOR,
    DEFAULT_HOLIDAY_END,
    DEFAULT_HOLIDAY_START,
    DELIVERY_END_SECONDS,
    DELIVERY_START_SECONDS,
    HOUR_SECONDS,
    TIER_ALLOWANCE_HOURS,
)
from .enums import MissingHoursRounding
from .exceptions import InvalidFormatError, ValidationError


def _default_holiday(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


@dataclass(frozen=True)
class DeliveryPolicy:
    """Business rules shared by metrics, required hours and pay.

    Immutable: build a new policy (``dataclasses.replace``) to try another
    holiday window or threshold instead of mutating shared state.
    """

    delivery_start: int = DELIVERY_START_SECONDS
    delivery_end: int = DELIVERY_END_SECONDS
    normal_minimum: int = DAILY_MINIMUM_NORMAL_SECONDS
    holiday_minimum: int = DAILY_MINIMUM_HOLIDAY_SECONDS
    holiday_start: date = field(default_factory=lambda: _default_holiday(DEFAULT_HOLIDAY_START))
    holiday_end: date = field(default_factory=lambda: _default_holiday(DEFAULT_HOLIDAY_END))
    bonus_credit_seconds: int = BONUS_CREDIT_HOURS * HOUR_SECONDS
    tier_allowance_hours: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType(dict(TIER_ALLOWANCE_HOURS))
    )
    deduction_divisor: int = DEDUCTION_DIVISOR
    missing_hours_rounding: MissingHoursRounding = MissingHoursRounding.FLOOR

    def __post_init__(self) -> None:
        if not 0 <= self.delivery_start < self.delivery_end <= DAY_SECONDS:
            raise ValidationError("Delivery window must satisfy 0 <= start < end <= 24h")
        if self.holiday_start > self.holiday_end:
            raise ValidationError("Holiday window starts after it ends")
        if self.deduction_divisor <= 0:
            raise ValidationError("Deduction divisor must be positive")
        if self.normal_minimum < 0 or self.holiday_minimum < 0 or self.bonus_credit_seconds < 0:
            raise ValidationError("Thresholds must not be negative")

    def is_holiday(self, day: date) -> bool:
        return self.holiday_start <= day <= self.holiday_end

    def daily_minimum(self, day: date) -> int:
        """Active seconds a driver must reach on ``day`` to meet the quota."""
        return self.holiday_minimum if self.is_holiday(day) else self.normal_minimum

    def allowance_for_tier(self, tier: int) -> int:
        try:
            return int(self.tier_allowance_hours[int(tier)])
        except KeyError:
            raise ValidationError(f"Unknown tier: {tier!r}")

    @classmethod
    def from_settings(cls, settings: Any) -> "DeliveryPolicy":
        """Build a policy from a settings module; absent attributes keep defaults."""

        overrides: dict[str, Any] = {}

        holiday_start = getattr(settings, "HOLIDAY_START", None)
        if holiday_start:
            overrides["holiday_start"] = _settings_date(holiday_start, "HOLIDAY_START")
        holiday_end = getattr(settings, "HOLIDAY_END", None)
        if holiday_end:
            overrides["holiday_end"] = _settings_date(holiday_end, "HOLIDAY_END")

        rounding = getattr(settings, "MISSING_HOURS_ROUNDING", None)
        if rounding:
            try:
                overrides["missing_hours_rounding"] = MissingHoursRounding(str(rounding).strip().lower())
            except ValueError:
                raise InvalidFormatError(f"Invalid MISSING_HOURS_ROUNDING: {rounding!r}")

        return cls(**overrides)


def _settings_date(value: Any, name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return _default_holiday(str(value).strip())
    except ValueError:
        raise InvalidFormatError(f"{name} must be yyyy-mm-dd, got {value!r}")
