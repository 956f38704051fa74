from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..common.datetime_utils import is_ascii_digits
from ..core.constants import RATE_FIELD_COUNT
from ..core.enums import Weekday
from ..core.exceptions import InvalidFormatError


@dataclass(frozen=True)
class DriverRate:
    """Domain entity: a driver's pay terms from the rate table."""

    driver_id: str
    day_off: Optional[Weekday]
    base_pay: Decimal
    tier: int

    @classmethod
    def from_line(cls, line: str) -> Optional["DriverRate"]:
        parts = line.split(",")
        if len(parts) < RATE_FIELD_COUNT:
            return None

        day_off_text = parts[1].strip()
        try:
            base_pay = Decimal(parts[2].strip())
        except InvalidOperation:
            raise InvalidFormatError(f"Invalid basePay: {parts[2]!r}")
        if not base_pay.is_finite():
            raise InvalidFormatError(f"Invalid basePay: {parts[2]!r}")

        tier_text = parts[3].strip()
        if not is_ascii_digits(tier_text):
            raise InvalidFormatError(f"Invalid tier: {parts[3]!r}")

        return cls(
            driver_id=parts[0].strip(),
            day_off=Weekday.from_name(day_off_text) if day_off_text else None,
            base_pay=base_pay,
            tier=int(tier_text),
        )
