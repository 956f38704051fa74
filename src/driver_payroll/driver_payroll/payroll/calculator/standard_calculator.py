from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from typing import Optional

from .base import PayCalculator
from ...core.constants import HOUR_SECONDS
from ...core.enums import MissingHoursRounding
from ...core.policy import DeliveryPolicy
from ...rates.model import DriverRate


class TierDeductionCalculator(PayCalculator):
    """Standard rule: base pay minus missing hours beyond the tier allowance.

    Deduction per hour is floor(base_pay / 185); the result never goes below 0.
    """

    def __init__(self, policy: Optional[DeliveryPolicy] = None):
        self._policy = policy or DeliveryPolicy()

    def missing_hours(self, *, actual_seconds: int, required_seconds: int) -> Decimal:
        missing = max(int(required_seconds) - int(actual_seconds), 0)
        rounding = self._policy.missing_hours_rounding
        if rounding == MissingHoursRounding.CEIL:
            return Decimal(-(-missing // HOUR_SECONDS))
        if rounding == MissingHoursRounding.EXACT:
            return Decimal(missing) / Decimal(HOUR_SECONDS)
        return Decimal(missing // HOUR_SECONDS)

    def net_pay(self, rate: DriverRate, *, actual_seconds: int, required_seconds: int) -> int:
        allowance = self._policy.allowance_for_tier(rate.tier)
        missing = self.missing_hours(actual_seconds=actual_seconds, required_seconds=required_seconds)
        deductible = max(missing - allowance, Decimal(0))

        rate_per_hour = (rate.base_pay / self._policy.deduction_divisor).to_integral_value(rounding=ROUND_FLOOR)
        net = rate.base_pay - deductible * rate_per_hour
        return max(int(net.to_integral_value(rounding=ROUND_FLOOR)), 0)
