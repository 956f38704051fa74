from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..common.datetime_utils import format_seconds, parse_month
from ..core.exceptions import DriverNotFoundError
from ..rates.model import DriverRate
from ..rates.repository import RateRepository
from .calculator.base import PayCalculator
from .calculator.standard_calculator import TierDeductionCalculator
from .monthly_service import MonthlyHoursService


@dataclass(frozen=True)
class MonthlyStatement:
    driver_id: str
    month: int
    bonus_count: int
    active_seconds: int
    required_seconds: int
    net_pay: int

    @property
    def missing_seconds(self) -> int:
        return max(self.required_seconds - self.active_seconds, 0)

    def to_dict(self) -> dict:
        return {
            "driver_id": self.driver_id,
            "month": self.month,
            "bonus_count": self.bonus_count,
            "active_hours": format_seconds(self.active_seconds),
            "required_hours": format_seconds(self.required_seconds),
            "missing_hours": format_seconds(self.missing_seconds),
            "net_pay": self.net_pay,
        }


class PayrollService:
    def __init__(
        self,
        rates: RateRepository,
        monthly: Optional[MonthlyHoursService] = None,
        *,
        calculator: Optional[PayCalculator] = None,
    ):
        self._rates = rates
        self._monthly = monthly
        self._calculator = calculator or TierDeductionCalculator()

    def _get_rate(self, driver_id: str) -> DriverRate:
        rate = self._rates.get_by_driver_id(driver_id)
        if rate is None:
            raise DriverNotFoundError(driver_id)
        return rate

    def get_net_pay(self, driver_id: str, *, actual_seconds: int, required_seconds: int) -> int:
        rate = self._get_rate(driver_id)
        return self._calculator.net_pay(rate, actual_seconds=actual_seconds, required_seconds=required_seconds)

    def build_monthly_statement(self, driver_id: str, month: Union[int, str]) -> MonthlyStatement:
        if self._monthly is None:
            raise RuntimeError("PayrollService was built without a MonthlyHoursService")

        month = parse_month(month)
        rate = self._get_rate(driver_id)

        # -1 means "no bonus history"; report it as zero bonuses.
        bonus_count = max(self._monthly.count_bonus_per_month(driver_id, month), 0)
        active = self._monthly.total_active_seconds(driver_id, month)
        required = self._monthly.required_seconds(driver_id, month, bonus_count)

        return MonthlyStatement(
            driver_id=driver_id,
            month=month,
            bonus_count=bonus_count,
            active_seconds=active,
            required_seconds=required,
            net_pay=self._calculator.net_pay(rate, actual_seconds=active, required_seconds=required),
        )

    def build_monthly_report(self, month: Union[int, str]) -> list[MonthlyStatement]:
        """Statements for every driver in the rate table, highest net pay first."""

        driver_ids = dict.fromkeys(rate.driver_id for rate in self._rates.list_all())
        statements = [self.build_monthly_statement(driver_id, month) for driver_id in driver_ids]
        statements.sort(key=lambda s: (-s.net_pay, s.driver_id))
        return statements
