from __future__ import annotations

import logging
from typing import Optional, Union

from ..common.datetime_utils import parse_month
from ..core.enums import Weekday
from ..core.policy import DeliveryPolicy
from ..rates.repository import RateRepository
from ..shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)


class MonthlyHoursService:
    """Monthly figures read straight from the shift and rate files.

    Months are matched on the month number only, in any year.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        rates: Optional[RateRepository] = None,
        *,
        policy: Optional[DeliveryPolicy] = None,
    ):
        self._shifts = shifts
        self._rates = rates
        self._policy = policy or DeliveryPolicy()

    def count_bonus_per_month(self, driver_id: str, month: Union[int, str]) -> int:
        """Bonus-flagged shifts of the driver in ``month``.

        Returns -1 when the file is missing or the driver has never had a
        bonus-flagged shift at all.
        """

        month = parse_month(month)
        if not self._shifts.exists():
            return -1

        bonus_records = [r for r in self._shifts.list_records(driver_id) if r.has_bonus]
        if not bonus_records:
            return -1
        return sum(1 for r in bonus_records if r.work_date.month == month)

    def total_active_seconds(self, driver_id: str, month: Union[int, str]) -> int:
        month = parse_month(month)
        return sum(r.active_time for r in self._shifts.list_records(driver_id) if r.work_date.month == month)

    def required_seconds(self, driver_id: str, month: Union[int, str], bonus_count: int) -> int:
        """Hours the driver owed in ``month``, minus the bonus credit.

        Each distinct worked date counts once; the driver's day-off is exempt.
        ``bonus_count`` is taken as given (negative values earn no credit).
        """

        month = parse_month(month)
        day_off = self._day_off(driver_id)

        worked_dates = sorted({r.work_date for r in self._shifts.list_records(driver_id) if r.work_date.month == month})

        required = 0
        for day in worked_dates:
            if day_off is not None and Weekday.of(day) == day_off:
                continue
            required += self._policy.daily_minimum(day)

        credit = max(int(bonus_count), 0) * self._policy.bonus_credit_seconds
        return max(required - credit, 0)

    def _day_off(self, driver_id: str) -> Optional[Weekday]:
        if self._rates is None:
            return None
        rate = self._rates.get_by_driver_id(driver_id)
        if rate is None:
            logger.warning("Driver %s has no rate entry; no day-off exemption applied", driver_id)
            return None
        return rate.day_off
