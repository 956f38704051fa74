from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_clock_seconds
from ..core.policy import DeliveryPolicy
from .segmenter import idle_seconds_between, unwrap_end

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftMetrics:
    shift_duration: int
    idle_time: int
    active_time: int
    met_quota: bool


class ShiftMetricsCalculator:
    """Derived fields of a shift: duration, idle, active time and quota."""

    def __init__(self, policy: Optional[DeliveryPolicy] = None):
        self._policy = policy or DeliveryPolicy()

    def shift_duration(self, start_time: str, end_time: str) -> int:
        start = parse_clock_seconds(start_time)
        end = unwrap_end(start, parse_clock_seconds(end_time))
        return end - start

    def idle_time(self, start_time: str, end_time: str) -> int:
        return idle_seconds_between(
            parse_clock_seconds(start_time),
            parse_clock_seconds(end_time),
            window_start=self._policy.delivery_start,
            window_end=self._policy.delivery_end,
        )

    @staticmethod
    def active_time(shift_duration: int, idle_time: int) -> int:
        return max(shift_duration - idle_time, 0)

    def met_quota(self, work_date: date, active_time: int) -> bool:
        return active_time >= self._policy.daily_minimum(work_date)

    def compute(self, *, work_date: date, start_time: str, end_time: str) -> ShiftMetrics:
        duration = self.shift_duration(start_time, end_time)
        idle = self.idle_time(start_time, end_time)
        active = self.active_time(duration, idle)
        met = self.met_quota(work_date, active)

        logger.debug(
            "Shift %s %s-%s: duration=%ss idle=%ss active=%ss met_quota=%s",
            work_date, start_time, end_time, duration, idle, active, met,
        )
        return ShiftMetrics(shift_duration=duration, idle_time=idle, active_time=active, met_quota=met)
