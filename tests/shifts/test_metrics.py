from dataclasses import replace
from datetime import date

import pytest

from src.driver_payroll.driver_payroll.core.constants import DAY_SECONDS
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError, ValidationError
from src.driver_payroll.driver_payroll.core.policy import DeliveryPolicy
from src.driver_payroll.driver_payroll.shifts.metrics import ShiftMetricsCalculator
from src.driver_payroll.driver_payroll.shifts.segmenter import idle_seconds_between

H = 3600


def test_duration_and_idle_inside_window():
    calc = ShiftMetricsCalculator()
    assert calc.shift_duration("8:00:00 am", "5:00:00 pm") == 9 * H
    assert calc.idle_time("8:00:00 am", "5:00:00 pm") == 0
    assert calc.idle_time("9:00:00 am", "9:59:59 pm") == 0


def test_idle_counts_both_tails_on_same_day():
    calc = ShiftMetricsCalculator()
    assert calc.shift_duration("6:00:00 am", "11:00:00 pm") == 17 * H
    assert calc.idle_time("6:00:00 am", "11:00:00 pm") == 3 * H


def test_shift_fully_outside_window_is_all_idle():
    calc = ShiftMetricsCalculator()
    duration = calc.shift_duration("10:30:00 pm", "7:30:00 am")
    assert duration == 9 * H
    assert calc.idle_time("10:30:00 pm", "7:30:00 am") == duration


def test_idle_across_midnight():
    calc = ShiftMetricsCalculator()
    assert calc.shift_duration("6:00:00 pm", "2:00:00 am") == 8 * H
    assert calc.idle_time("6:00:00 pm", "2:00:00 am") == 4 * H


def test_segmenter_walks_several_days():
    idle = idle_seconds_between(0, 2 * DAY_SECONDS, window_start=8 * H, window_end=22 * H)
    assert idle == 2 * 10 * H


def test_custom_delivery_window():
    calc = ShiftMetricsCalculator(DeliveryPolicy(delivery_start=9 * H, delivery_end=17 * H))
    assert calc.idle_time("8:00:00 am", "5:00:00 pm") == H


def test_active_time_clamps_at_zero():
    assert ShiftMetricsCalculator.active_time(2 * H, 3 * H) == 0
    assert ShiftMetricsCalculator.active_time(9 * H, H) == 8 * H


@pytest.mark.parametrize(
    "day, active, expected",
    [
        (date(2025, 4, 15), 6 * H + 30 * 60, True),
        (date(2025, 5, 15), 6 * H + 30 * 60, False),
        (date(2025, 4, 10), 6 * H, True),
        (date(2025, 4, 30), 6 * H, True),
        (date(2025, 4, 9), 6 * H, False),
        (date(2025, 5, 1), 8 * H + 24 * 60, True),
        (date(2025, 5, 1), 8 * H + 24 * 60 - 1, False),
    ],
)
def test_met_quota_thresholds(day, active, expected):
    assert ShiftMetricsCalculator().met_quota(day, active) is expected


def test_met_quota_with_alternate_holiday_window():
    policy = replace(DeliveryPolicy(), holiday_start=date(2025, 3, 1), holiday_end=date(2025, 3, 5))
    calc = ShiftMetricsCalculator(policy)

    assert calc.met_quota(date(2025, 3, 3), 6 * H) is True
    assert calc.met_quota(date(2025, 4, 15), 6 * H + 30 * 60) is False


def test_compute_composes_all_fields():
    metrics = ShiftMetricsCalculator().compute(work_date=date(2025, 5, 2), start_time="6:00:00 am", end_time="11:00:00 pm")

    assert metrics.shift_duration == 17 * H
    assert metrics.idle_time == 3 * H
    assert metrics.active_time == 14 * H
    assert metrics.met_quota is True


def test_policy_rejects_inverted_window():
    with pytest.raises(ValidationError):
        DeliveryPolicy(delivery_start=22 * H, delivery_end=8 * H)


def test_clock_times_past_midnight_are_rejected():
    calc = ShiftMetricsCalculator()
    with pytest.raises(InvalidFormatError):
        calc.shift_duration("30:00:00", "1:00:00 am")
    with pytest.raises(InvalidFormatError):
        calc.idle_time("8:00:00 am", "24:00:00")
