"""Function-level entry points over the shift and rate files.

Each call builds fresh services over the given paths, so every call sees the
current file contents. Pass ``policy=`` to use a non-default rule set.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .common.datetime_utils import format_seconds, parse_iso_date, parse_seconds
from .core.policy import DeliveryPolicy
from .payroll.calculator.standard_calculator import TierDeductionCalculator
from .payroll.monthly_service import MonthlyHoursService
from .payroll.service import PayrollService
from .rates.file_rate_repository import FileRateRepository
from .shifts.file_shift_repository import FileShiftRepository
from .shifts.metrics import ShiftMetricsCalculator
from .shifts.model import NewShift, ShiftRecord
from .shifts.service import ShiftRecordService

PathLike = Union[str, Path]


def _shift_service(shifts_file: PathLike, policy: Optional[DeliveryPolicy]) -> ShiftRecordService:
    return ShiftRecordService(FileShiftRepository(shifts_file), calculator=ShiftMetricsCalculator(policy))


def _monthly_service(
    shifts_file: PathLike,
    rates_file: Optional[PathLike] = None,
    policy: Optional[DeliveryPolicy] = None,
) -> MonthlyHoursService:
    rates = FileRateRepository(rates_file) if rates_file is not None else None
    return MonthlyHoursService(FileShiftRepository(shifts_file), rates, policy=policy)


def get_shift_duration(start_time: str, end_time: str) -> str:
    return format_seconds(ShiftMetricsCalculator().shift_duration(start_time, end_time))


def get_idle_time(start_time: str, end_time: str, *, policy: Optional[DeliveryPolicy] = None) -> str:
    return format_seconds(ShiftMetricsCalculator(policy).idle_time(start_time, end_time))


def get_active_time(shift_duration: str, idle_time: str) -> str:
    return format_seconds(ShiftMetricsCalculator.active_time(parse_seconds(shift_duration), parse_seconds(idle_time)))


def met_quota(date: str, active_time: str, *, policy: Optional[DeliveryPolicy] = None) -> bool:
    return ShiftMetricsCalculator(policy).met_quota(parse_iso_date(date), parse_seconds(active_time))


def add_shift_record(
    shifts_file: PathLike,
    shift: Union[NewShift, Mapping[str, Any]],
    *,
    policy: Optional[DeliveryPolicy] = None,
) -> Optional[ShiftRecord]:
    if not isinstance(shift, NewShift):
        shift = NewShift.from_mapping(shift)
    return _shift_service(shifts_file, policy).add_shift_record(shift)


def set_bonus(shifts_file: PathLike, driver_id: str, date: str, new_value: Union[bool, str]) -> None:
    _shift_service(shifts_file, None).set_bonus(driver_id, date, new_value)


def count_bonus_per_month(shifts_file: PathLike, driver_id: str, month: Union[int, str]) -> int:
    return _monthly_service(shifts_file).count_bonus_per_month(driver_id, month)


def get_total_active_hours_per_month(shifts_file: PathLike, driver_id: str, month: Union[int, str]) -> str:
    return format_seconds(_monthly_service(shifts_file).total_active_seconds(driver_id, month))


def get_required_hours_per_month(
    shifts_file: PathLike,
    rates_file: PathLike,
    bonus_count: int,
    driver_id: str,
    month: Union[int, str],
    *,
    policy: Optional[DeliveryPolicy] = None,
) -> str:
    monthly = _monthly_service(shifts_file, rates_file, policy)
    return format_seconds(monthly.required_seconds(driver_id, month, bonus_count))


def get_net_pay(
    driver_id: str,
    actual_hours: str,
    required_hours: str,
    rates_file: PathLike,
    *,
    policy: Optional[DeliveryPolicy] = None,
) -> int:
    payroll = PayrollService(FileRateRepository(rates_file), calculator=TierDeductionCalculator(policy))
    return payroll.get_net_pay(
        driver_id,
        actual_seconds=parse_seconds(actual_hours),
        required_seconds=parse_seconds(required_hours),
    )
