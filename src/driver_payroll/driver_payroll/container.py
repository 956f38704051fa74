from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from config import get_settings_module

from .core.policy import DeliveryPolicy
from .payroll.calculator.standard_calculator import TierDeductionCalculator
from .payroll.monthly_service import MonthlyHoursService
from .payroll.service import PayrollService
from .rates.file_rate_repository import FileRateRepository
from .shifts.file_shift_repository import FileShiftRepository
from .shifts.metrics import ShiftMetricsCalculator
from .shifts.service import ShiftRecordService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Container:
    policy: DeliveryPolicy

    shifts_repo: FileShiftRepository
    rates_repo: FileRateRepository

    metrics: ShiftMetricsCalculator
    shift_service: ShiftRecordService
    monthly_service: MonthlyHoursService
    payroll_service: PayrollService


def build_container(
    *,
    shifts_file: Union[str, Path],
    rates_file: Union[str, Path],
    policy: Optional[DeliveryPolicy] = None,
) -> Container:
    policy = policy or DeliveryPolicy()

    shifts_repo = FileShiftRepository(shifts_file)
    rates_repo = FileRateRepository(rates_file)

    metrics = ShiftMetricsCalculator(policy)
    shift_service = ShiftRecordService(shifts_repo, calculator=metrics)
    monthly_service = MonthlyHoursService(shifts_repo, rates_repo, policy=policy)
    payroll_service = PayrollService(rates_repo, monthly_service, calculator=TierDeductionCalculator(policy))

    return Container(
        policy=policy,
        shifts_repo=shifts_repo,
        rates_repo=rates_repo,
        metrics=metrics,
        shift_service=shift_service,
        monthly_service=monthly_service,
        payroll_service=payroll_service,
    )


def load_container(settings_module: Optional[str] = None) -> Container:
    """Build a container from the APP_ENV settings module (after loading .env)."""

    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    shifts_file = getattr(settings, "SHIFTS_FILE")
    rates_file = getattr(settings, "RATES_FILE")
    if getattr(settings, "DEBUG", False):
        logger.debug("settings=%s shifts=%s rates=%s", settings_module, shifts_file, rates_file)

    return build_container(
        shifts_file=shifts_file,
        rates_file=rates_file,
        policy=DeliveryPolicy.from_settings(settings),
    )
