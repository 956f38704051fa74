from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.driver_payroll.driver_payroll.container import build_container, load_container
from src.driver_payroll.driver_payroll.core.enums import MissingHoursRounding
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError
from src.driver_payroll.driver_payroll.core.policy import DeliveryPolicy


@pytest.mark.parametrize(
    "env, module",
    [("production", "config.production"), ("PROD", "config.production"), ("test", "config.testing"), ("dev", "config.development"), (" Testing ", "config.testing"), ("staging", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_policy_from_settings():
    settings = SimpleNamespace(HOLIDAY_START="2026-03-20", HOLIDAY_END="2026-03-22", MISSING_HOURS_ROUNDING="CEIL")

    policy = DeliveryPolicy.from_settings(settings)

    assert policy.holiday_start == date(2026, 3, 20)
    assert policy.holiday_end == date(2026, 3, 22)
    assert policy.missing_hours_rounding == MissingHoursRounding.CEIL


def test_policy_from_empty_settings_keeps_defaults():
    assert DeliveryPolicy.from_settings(SimpleNamespace()) == DeliveryPolicy()


def test_policy_from_settings_rejects_bad_values():
    with pytest.raises(InvalidFormatError):
        DeliveryPolicy.from_settings(SimpleNamespace(HOLIDAY_START="April 10"))
    with pytest.raises(InvalidFormatError):
        DeliveryPolicy.from_settings(SimpleNamespace(MISSING_HOURS_ROUNDING="banker"))


def test_load_container_uses_settings_module():
    import config.testing as settings

    container = load_container("config.testing")

    assert container.shifts_repo.path == Path(settings.SHIFTS_FILE)
    assert container.policy.missing_hours_rounding == MissingHoursRounding.FLOOR


def test_build_container_wires_services(shifts_file, rates_file):
    container = build_container(shifts_file=shifts_file, rates_file=rates_file)

    assert container.monthly_service.count_bonus_per_month("D1", 5) == -1
    assert container.payroll_service.get_net_pay("D1", actual_seconds=0, required_seconds=0) == 18500


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"
