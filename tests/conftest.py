from __future__ import annotations

from pathlib import Path

import pytest

RATES = [
    "D1,Friday,18500,2",
    "D2,sunday,9250,4",
    "D3,,12000,1",
]


def _shift_line(driver_id: str, work_date: str, active: str = "9:00:00", bonus: bool = False) -> str:
    # Only the fields monthly queries read vary here.
    flag = "true" if bonus else "false"
    return f"{driver_id},Ali,{work_date},8:00:00 am,5:00:00 pm,9:00:00,0:00:00,{active},true,{flag}"


def _write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def shift_line():
    return _shift_line


@pytest.fixture
def write_lines():
    return _write_lines


@pytest.fixture
def shifts_file(tmp_path: Path) -> Path:
    return tmp_path / "shifts.txt"


@pytest.fixture
def rates_file(tmp_path: Path) -> Path:
    return _write_lines(tmp_path / "driverRates.txt", RATES)
