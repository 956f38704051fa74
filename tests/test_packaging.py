from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]
PACKAGE_ROOT = ROOT / "src" / "driver_payroll" / "driver_payroll"


def test_only_top_level_package_has_init():
    assert [p.relative_to(PACKAGE_ROOT).as_posix() for p in PACKAGE_ROOT.rglob("__init__.py")] == ["__init__.py"]


def test_every_subpackage_is_installed():
    declared = set(tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["tool"]["setuptools"]["packages"])

    on_disk = {
        ".".join(("driver_payroll",) + d.relative_to(PACKAGE_ROOT).parts)
        for d in [PACKAGE_ROOT, *PACKAGE_ROOT.rglob("*")]
        if d.is_dir() and d.name != "__pycache__" and any(d.glob("*.py"))
    }

    assert on_disk <= declared
