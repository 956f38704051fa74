from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import format_flag, parse_clock_seconds, parse_flag, parse_iso_date
from ..common.validators import require_non_empty, require_plain_field
from ..core.constants import SHIFT_FIELD_COUNT, SHIFT_KEY_FIELD_COUNT
from ..core.exceptions import InvalidFormatError, ValidationError
from .metrics import ShiftMetricsCalculator
from .model import NewShift, ShiftRecord
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def _line_date(line: str) -> Optional[date]:
    parts = line.split(",")
    if len(parts) < 3:
        return None
    try:
        return parse_iso_date(parts[2])
    except InvalidFormatError:
        return None


def _sort_key(line: str) -> date:
    # Rows without a readable date go first; sorted() is stable for ties.
    return _line_date(line) or date.min


class ShiftRecordService:
    def __init__(self, shifts: ShiftRepository, *, calculator: Optional[ShiftMetricsCalculator] = None):
        self._shifts = shifts
        self._calculator = calculator or ShiftMetricsCalculator()

    @staticmethod
    def _validate(new_shift: NewShift) -> tuple[str, str, date, str, str]:
        driver_id = require_plain_field(new_shift.driver_id, "driverID")
        driver_name = require_plain_field(new_shift.driver_name, "driverName")
        work_date = parse_iso_date(require_non_empty(new_shift.date, "date"))
        start_time = require_plain_field(new_shift.start_time, "startTime")
        end_time = require_plain_field(new_shift.end_time, "endTime")

        if parse_clock_seconds(start_time) == parse_clock_seconds(end_time):
            raise ValidationError("Shift start and end must differ")
        return driver_id, driver_name, work_date, start_time, end_time

    def add_shift_record(self, new_shift: NewShift) -> Optional[ShiftRecord]:
        """Append a shift, keeping the file unique per (driver, date) and sorted by date.

        Returns the stored record, or None when the pair already exists (the
        file is left untouched in that case).
        """

        driver_id, driver_name, work_date, start_time, end_time = self._validate(new_shift)

        self._shifts.ensure_exists()
        lines = self._shifts.read_lines()

        for line in lines:
            parts = line.split(",")
            if len(parts) < SHIFT_KEY_FIELD_COUNT:
                continue
            if parts[0].strip() == driver_id and _line_date(line) == work_date:
                logger.info("Shift for driver %s on %s already recorded; skipping", driver_id, work_date)
                return None

        metrics = self._calculator.compute(work_date=work_date, start_time=start_time, end_time=end_time)
        record = ShiftRecord(
            driver_id=driver_id,
            driver_name=driver_name,
            work_date=work_date,
            start_time=start_time,
            end_time=end_time,
            shift_duration=metrics.shift_duration,
            idle_time=metrics.idle_time,
            active_time=metrics.active_time,
            met_quota=metrics.met_quota,
            has_bonus=False,
        )

        lines.append(record.to_line())
        self._shifts.write_lines(sorted(lines, key=_sort_key))

        logger.info("Recorded shift for driver %s on %s", driver_id, work_date)
        return record

    def set_bonus(self, driver_id: str, work_date: str, new_value: Union[bool, str]) -> None:
        """Overwrite the bonus flag of the (driver, date) record, if it exists.

        The file is rewritten only when some line actually changes.
        """

        if not self._shifts.exists():
            return

        target_date = parse_iso_date(work_date)
        if isinstance(new_value, str):
            new_value = parse_flag(new_value)
        elif not isinstance(new_value, bool):
            raise ValidationError(f"Bonus flag must be a bool, got {new_value!r}")
        flag = format_flag(new_value)

        changed = False
        updated_lines = []
        for line in self._shifts.read_lines():
            parts = line.split(",")
            if len(parts) < SHIFT_FIELD_COUNT:
                updated_lines.append(line)
                continue

            if parts[0].strip() == driver_id and _line_date(line) == target_date:
                parts[9] = flag
                new_line = ",".join(parts)
                if new_line != line:
                    changed = True
                updated_lines.append(new_line)
            else:
                updated_lines.append(line)

        if changed:
            self._shifts.write_lines(updated_lines)
            logger.info("Set bonus=%s for driver %s on %s", flag, driver_id, target_date)
