from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_flag, format_seconds, parse_flag, parse_iso_date, parse_seconds
from ..core.constants import SHIFT_FIELD_COUNT


@dataclass(frozen=True)
class NewShift:
    """Input for appending a shift: who worked, which day, clock in/out."""

    driver_id: str
    driver_name: str
    date: str
    start_time: str
    end_time: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NewShift":
        """Accept the file's camelCase keys (``driverID``...) or snake_case ones."""

        def pick(camel: str, snake: str) -> Any:
            return data[camel] if camel in data else data.get(snake, "")

        return cls(
            driver_id=pick("driverID", "driver_id"),
            driver_name=pick("driverName", "driver_name"),
            date=pick("date", "date"),
            start_time=pick("startTime", "start_time"),
            end_time=pick("endTime", "end_time"),
        )


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: one line of the shift file.

    Clock strings are kept as entered; durations are seconds.
    """

    driver_id: str
    driver_name: str
    work_date: date
    start_time: str
    end_time: str
    shift_duration: int
    idle_time: int
    active_time: int
    met_quota: bool
    has_bonus: bool = False

    def to_line(self) -> str:
        return ",".join(
            [
                self.driver_id,
                self.driver_name,
                self.work_date.isoformat(),
                self.start_time,
                self.end_time,
                format_seconds(self.shift_duration),
                format_seconds(self.idle_time),
                format_seconds(self.active_time),
                format_flag(self.met_quota),
                format_flag(self.has_bonus),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> Optional["ShiftRecord"]:
        """Decode a stored line; ``None`` for short lines.

        Raises InvalidFormatError when a full-width line holds undecodable values.
        """

        parts = line.split(",")
        if len(parts) < SHIFT_FIELD_COUNT:
            return None
        return cls(
            driver_id=parts[0].strip(),
            driver_name=parts[1].strip(),
            work_date=parse_iso_date(parts[2]),
            start_time=parts[3].strip(),
            end_time=parts[4].strip(),
            shift_duration=parse_seconds(parts[5]),
            idle_time=parse_seconds(parts[6]),
            active_time=parse_seconds(parts[7]),
            met_quota=parse_flag(parts[8]),
            has_bonus=parse_flag(parts[9]),
        )

    def to_dict(self) -> dict:
        return {
            "driverID": self.driver_id,
            "driverName": self.driver_name,
            "date": self.work_date.isoformat(),
            "startTime": self.start_time,
            "endTime": self.end_time,
            "shiftDuration": format_seconds(self.shift_duration),
            "idleTime": format_seconds(self.idle_time),
            "activeTime": format_seconds(self.active_time),
            "metQuota": self.met_quota,
            "hasBonus": self.has_bonus,
        }
