from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..core.exceptions import InvalidFormatError
from .model import ShiftRecord
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class FileShiftRepository(ShiftRepository):
    """Shift table stored as one comma-separated record per line.

    Note: The file is read on every call; nothing is cached between calls.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def ensure_exists(self) -> None:
        if not self.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()

    def read_lines(self) -> list[str]:
        if not self.exists():
            return []
        text = self._path.read_text(encoding="utf-8")
        return [line for line in text.splitlines() if line.strip()]

    def write_lines(self, lines: Sequence[str]) -> None:
        content = "\n".join(lines)
        if content:
            content += "\n"
        self._path.write_text(content, encoding="utf-8")

    def list_records(self, driver_id: Optional[str] = None) -> Sequence[ShiftRecord]:
        records = []
        for lineno, line in enumerate(self.read_lines(), start=1):
            try:
                record = ShiftRecord.from_line(line)
            except InvalidFormatError as exc:
                logger.warning("Skipping undecodable line %s of %s: %s", lineno, self._path, exc)
                continue
            if record is None:
                continue
            if driver_id is not None and record.driver_id != driver_id:
                continue
            records.append(record)
        return records
