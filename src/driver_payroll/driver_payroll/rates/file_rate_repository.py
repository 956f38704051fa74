from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..core.exceptions import InvalidFormatError
from .model import DriverRate
from .repository import RateRepository

logger = logging.getLogger(__name__)


class FileRateRepository(RateRepository):
    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def exists(self) -> bool:
        return self._path.is_file()

    def list_all(self) -> Sequence[DriverRate]:
        if not self.exists():
            return []

        rates = []
        text = self._path.read_text(encoding="utf-8")
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                rate = DriverRate.from_line(line)
            except InvalidFormatError as exc:
                logger.warning("Skipping undecodable rate line %s of %s: %s", lineno, self._path, exc)
                continue
            if rate is not None:
                rates.append(rate)
        return rates

    def get_by_driver_id(self, driver_id: str) -> Optional[DriverRate]:
        for rate in self.list_all():
            if rate.driver_id == driver_id:
                return rate
        return None
