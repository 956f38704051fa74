from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DriverRate


class RateRepository(Protocol):
    """Read-only access to the driver rate table."""

    def exists(self) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[DriverRate]:
        raise NotImplementedError

    def get_by_driver_id(self, driver_id: str) -> Optional[DriverRate]:
        raise NotImplementedError
