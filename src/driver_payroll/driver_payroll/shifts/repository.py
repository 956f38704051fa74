from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftRecord


class ShiftRepository(Protocol):
    """Storage interface for the shift table.

    Services depend on this interface, not on a concrete file layout. Lines are
    exposed raw so writers can pass short or legacy rows through untouched.
    """

    def exists(self) -> bool:
        raise NotImplementedError

    def ensure_exists(self) -> None:
        raise NotImplementedError

    def read_lines(self) -> list[str]:
        raise NotImplementedError

    def write_lines(self, lines: Sequence[str]) -> None:
        raise NotImplementedError

    def list_records(self, driver_id: Optional[str] = None) -> Sequence[ShiftRecord]:
        raise NotImplementedError
