from __future__ import annotations

from abc import ABC, abstractmethod

from ...rates.model import DriverRate


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_pay(self, rate: DriverRate, *, actual_seconds: int, required_seconds: int) -> int:
        raise NotImplementedError
