class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidFormatError(ValidationError):
    """Raised when a clock, duration, date, month or flag string cannot be decoded."""


class DriverNotFoundError(DomainError):
    """Raised when a driver has no entry in the rate table."""

    def __init__(self, driver_id: str):
        super().__init__(f"Driver {driver_id!r} not found in rate table")
        self.driver_id = driver_id
