"""Exception types raised outside the pure computation core."""
from __future__ import annotations


class TariffCheckerError(Exception):
    """Base class for tariff checker errors."""


class InvalidInputError(TariffCheckerError, ValueError):
    """A user-supplied quantity is negative, NaN or infinite."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"{field} must be a finite, non-negative number (got {value!r})")
        self.field = field
        self.value = value


class RateTableError(TariffCheckerError, ValueError):
    """A rate table could not be turned into rate records."""
