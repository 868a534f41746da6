"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import (
    ElectricityProvider,
    FuelStation,
    GasProvider,
    InternetPlan,
    LoanProduct,
    TelecomPlan,
    WaterProvider,
)


class ElectricityRateRepository(Protocol):
    """Provides electricity tariffs."""

    def list_records(self) -> Sequence[ElectricityProvider]:
        ...


class WaterRateRepository(Protocol):
    """Provides water utility tariffs."""

    def list_records(self) -> Sequence[WaterProvider]:
        ...


class GasRateRepository(Protocol):
    """Provides gas distributor tariffs."""

    def list_records(self) -> Sequence[GasProvider]:
        ...


class FuelPriceRepository(Protocol):
    """Provides fuel station prices."""

    def list_records(self) -> Sequence[FuelStation]:
        ...


class LoanProductRepository(Protocol):
    """Provides bank loan products."""

    def list_records(self) -> Sequence[LoanProduct]:
        ...


class MobilePlanRepository(Protocol):
    def list_records(self) -> Sequence[TelecomPlan]:
        ...


class InternetPlanRepository(Protocol):
    def list_records(self) -> Sequence[InternetPlan]:
        ...
