"""Domain models for tariff comparison.

Rate records are supplied by an external data source and never mutated.
Monetary rate fields are EUR; an absent product is ``None``, never zero.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Literal, Mapping

MeterType = Literal["single", "dual"]
FuelType = Literal["A95", "A98", "diesel", "lpg"]
LoanType = Literal["consumer", "mortgage"]

FUEL_TYPES: tuple[str, ...] = ("A95", "A98", "diesel", "lpg")
LOAN_TYPES: tuple[str, ...] = ("consumer", "mortgage")


# --- Electricity ---


@dataclass(frozen=True)
class BillComponent:
    """One named fee on an electricity bill, per kWh without VAT."""

    id: str
    name: str
    rate: Decimal
    explanation_key: str = ""


@dataclass(frozen=True)
class ElectricityProvider:
    """Regulated electricity tariff. Day/night/single rates include VAT."""

    id: str
    name: str
    region: str
    day_rate: Decimal
    night_rate: Decimal
    single_rate: Decimal
    breakdown: tuple[BillComponent, ...] = ()
    coverage_areas: tuple[str, ...] = ()
    url: str | None = None


@dataclass(frozen=True)
class ElectricityInput:
    day_kwh: Decimal
    night_kwh: Decimal = Decimal("0")
    meter_type: MeterType = "dual"

    @property
    def total_kwh(self) -> Decimal:
        return self.day_kwh + self.night_kwh


# --- Water ---


@dataclass(frozen=True)
class WaterProvider:
    """Water utility tariff, per m3 without VAT."""

    id: str
    name: str
    city: str
    supply_rate: Decimal
    sewerage_rate: Decimal
    treatment_rate: Decimal
    url: str | None = None


@dataclass(frozen=True)
class WaterInput:
    consumption_m3: Decimal


# --- Gas ---


@dataclass(frozen=True)
class GasProvider:
    """Natural gas distributor tariff, per m3 without VAT."""

    id: str
    name: str
    region: str
    price_per_m3: Decimal
    distribution_fee: Decimal
    transmission_fee: Decimal
    excise: Decimal
    coverage_cities: tuple[str, ...] = ()
    url: str | None = None


@dataclass(frozen=True)
class GasInput:
    consumption_m3: Decimal


# --- Fuel ---


@dataclass(frozen=True)
class FuelStation:
    """Retail fuel chain with per-litre prices including VAT."""

    id: str
    chain: str
    chain_name: str
    prices: Mapping[str, Decimal | None] = field(default_factory=dict, hash=False)
    has_loyalty: bool = False
    loyalty_discount: Decimal = Decimal("0")
    station_count: int = 0
    url: str | None = None

    def __post_init__(self) -> None:
        # read-only copy of the caller's mapping
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def price_for(self, fuel_type: str) -> Decimal | None:
        return self.prices.get(fuel_type)


@dataclass(frozen=True)
class FuelInput:
    fuel_type: FuelType
    monthly_liters: Decimal


# --- Loans ---


@dataclass(frozen=True)
class LoanProduct:
    id: str
    bank: str
    bank_name: str
    product_name: str
    loan_type: LoanType
    interest_rate: Decimal
    apr: Decimal
    min_amount: Decimal
    max_amount: Decimal
    min_term_months: int
    max_term_months: int
    url: str | None = None

    def accepts(self, amount: Decimal, term_months: int) -> bool:
        return (
            self.min_amount <= amount <= self.max_amount
            and self.min_term_months <= term_months <= self.max_term_months
        )


@dataclass(frozen=True)
class LoanInput:
    amount: Decimal
    term_months: int
    loan_type: LoanType = "consumer"


# --- Telecom ---


@dataclass(frozen=True)
class TelecomPlan:
    id: str
    operator: str
    operator_name: str
    plan_name: str
    plan_type: Literal["prepaid", "postpaid"]
    monthly_fee: Decimal
    data_gb: Decimal
    # None means unlimited
    minutes: int | None = None
    sms: int | None = None
    contract_months: int | None = None
    extras: tuple[str, ...] = ()


@dataclass(frozen=True)
class InternetPlan:
    id: str
    provider: str
    provider_name: str
    plan_name: str
    speed_mbps: int
    monthly_fee: Decimal
    technology: str
