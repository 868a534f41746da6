"""Domain-level results for tariff comparison and payroll conversion."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .models import (
    BillComponent,
    ElectricityProvider,
    FuelStation,
    GasProvider,
    LoanProduct,
    WaterProvider,
)

ZERO = Decimal("0")


@dataclass(frozen=True)
class ComponentAmount:
    component: BillComponent
    amount: Decimal


@dataclass(frozen=True)
class ElectricityResult:
    provider: ElectricityProvider
    total_with_vat: Decimal
    subtotal: Decimal
    vat: Decimal
    # informational, does not add up to the total
    breakdown: tuple[ComponentAmount, ...] = ()
    difference_from_cheapest: Decimal = ZERO
    is_cheapest: bool = False


@dataclass(frozen=True)
class WaterResult:
    provider: WaterProvider
    supply_amount: Decimal
    sewerage_amount: Decimal
    treatment_amount: Decimal
    subtotal: Decimal
    vat: Decimal
    total_with_vat: Decimal
    difference_from_cheapest: Decimal = ZERO
    is_cheapest: bool = False


@dataclass(frozen=True)
class GasResult:
    provider: GasProvider
    gas_amount: Decimal
    distribution_amount: Decimal
    transmission_amount: Decimal
    excise_amount: Decimal
    subtotal: Decimal
    vat: Decimal
    total_with_vat: Decimal
    difference_from_cheapest: Decimal = ZERO
    is_cheapest: bool = False


@dataclass(frozen=True)
class FuelResult:
    station: FuelStation
    fuel_type: str
    price_per_liter: Decimal
    monthly_cost: Decimal
    yearly_cost: Decimal
    difference_from_cheapest: Decimal = ZERO
    is_cheapest: bool = False


@dataclass(frozen=True)
class LoanResult:
    product: LoanProduct
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    difference_from_cheapest: Decimal = ZERO
    is_cheapest: bool = False


@dataclass(frozen=True)
class PayrollBreakdown:
    """Full decomposition of one monthly salary, in EUR, unrounded."""

    gross_eur: Decimal
    insurable_income_eur: Decimal
    employee_pension_eur: Decimal
    employee_supplementary_pension_eur: Decimal
    employee_health_eur: Decimal
    total_employee_insurance_eur: Decimal
    taxable_income_eur: Decimal
    income_tax_eur: Decimal
    net_eur: Decimal
    employer_insurance_eur: Decimal
    total_cost_eur: Decimal
    effective_tax_rate: Decimal
    net_to_gross_ratio: Decimal

    @property
    def above_insurance_ceiling(self) -> bool:
        return self.gross_eur > self.insurable_income_eur
