"""Domain cost formulas and the comparators built on them.

Each ``compute_*`` function prices one rate record for one input; each
``compare_*`` function prices a whole table and ranks it. All of them are
pure: no I/O, no shared state.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .models import (
    ElectricityInput,
    ElectricityProvider,
    FuelInput,
    FuelStation,
    GasInput,
    GasProvider,
    LoanInput,
    LoanProduct,
    WaterInput,
    WaterProvider,
)
from .money import add_vat, remove_vat, round2, to_decimal, vat_of
from .ranking import rank_results
from .results import (
    ComponentAmount,
    ElectricityResult,
    FuelResult,
    GasResult,
    LoanResult,
    WaterResult,
)

MONTHS_PER_YEAR = 12


# --- Electricity ---


def compute_electricity_cost(
    data: ElectricityInput,
    provider: ElectricityProvider,
    vat_rate: Decimal | None = None,
) -> ElectricityResult:
    day_kwh = to_decimal(data.day_kwh)
    night_kwh = to_decimal(data.night_kwh)
    total_kwh = day_kwh + night_kwh

    if data.meter_type == "dual":
        raw_total = day_kwh * provider.day_rate + night_kwh * provider.night_rate
    elif data.meter_type == "single":
        raw_total = total_kwh * provider.single_rate
    else:
        raise ValueError(f"Unknown meter type: {data.meter_type!r}")

    total_with_vat = round2(raw_total)
    subtotal = round2(remove_vat(raw_total, vat_rate))
    breakdown = tuple(
        ComponentAmount(component=component, amount=add_vat(total_kwh * component.rate, vat_rate))
        for component in provider.breakdown
    )
    return ElectricityResult(
        provider=provider,
        total_with_vat=total_with_vat,
        subtotal=subtotal,
        vat=total_with_vat - subtotal,
        breakdown=breakdown,
    )


def compare_electricity(
    data: ElectricityInput,
    providers: Iterable[ElectricityProvider],
    vat_rate: Decimal | None = None,
) -> tuple[ElectricityResult, ...]:
    results = [compute_electricity_cost(data, provider, vat_rate) for provider in providers]
    return rank_results(results, key=lambda r: r.total_with_vat)


# --- Water ---


def compute_water_cost(
    data: WaterInput,
    provider: WaterProvider,
    vat_rate: Decimal | None = None,
) -> WaterResult:
    m3 = to_decimal(data.consumption_m3)
    supply = m3 * provider.supply_rate
    sewerage = m3 * provider.sewerage_rate
    treatment = m3 * provider.treatment_rate
    subtotal = supply + sewerage + treatment
    # every field is rounded on its own from the unrounded amounts
    return WaterResult(
        provider=provider,
        supply_amount=round2(supply),
        sewerage_amount=round2(sewerage),
        treatment_amount=round2(treatment),
        subtotal=round2(subtotal),
        vat=round2(vat_of(subtotal, vat_rate)),
        total_with_vat=round2(add_vat(subtotal, vat_rate)),
    )


def compare_water(
    data: WaterInput,
    providers: Iterable[WaterProvider],
    vat_rate: Decimal | None = None,
) -> tuple[WaterResult, ...]:
    results = [compute_water_cost(data, provider, vat_rate) for provider in providers]
    return rank_results(results, key=lambda r: r.total_with_vat)


# --- Gas ---


def compute_gas_cost(
    data: GasInput,
    provider: GasProvider,
    vat_rate: Decimal | None = None,
) -> GasResult:
    m3 = to_decimal(data.consumption_m3)
    gas = m3 * provider.price_per_m3
    distribution = m3 * provider.distribution_fee
    transmission = m3 * provider.transmission_fee
    excise = m3 * provider.excise
    subtotal = gas + distribution + transmission + excise
    return GasResult(
        provider=provider,
        gas_amount=round2(gas),
        distribution_amount=round2(distribution),
        transmission_amount=round2(transmission),
        excise_amount=round2(excise),
        subtotal=round2(subtotal),
        vat=round2(vat_of(subtotal, vat_rate)),
        total_with_vat=round2(add_vat(subtotal, vat_rate)),
    )


def compare_gas(
    data: GasInput,
    providers: Iterable[GasProvider],
    vat_rate: Decimal | None = None,
) -> tuple[GasResult, ...]:
    results = [compute_gas_cost(data, provider, vat_rate) for provider in providers]
    return rank_results(results, key=lambda r: r.total_with_vat)


# --- Fuel ---


def compute_fuel_cost(data: FuelInput, station: FuelStation) -> FuelResult | None:
    """Return ``None`` when the station does not sell the requested fuel."""
    price = station.price_for(data.fuel_type)
    if price is None:
        return None
    monthly_cost = price * to_decimal(data.monthly_liters)
    return FuelResult(
        station=station,
        fuel_type=data.fuel_type,
        price_per_liter=price,
        monthly_cost=monthly_cost,
        yearly_cost=monthly_cost * MONTHS_PER_YEAR,
    )


def compare_fuel(data: FuelInput, stations: Iterable[FuelStation]) -> tuple[FuelResult, ...]:
    results = [result for result in (compute_fuel_cost(data, s) for s in stations) if result is not None]
    return rank_results(results, key=lambda r: r.price_per_liter, cheapest_key=lambda r: r.monthly_cost)


# --- Loans ---


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_months: int) -> Decimal:
    """Annuity payment for ``annual_rate`` given in percent."""
    if term_months <= 0:
        raise ValueError(f"term_months must be positive (got {term_months})")
    monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR
    if monthly_rate == 0:
        return principal / term_months
    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


def eligible_loan_products(data: LoanInput, products: Iterable[LoanProduct]) -> list[LoanProduct]:
    amount = to_decimal(data.amount)
    return [
        product
        for product in products
        if product.loan_type == data.loan_type and product.accepts(amount, data.term_months)
    ]


def compute_loan_cost(data: LoanInput, product: LoanProduct) -> LoanResult:
    principal = to_decimal(data.amount)
    payment = monthly_payment(principal, product.interest_rate, data.term_months)
    total_payment = payment * data.term_months
    return LoanResult(
        product=product,
        monthly_payment=round2(payment),
        total_payment=round2(total_payment),
        total_interest=round2(total_payment - principal),
    )


def compare_loans(data: LoanInput, products: Iterable[LoanProduct]) -> tuple[LoanResult, ...]:
    """Order by monthly payment; the cheapest badge goes to the lowest total interest."""
    results = [compute_loan_cost(data, product) for product in eligible_loan_products(data, products)]
    return rank_results(results, key=lambda r: r.monthly_payment, cheapest_key=lambda r: r.total_interest)
