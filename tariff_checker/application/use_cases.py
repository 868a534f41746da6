"""Application services validating inputs and orchestrating the comparators."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, localcontext

from tariff_checker.config import SETTINGS, PayrollRates
from tariff_checker.domain.models import (
    FUEL_TYPES,
    LOAN_TYPES,
    ElectricityInput,
    FuelInput,
    GasInput,
    InternetPlan,
    LoanInput,
    TelecomPlan,
    WaterInput,
)
from tariff_checker.domain.money import to_decimal
from tariff_checker.domain.payroll import gross_from_net, net_from_gross
from tariff_checker.domain.repositories import (
    ElectricityRateRepository,
    FuelPriceRepository,
    GasRateRepository,
    InternetPlanRepository,
    LoanProductRepository,
    MobilePlanRepository,
    WaterRateRepository,
)
from tariff_checker.domain.results import PayrollBreakdown
from tariff_checker.domain.telecom import filter_internet_plans, filter_mobile_plans
from tariff_checker.domain.tariffs import (
    compare_electricity,
    compare_fuel,
    compare_gas,
    compare_loans,
    compare_water,
)
from tariff_checker.errors import InvalidInputError

from .dto import ComparisonResponse

logger = logging.getLogger(__name__)


def ensure_quantity(field: str, value: object) -> Decimal:
    """Return ``value`` as a Decimal, rejecting negative, NaN and infinite input."""
    try:
        number = to_decimal(value)  # type: ignore[arg-type]
    except (TypeError, InvalidOperation):
        raise InvalidInputError(field, value) from None
    if not number.is_finite() or number < 0:
        raise InvalidInputError(field, value)
    return number


def ensure_term(field: str, value: object) -> int:
    number = ensure_quantity(field, value)
    if number == 0 or number != number.to_integral_value():
        raise InvalidInputError(field, value)
    return int(number)


def ensure_choice(field: str, value: object, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise InvalidInputError(field, value)
    return value  # type: ignore[return-value]


@dataclass(slots=True)
class ComparisonContext:
    electricity_repository: ElectricityRateRepository
    water_repository: WaterRateRepository
    gas_repository: GasRateRepository
    fuel_repository: FuelPriceRepository
    loan_repository: LoanProductRepository
    vat_rate: Decimal = SETTINGS.vat_rate


class CompareTariffsUseCase:
    """Comparisons run under the package decimal context, whatever the caller's is."""

    def __init__(self, context: ComparisonContext) -> None:
        self._context = context

    def electricity(self, data: ElectricityInput) -> ComparisonResponse:
        data = replace(
            data,
            day_kwh=ensure_quantity("day_kwh", data.day_kwh),
            night_kwh=ensure_quantity("night_kwh", data.night_kwh),
            meter_type=ensure_choice("meter_type", data.meter_type, ("single", "dual")),
        )
        providers = self._context.electricity_repository.list_records()
        with localcontext(SETTINGS.decimal_context):
            results = compare_electricity(data, providers, self._context.vat_rate)
        return self._respond("electricity", data, results)

    def water(self, data: WaterInput) -> ComparisonResponse:
        data = replace(data, consumption_m3=ensure_quantity("consumption_m3", data.consumption_m3))
        providers = self._context.water_repository.list_records()
        with localcontext(SETTINGS.decimal_context):
            results = compare_water(data, providers, self._context.vat_rate)
        return self._respond("water", data, results)

    def gas(self, data: GasInput) -> ComparisonResponse:
        data = replace(data, consumption_m3=ensure_quantity("consumption_m3", data.consumption_m3))
        providers = self._context.gas_repository.list_records()
        with localcontext(SETTINGS.decimal_context):
            results = compare_gas(data, providers, self._context.vat_rate)
        return self._respond("gas", data, results)

    def fuel(self, data: FuelInput) -> ComparisonResponse:
        data = replace(
            data,
            fuel_type=ensure_choice("fuel_type", data.fuel_type, FUEL_TYPES),
            monthly_liters=ensure_quantity("monthly_liters", data.monthly_liters),
        )
        stations = self._context.fuel_repository.list_records()
        with localcontext(SETTINGS.decimal_context):
            results = compare_fuel(data, stations)
        return self._respond("fuel", data, results)

    def loans(self, data: LoanInput) -> ComparisonResponse:
        data = replace(
            data,
            amount=ensure_quantity("amount", data.amount),
            term_months=ensure_term("term_months", data.term_months),
            loan_type=ensure_choice("loan_type", data.loan_type, LOAN_TYPES),
        )
        products = self._context.loan_repository.list_records()
        with localcontext(SETTINGS.decimal_context):
            results = compare_loans(data, products)
        return self._respond("loans", data, results)

    @staticmethod
    def _respond(domain: str, data: object, results: tuple) -> ComparisonResponse:
        if results:
            logger.info("%s: ranked %d offers for %s", domain, len(results), data)
        else:
            logger.info("%s: no eligible offer for %s", domain, data)
        return ComparisonResponse(domain=domain, request=data, results=results)


PLAN_TYPES: tuple[str, ...] = ("all", "prepaid", "postpaid")


class BrowsePlansUseCase:
    """Filters the mobile and fixed internet plan tables, cheapest fee first."""

    def __init__(self, mobile_repository: MobilePlanRepository, internet_repository: InternetPlanRepository) -> None:
        self._mobile_repository = mobile_repository
        self._internet_repository = internet_repository

    def mobile(
        self,
        plan_type: str = "all",
        min_data_gb: object = None,
        operator: str | None = None,
    ) -> list[TelecomPlan]:
        plan_type = ensure_choice("plan_type", plan_type, PLAN_TYPES)
        min_data = None if min_data_gb is None else ensure_quantity("min_data_gb", min_data_gb)
        plans = filter_mobile_plans(self._mobile_repository.list_records(), plan_type, min_data, operator)
        logger.info("mobile: %d plans for type=%s min_data_gb=%s operator=%s", len(plans), plan_type, min_data, operator)
        return plans

    def internet(self, min_speed_mbps: object = None, provider: str | None = None) -> list[InternetPlan]:
        min_speed = None if min_speed_mbps is None else ensure_quantity("min_speed_mbps", min_speed_mbps)
        plans = filter_internet_plans(self._internet_repository.list_records(), min_speed, provider)
        logger.info("internet: %d plans for min_speed_mbps=%s provider=%s", len(plans), min_speed, provider)
        return plans


class ConvertSalaryUseCase:
    def __init__(self, rates: PayrollRates | None = None) -> None:
        self._rates = rates or SETTINGS.payroll

    @property
    def rates(self) -> PayrollRates:
        return self._rates

    def from_gross(self, gross_eur: object) -> PayrollBreakdown:
        gross = ensure_quantity("gross_eur", gross_eur)
        with localcontext(SETTINGS.decimal_context):
            breakdown = net_from_gross(gross, self._rates)
        logger.debug("gross %s -> net %s", gross, breakdown.net_eur)
        return breakdown

    def from_net(self, net_eur: object) -> PayrollBreakdown:
        net = ensure_quantity("net_eur", net_eur)
        with localcontext(SETTINGS.decimal_context):
            breakdown = gross_from_net(net, self._rates)
        logger.debug("net %s -> gross %s", net, breakdown.gross_eur)
        return breakdown
