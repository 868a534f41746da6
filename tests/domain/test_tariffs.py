from decimal import Decimal

import pytest

from tariff_checker.domain.models import (
    ElectricityInput,
    ElectricityProvider,
    FuelInput,
    FuelStation,
    GasInput,
    LoanInput,
    LoanProduct,
    WaterInput,
    WaterProvider,
)
from tariff_checker.domain.money import round2
from tariff_checker.domain.tariffs import (
    compare_electricity,
    compare_fuel,
    compare_gas,
    compare_loans,
    compare_water,
    compute_electricity_cost,
    compute_water_cost,
    monthly_payment,
)
from tariff_checker.infrastructure.reference_data import (
    ELECTRICITY_PROVIDERS,
    FUEL_STATIONS,
    GAS_PROVIDERS,
    WATER_PROVIDERS,
)

D = Decimal


def make_electricity_provider(provider_id: str, day: str, night: str, single: str | None = None) -> ElectricityProvider:
    return ElectricityProvider(
        id=provider_id,
        name=provider_id.upper(),
        region="test",
        day_rate=D(day),
        night_rate=D(night),
        single_rate=D(single or day),
    )


def make_water_provider(provider_id: str, supply: str, sewerage: str, treatment: str) -> WaterProvider:
    return WaterProvider(provider_id, provider_id.upper(), "test", D(supply), D(sewerage), D(treatment))


def make_loan(product_id: str, rate: str, min_term: int = 6, max_term: int = 120, loan_type: str = "consumer") -> LoanProduct:
    return LoanProduct(
        id=product_id,
        bank=product_id,
        bank_name=product_id.upper(),
        product_name="Test loan",
        loan_type=loan_type,
        interest_rate=D(rate),
        apr=D(rate),
        min_amount=D("1000"),
        max_amount=D("50000"),
        min_term_months=min_term,
        max_term_months=max_term,
    )


def assert_ranked(results, key):
    assert sum(r.is_cheapest for r in results) == 1
    assert results[0].is_cheapest
    assert results[0].difference_from_cheapest == 0
    keys = [key(r) for r in results]
    assert keys == sorted(keys)
    assert all(r.difference_from_cheapest >= 0 for r in results)


# --- Electricity ---


def test_electricity_dual_rate_ranking():
    providers = [
        make_electricity_provider("c", "0.2772", "0.1512"),
        make_electricity_provider("a", "0.2657", "0.121"),
        make_electricity_provider("b", "0.2719", "0.1472"),
    ]

    results = compare_electricity(ElectricityInput(D("200"), D("100"), "dual"), providers)

    assert [r.provider.id for r in results] == ["a", "b", "c"]
    assert [r.total_with_vat for r in results] == [D("65.24"), D("69.10"), D("70.56")]
    assert [r.is_cheapest for r in results] == [True, False, False]
    assert [r.difference_from_cheapest for r in results] == [D("0"), D("3.86"), D("5.32")]


def test_electricity_single_rate_uses_total_consumption():
    provider = make_electricity_provider("a", "0.2657", "0.121", single="0.25")

    result = compute_electricity_cost(ElectricityInput(D("200"), D("100"), "single"), provider)

    assert result.total_with_vat == D("75.00")


def test_electricity_subtotal_plus_vat_is_total():
    for result in compare_electricity(ElectricityInput(D("317"), D("143")), ELECTRICITY_PROVIDERS):
        assert result.subtotal + result.vat == result.total_with_vat
        assert result.subtotal < result.total_with_vat


def test_electricity_breakdown_is_grossed_up_and_informational():
    provider = ELECTRICITY_PROVIDERS[0]

    result = compute_electricity_cost(ElectricityInput(D("200"), D("100")), provider)

    energy = next(part for part in result.breakdown if part.component.id == "energy")
    assert energy.amount == D("300") * D("0.0563") * D("1.2")
    assert [part.component.id for part in result.breakdown] == [c.id for c in provider.breakdown]


def test_electricity_unknown_meter_type():
    with pytest.raises(ValueError):
        compute_electricity_cost(ElectricityInput(D("1"), D("1"), "triple"), ELECTRICITY_PROVIDERS[0])


# --- Water ---


def test_water_breakdown():
    result = compute_water_cost(WaterInput(D("10")), make_water_provider("w", "1.0", "0.5", "0.25"))

    assert result.supply_amount == D("10.00")
    assert result.sewerage_amount == D("5.00")
    assert result.treatment_amount == D("2.50")
    assert result.subtotal == D("17.50")
    assert result.vat == D("3.50")
    assert result.total_with_vat == D("21.00")


def test_water_rounds_each_field_independently():
    result = compute_water_cost(WaterInput(D("1")), make_water_provider("w", "0.005", "0.005", "0"))

    assert result.supply_amount == D("0.01")
    assert result.sewerage_amount == D("0.01")
    # subtotal comes from unrounded amounts, not from the rounded fields
    assert result.subtotal == D("0.01")
    assert result.vat == D("0.00")
    assert result.total_with_vat == D("0.01")


@pytest.mark.parametrize("m3", ["0", "1", "7.3", "12", "55.55"])
def test_water_vat_additivity(m3):
    results = compare_water(WaterInput(D(m3)), WATER_PROVIDERS)

    assert_ranked(results, key=lambda r: r.total_with_vat)
    for result in results:
        assert abs(result.subtotal + result.vat - result.total_with_vat) <= D("0.01")


# --- Gas ---


def test_gas_reference_ranking():
    results = compare_gas(GasInput(D("100")), GAS_PROVIDERS)

    assert [r.provider.id for r in results] == ["overgas", "citygas", "sevliegas", "chernomor", "rilgas"]
    cheapest = results[0]
    assert cheapest.gas_amount == D("50.16")
    assert cheapest.distribution_amount == D("9.41")
    assert cheapest.transmission_amount == D("2.15")
    assert cheapest.excise_amount == D("0.35")
    assert cheapest.subtotal == D("62.07")
    assert cheapest.vat == D("12.41")
    assert cheapest.total_with_vat == D("74.48")
    assert [r.difference_from_cheapest for r in results] == [D("0"), D("1.60"), D("2.52"), D("3.20"), D("4.30")]


@pytest.mark.parametrize("m3", ["0", "3", "49.9", "1234"])
def test_gas_vat_additivity(m3):
    results = compare_gas(GasInput(D(m3)), GAS_PROVIDERS)

    assert_ranked(results, key=lambda r: r.total_with_vat)
    for result in results:
        assert abs(result.subtotal + result.vat - result.total_with_vat) <= D("0.01")


# --- Fuel ---


def test_fuel_station_without_fuel_type_is_excluded():
    results = compare_fuel(FuelInput("A98", D("100")), FUEL_STATIONS)

    assert "petrol" not in {r.station.id for r in results}
    assert [r.station.id for r in results] == ["gazprom", "lukoil", "eko", "omv", "shell"]
    assert [r.difference_from_cheapest for r in results] == [D("0"), D("1"), D("2"), D("3"), D("4")]
    assert results[0].monthly_cost == D("137")
    assert results[0].yearly_cost == D("1644")


def test_fuel_zero_price_is_not_absence():
    stations = [FUEL_STATIONS[0], FuelStation("free", "free", "Free", {"A95": D("0")})]

    results = compare_fuel(FuelInput("A95", D("40")), stations)

    assert results[0].station.id == "free"
    assert results[0].monthly_cost == 0


def test_fuel_station_prices_are_read_only():
    prices = {"A95": D("1.30")}
    station = FuelStation("x", "x", "X", prices)

    with pytest.raises(TypeError):
        station.prices["A95"] = D("0")
    with pytest.raises(TypeError):
        FUEL_STATIONS[0].prices["A95"] = D("0")
    prices["A95"] = D("0")

    assert station.price_for("A95") == D("1.30")
    assert FUEL_STATIONS[0].price_for("A95") == D("1.30")
    assert hash(station) == hash(FuelStation("x", "x", "X", {"A95": D("1.30")}))


def test_fuel_no_station_sells_type():
    stations = [s for s in FUEL_STATIONS if s.id == "petrol"]

    assert compare_fuel(FuelInput("A98", D("50")), stations) == ()


# --- Loans ---


def test_monthly_payment_formula():
    assert round(monthly_payment(D("10000"), D("8"), 36), 2) == D("313.36")
    assert monthly_payment(D("1200"), D("0"), 12) == D("100")


def test_loans_sorted_by_payment_with_interest_deltas():
    products = [make_loan("nine", "9"), make_loan("eight", "8")]

    results = compare_loans(LoanInput(D("10000"), 36), products)

    assert [r.product.id for r in results] == ["eight", "nine"]
    assert results[0].is_cheapest
    assert results[0].monthly_payment == D("313.36")
    assert results[0].total_payment == round2(monthly_payment(D("10000"), D("8"), 36) * 36)
    assert results[0].total_interest == results[0].total_payment - D("10000")
    assert results[1].difference_from_cheapest == results[1].total_interest - results[0].total_interest


def test_loans_cheapest_flag_follows_total_interest():
    """Same principal and term, so payment and interest orders agree here.

    A diverging pair is covered on rank_results in test_ranking.py.
    """
    results = compare_loans(LoanInput(D("10000"), 36), [make_loan("nine", "9"), make_loan("eight", "8")])

    by_payment = [r.monthly_payment for r in results]
    assert by_payment == sorted(by_payment)
    cheapest = next(r for r in results if r.is_cheapest)
    assert cheapest.total_interest == min(r.total_interest for r in results)


def test_loans_out_of_range_products_are_dropped():
    products = [
        make_loan("short_only", "5", min_term=3, max_term=24),
        make_loan("mortgage", "2", loan_type="mortgage"),
        make_loan("ok", "9"),
    ]

    results = compare_loans(LoanInput(D("10000"), 36), products)
    assert [r.product.id for r in results] == ["ok"]

    too_big = compare_loans(LoanInput(D("60000"), 36), products)
    assert too_big == ()


def test_zero_rate_loan_has_no_interest():
    results = compare_loans(LoanInput(D("1200"), 12), [make_loan("free", "0")])

    assert results[0].monthly_payment == D("100.00")
    assert results[0].total_interest == D("0.00")
