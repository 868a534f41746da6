from decimal import Decimal

import pytest

from tariff_checker.domain.money import (
    add_vat,
    bgn_to_eur,
    eur_to_bgn,
    format_currency,
    format_number,
    remove_vat,
    round2,
    to_decimal,
    vat_of,
)


def test_round2_rounds_half_up():
    assert round2(Decimal("0.005")) == Decimal("0.01")
    assert round2(Decimal("2.675")) == Decimal("2.68")
    assert round2(Decimal("1.004")) == Decimal("1.00")


def test_to_decimal_keeps_float_literal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(" 12.5 ") == Decimal("12.5")
    assert to_decimal(3) == Decimal("3")


def test_to_decimal_rejects_bool():
    with pytest.raises(TypeError):
        to_decimal(True)


def test_vat_helpers_use_twenty_percent():
    assert vat_of(Decimal("100")) == Decimal("20")
    assert add_vat(Decimal("100")) == Decimal("120")
    assert remove_vat(Decimal("120")) == Decimal("100")
    assert add_vat(Decimal("100"), vat_rate=Decimal("0.09")) == Decimal("109")


def test_fixed_peg_conversion():
    assert eur_to_bgn(Decimal("1")) == Decimal("1.95583")
    assert round2(bgn_to_eur(Decimal("3750"))) == Decimal("1917.34")
    assert round2(bgn_to_eur(eur_to_bgn(Decimal("42.42")))) == Decimal("42.42")


def test_formatting():
    assert format_currency(Decimal("12.345")) == "12.35 €"
    assert format_currency(0) == "0.00 €"
    assert format_number(Decimal("1.23456"), 3) == "1.235"
    assert format_number(Decimal("7.5"), 0) == "8"
