"""Rounding, VAT and currency helpers shared by the cost formulas."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from tariff_checker.config import SETTINGS

CENT = Decimal("0.01")
ZERO = Decimal("0")

Number = Decimal | int | float | str


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary amount")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # go through repr so 0.1 stays 0.1
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    raise TypeError(f"Unsupported numeric type: {type(value)!r}")


def round2(value: Number) -> Decimal:
    """Round half away from zero to whole cents."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def vat_of(amount: Number, vat_rate: Decimal | None = None) -> Decimal:
    rate = SETTINGS.vat_rate if vat_rate is None else vat_rate
    return to_decimal(amount) * rate


def add_vat(amount: Number, vat_rate: Decimal | None = None) -> Decimal:
    rate = SETTINGS.vat_rate if vat_rate is None else vat_rate
    return to_decimal(amount) * (1 + rate)


def remove_vat(amount_with_vat: Number, vat_rate: Decimal | None = None) -> Decimal:
    rate = SETTINGS.vat_rate if vat_rate is None else vat_rate
    return to_decimal(amount_with_vat) / (1 + rate)


def eur_to_bgn(amount_eur: Number, rate: Decimal | None = None) -> Decimal:
    peg = SETTINGS.eur_to_bgn if rate is None else rate
    return to_decimal(amount_eur) * peg


def bgn_to_eur(amount_bgn: Number, rate: Decimal | None = None) -> Decimal:
    peg = SETTINGS.eur_to_bgn if rate is None else rate
    return to_decimal(amount_bgn) / peg


def format_number(value: Number, decimals: int = 2) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    return str(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: Number) -> str:
    return f"{format_number(amount)} €"
