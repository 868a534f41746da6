"""Rate-table parsers producing immutable rate records.

Tables use one row per provider/product and snake_case headers. Electricity
fee components come from ``component:<id>`` columns; coverage lists are
``|``-separated.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

import pandas as pd

from tariff_checker.domain.models import (
    FUEL_TYPES,
    LOAN_TYPES,
    BillComponent,
    ElectricityProvider,
    FuelStation,
    GasProvider,
    LoanProduct,
    WaterProvider,
)
from tariff_checker.errors import RateTableError
from tariff_checker.infrastructure.parsing.utils import (
    optional_text,
    parse_bool,
    parse_decimal,
    parse_int,
    parse_list,
    parse_optional_decimal,
    require_columns,
)

logger = logging.getLogger(__name__)

COMPONENT_PREFIX = "component:"
COMPONENT_NAMES = {
    "energy": "Електрическа енергия",
    "transmission": "Пренос (ЕСО)",
    "distribution": "Разпределение",
    "distribution_access": "Достъп до мрежата",
    "public_obligation": "Задължение към обществото",
    "excise": "Акциз",
}

ELECTRICITY_COLUMNS = {"id", "name", "region", "day_rate", "night_rate", "single_rate"}
WATER_COLUMNS = {"id", "name", "city", "supply_rate", "sewerage_rate", "treatment_rate"}
GAS_COLUMNS = {"id", "name", "region", "price_per_m3", "distribution_fee", "transmission_fee", "excise"}
FUEL_COLUMNS = {"id", "chain", "chain_name"}
LOAN_COLUMNS = {
    "id",
    "bank",
    "bank_name",
    "product_name",
    "loan_type",
    "interest_rate",
    "apr",
    "min_amount",
    "max_amount",
    "min_term_months",
    "max_term_months",
}


def _rows(df: pd.DataFrame):
    # row numbers as a spreadsheet user sees them, header on row 1
    for idx, (_, row) in enumerate(df.iterrows(), start=2):
        if not str(row.get("id", "")).strip():
            continue
        yield idx, row


def electricity_to_records(df: pd.DataFrame) -> Sequence[ElectricityProvider]:
    require_columns(df, ELECTRICITY_COLUMNS, "Electricity")
    component_columns = [c for c in df.columns if c.startswith(COMPONENT_PREFIX)]
    records: list[ElectricityProvider] = []
    for row_no, row in _rows(df):
        breakdown = []
        for column in component_columns:
            rate = parse_optional_decimal(row[column], column, row_no)
            if rate is None:
                continue
            component_id = column[len(COMPONENT_PREFIX):].strip()
            breakdown.append(
                BillComponent(
                    id=component_id,
                    name=COMPONENT_NAMES.get(component_id, component_id),
                    rate=rate,
                    explanation_key=component_id,
                )
            )
        records.append(
            ElectricityProvider(
                id=row["id"],
                name=row["name"],
                region=row["region"],
                day_rate=parse_decimal(row["day_rate"], "day_rate", row_no),
                night_rate=parse_decimal(row["night_rate"], "night_rate", row_no),
                single_rate=parse_decimal(row["single_rate"], "single_rate", row_no),
                breakdown=tuple(breakdown),
                coverage_areas=parse_list(row.get("coverage_areas")),
                url=optional_text(row.get("url")),
            )
        )
    logger.debug("Parsed %d electricity providers", len(records))
    return records


def water_to_records(df: pd.DataFrame) -> Sequence[WaterProvider]:
    require_columns(df, WATER_COLUMNS, "Water")
    records = [
        WaterProvider(
            id=row["id"],
            name=row["name"],
            city=row["city"],
            supply_rate=parse_decimal(row["supply_rate"], "supply_rate", row_no),
            sewerage_rate=parse_decimal(row["sewerage_rate"], "sewerage_rate", row_no),
            treatment_rate=parse_decimal(row["treatment_rate"], "treatment_rate", row_no),
            url=optional_text(row.get("url")),
        )
        for row_no, row in _rows(df)
    ]
    logger.debug("Parsed %d water providers", len(records))
    return records


def gas_to_records(df: pd.DataFrame) -> Sequence[GasProvider]:
    require_columns(df, GAS_COLUMNS, "Gas")
    records = [
        GasProvider(
            id=row["id"],
            name=row["name"],
            region=row["region"],
            price_per_m3=parse_decimal(row["price_per_m3"], "price_per_m3", row_no),
            distribution_fee=parse_decimal(row["distribution_fee"], "distribution_fee", row_no),
            transmission_fee=parse_decimal(row["transmission_fee"], "transmission_fee", row_no),
            excise=parse_decimal(row["excise"], "excise", row_no),
            coverage_cities=parse_list(row.get("coverage_cities")),
            url=optional_text(row.get("url")),
        )
        for row_no, row in _rows(df)
    ]
    logger.debug("Parsed %d gas providers", len(records))
    return records


def fuel_to_records(df: pd.DataFrame) -> Sequence[FuelStation]:
    require_columns(df, FUEL_COLUMNS, "Fuel")
    price_columns = [fuel for fuel in FUEL_TYPES if fuel in df.columns]
    if not price_columns:
        raise RateTableError(f"Fuel table needs at least one price column out of: {', '.join(FUEL_TYPES)}")
    records: list[FuelStation] = []
    for row_no, row in _rows(df):
        # a blank price cell means the chain does not sell that fuel
        prices = {fuel: parse_optional_decimal(row[fuel], fuel, row_no) for fuel in price_columns}
        discount = parse_optional_decimal(row.get("loyalty_discount"), "loyalty_discount", row_no)
        count = optional_text(row.get("station_count"))
        records.append(
            FuelStation(
                id=row["id"],
                chain=row["chain"],
                chain_name=row["chain_name"],
                prices=prices,
                has_loyalty=parse_bool(row.get("has_loyalty", "")),
                loyalty_discount=discount if discount is not None else Decimal("0"),
                station_count=parse_int(count, "station_count", row_no) if count else 0,
                url=optional_text(row.get("url")),
            )
        )
    logger.debug("Parsed %d fuel stations", len(records))
    return records


def loans_to_records(df: pd.DataFrame) -> Sequence[LoanProduct]:
    require_columns(df, LOAN_COLUMNS, "Loan")
    records: list[LoanProduct] = []
    for row_no, row in _rows(df):
        loan_type = row["loan_type"].lower()
        if loan_type not in LOAN_TYPES:
            raise RateTableError(f"Unknown loan_type {row['loan_type']!r} on row {row_no}")
        product = LoanProduct(
            id=row["id"],
            bank=row["bank"],
            bank_name=row["bank_name"],
            product_name=row["product_name"],
            loan_type=loan_type,
            interest_rate=parse_decimal(row["interest_rate"], "interest_rate", row_no),
            apr=parse_decimal(row["apr"], "apr", row_no),
            min_amount=parse_decimal(row["min_amount"], "min_amount", row_no),
            max_amount=parse_decimal(row["max_amount"], "max_amount", row_no),
            min_term_months=parse_int(row["min_term_months"], "min_term_months", row_no),
            max_term_months=parse_int(row["max_term_months"], "max_term_months", row_no),
            url=optional_text(row.get("url")),
        )
        if product.min_amount > product.max_amount or product.min_term_months > product.max_term_months:
            raise RateTableError(f"Loan {product.id!r} on row {row_no} has an empty amount or term range")
        records.append(product)
    logger.debug("Parsed %d loan products", len(records))
    return records
