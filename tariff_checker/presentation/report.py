"""Row and document renderers for ranked lists and payroll breakdowns."""
from __future__ import annotations

import csv
import html
import io
from dataclasses import fields
from decimal import Decimal
from typing import Any, Sequence

from tariff_checker.domain.models import InternetPlan, TelecomPlan
from tariff_checker.domain.money import format_number
from tariff_checker.domain.results import (
    ElectricityResult,
    FuelResult,
    GasResult,
    LoanResult,
    PayrollBreakdown,
    WaterResult,
)


def _money(value: Decimal) -> str:
    return format_number(value, 2)


def result_to_row(item: Any) -> dict[str, str]:
    if isinstance(item, ElectricityResult):
        row = {
            "provider": item.provider.name,
            "region": item.provider.region,
            "subtotal": _money(item.subtotal),
            "vat": _money(item.vat),
            "total_with_vat": _money(item.total_with_vat),
        }
        for part in item.breakdown:
            row[part.component.id] = _money(part.amount)
    elif isinstance(item, WaterResult):
        row = {
            "provider": item.provider.name,
            "city": item.provider.city,
            "supply": _money(item.supply_amount),
            "sewerage": _money(item.sewerage_amount),
            "treatment": _money(item.treatment_amount),
            "subtotal": _money(item.subtotal),
            "vat": _money(item.vat),
            "total_with_vat": _money(item.total_with_vat),
        }
    elif isinstance(item, GasResult):
        row = {
            "provider": item.provider.name,
            "region": item.provider.region,
            "gas": _money(item.gas_amount),
            "distribution": _money(item.distribution_amount),
            "transmission": _money(item.transmission_amount),
            "excise": _money(item.excise_amount),
            "subtotal": _money(item.subtotal),
            "vat": _money(item.vat),
            "total_with_vat": _money(item.total_with_vat),
        }
    elif isinstance(item, FuelResult):
        row = {
            "station": item.station.chain_name,
            "fuel_type": item.fuel_type,
            "price_per_liter": format_number(item.price_per_liter, 3),
            "monthly_cost": _money(item.monthly_cost),
            "yearly_cost": _money(item.yearly_cost),
        }
    elif isinstance(item, LoanResult):
        row = {
            "bank": item.product.bank_name,
            "product": item.product.product_name,
            "interest_rate": format_number(item.product.interest_rate, 2),
            "apr": format_number(item.product.apr, 2),
            "monthly_payment": _money(item.monthly_payment),
            "total_payment": _money(item.total_payment),
            "total_interest": _money(item.total_interest),
        }
    else:
        raise TypeError(f"Unsupported result type: {type(item)!r}")
    row["difference_from_cheapest"] = _money(item.difference_from_cheapest)
    row["is_cheapest"] = "yes" if item.is_cheapest else ""
    return row


def results_to_rows(results: Sequence[Any]) -> list[dict[str, str]]:
    return [result_to_row(item) for item in results]


def _limit(value: int | None) -> str:
    return "unlimited" if value is None else str(value)


def _speed(mbps: int) -> str:
    if mbps >= 1000:
        return f"{mbps / 1000:g} Gbps"
    return f"{mbps} Mbps"


def plan_to_row(plan: TelecomPlan | InternetPlan) -> dict[str, str]:
    if isinstance(plan, TelecomPlan):
        return {
            "operator": plan.operator_name,
            "plan": plan.plan_name,
            "type": plan.plan_type,
            "monthly_fee": _money(plan.monthly_fee),
            "data_gb": f"{plan.data_gb:f}",
            "minutes": _limit(plan.minutes),
            "sms": _limit(plan.sms),
            "contract_months": "" if plan.contract_months is None else str(plan.contract_months),
            "extras": ", ".join(plan.extras),
        }
    if isinstance(plan, InternetPlan):
        return {
            "provider": plan.provider_name,
            "plan": plan.plan_name,
            "speed": _speed(plan.speed_mbps),
            "monthly_fee": _money(plan.monthly_fee),
            "technology": plan.technology,
        }
    raise TypeError(f"Unsupported plan type: {type(plan)!r}")


def plans_to_rows(plans: Sequence[TelecomPlan | InternetPlan]) -> list[dict[str, str]]:
    return [plan_to_row(plan) for plan in plans]


def breakdown_to_rows(breakdown: PayrollBreakdown) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in fields(breakdown):
        value = getattr(breakdown, item.name)
        if item.name in ("effective_tax_rate", "net_to_gross_ratio"):
            shown = f"{format_number(value * 100, 2)} %"
        else:
            shown = _money(value)
        rows.append({"item": item.name, "value": shown})
    return rows


def row_columns(rows: Sequence[dict[str, str]]) -> list[str]:
    """Union of row keys in first-seen order.

    Electricity rows only carry the fee components their provider lists.
    """
    columns: list[str] = []
    for row in rows:
        columns.extend(key for key in row if key not in columns)
    return columns


def render_csv(rows: Sequence[dict[str, str]]) -> bytes:
    buffer = io.StringIO()
    if rows:
        writer = csv.DictWriter(buffer, fieldnames=row_columns(rows), restval="")
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(rows: Sequence[dict[str, str]], empty_message: str = "No matching offer.") -> str:
    if not rows:
        return f"<p>{html.escape(empty_message)}</p>"
    columns = row_columns(rows)
    header = "".join(f"<th>{html.escape(col)}</th>" for col in columns)
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{html.escape(row.get(col, ''))}</td>" for col in columns) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"
