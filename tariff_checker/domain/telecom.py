"""Filters over mobile and fixed internet plans."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .models import InternetPlan, TelecomPlan


def filter_mobile_plans(
    plans: Iterable[TelecomPlan],
    plan_type: str | None = None,
    min_data_gb: Decimal | None = None,
    operator: str | None = None,
) -> list[TelecomPlan]:
    """Plans matching every given filter, cheapest monthly fee first.

    ``None``, ``"all"`` and a zero data threshold disable a filter.
    """
    filtered = list(plans)
    if plan_type and plan_type != "all":
        filtered = [p for p in filtered if p.plan_type == plan_type]
    if min_data_gb:
        filtered = [p for p in filtered if p.data_gb >= min_data_gb]
    if operator and operator != "all":
        filtered = [p for p in filtered if p.operator == operator]
    return sorted(filtered, key=lambda p: p.monthly_fee)


def filter_internet_plans(
    plans: Iterable[InternetPlan],
    min_speed_mbps: Decimal | int | None = None,
    provider: str | None = None,
) -> list[InternetPlan]:
    filtered = list(plans)
    if min_speed_mbps:
        filtered = [p for p in filtered if p.speed_mbps >= min_speed_mbps]
    if provider and provider != "all":
        filtered = [p for p in filtered if p.provider == provider]
    return sorted(filtered, key=lambda p: p.monthly_fee)
