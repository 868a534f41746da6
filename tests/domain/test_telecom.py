from decimal import Decimal

from tariff_checker.domain.models import InternetPlan, TelecomPlan
from tariff_checker.domain.telecom import filter_internet_plans, filter_mobile_plans


def make_plan(plan_id: str, operator: str, plan_type: str, fee: str, data_gb: str) -> TelecomPlan:
    return TelecomPlan(
        id=plan_id,
        operator=operator,
        operator_name=operator.upper(),
        plan_name=plan_id,
        plan_type=plan_type,
        monthly_fee=Decimal(fee),
        data_gb=Decimal(data_gb),
    )


PLANS = [
    make_plan("big", "a1", "postpaid", "25", "100"),
    make_plan("small", "yettel", "prepaid", "8", "5"),
    make_plan("mid", "vivacom", "postpaid", "15", "30"),
]


def test_no_filters_sorts_by_fee():
    assert [p.id for p in filter_mobile_plans(PLANS)] == ["small", "mid", "big"]
    assert [p.id for p in filter_mobile_plans(PLANS, plan_type="all", operator="all")] == ["small", "mid", "big"]


def test_mobile_filters_combine():
    assert [p.id for p in filter_mobile_plans(PLANS, plan_type="postpaid")] == ["mid", "big"]
    assert [p.id for p in filter_mobile_plans(PLANS, min_data_gb=Decimal("30"))] == ["mid", "big"]
    assert [p.id for p in filter_mobile_plans(PLANS, plan_type="postpaid", operator="a1")] == ["big"]
    assert filter_mobile_plans(PLANS, plan_type="prepaid", min_data_gb=Decimal("50")) == []


def test_internet_filters():
    plans = [
        InternetPlan("fiber", "vivacom", "Vivacom", "Fiber 1G", 1000, Decimal("20"), "FTTH"),
        InternetPlan("dsl", "a1", "A1", "Basic", 50, Decimal("10"), "VDSL"),
    ]

    assert [p.id for p in filter_internet_plans(plans)] == ["dsl", "fiber"]
    assert [p.id for p in filter_internet_plans(plans, min_speed_mbps=100)] == ["fiber"]
    assert [p.id for p in filter_internet_plans(plans, provider="a1")] == ["dsl"]
