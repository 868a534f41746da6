from decimal import Decimal

from tariff_checker.domain.models import LoanProduct
from tariff_checker.domain.ranking import rank_results
from tariff_checker.domain.results import LoanResult


def make_loan_result(product_id: str, payment: str, interest: str) -> LoanResult:
    product = LoanProduct(
        id=product_id,
        bank="bank",
        bank_name="Bank",
        product_name=product_id,
        loan_type="consumer",
        interest_rate=Decimal("8"),
        apr=Decimal("8.5"),
        min_amount=Decimal("0"),
        max_amount=Decimal("100000"),
        min_term_months=1,
        max_term_months=360,
    )
    return LoanResult(
        product=product,
        monthly_payment=Decimal(payment),
        total_payment=Decimal("0"),
        total_interest=Decimal(interest),
    )


def test_empty_input_gives_empty_tuple():
    assert rank_results([], key=lambda r: r.monthly_payment) == ()


def test_single_entry_is_cheapest_with_zero_delta():
    ranked = rank_results([make_loan_result("a", "100", "50")], key=lambda r: r.monthly_payment)

    assert len(ranked) == 1
    assert ranked[0].is_cheapest
    assert ranked[0].difference_from_cheapest == Decimal("0")


def test_sorted_ascending_with_one_cheapest():
    results = [
        make_loan_result("c", "300.10", "0"),
        make_loan_result("a", "100.005", "0"),
        make_loan_result("b", "200", "0"),
    ]

    ranked = rank_results(results, key=lambda r: r.monthly_payment)

    assert [r.product.id for r in ranked] == ["a", "b", "c"]
    assert [r.is_cheapest for r in ranked] == [True, False, False]
    assert [r.difference_from_cheapest for r in ranked] == [Decimal("0.00"), Decimal("100.00"), Decimal("200.10")]
    assert all(r.difference_from_cheapest >= 0 for r in ranked)


def test_input_is_not_mutated():
    results = [make_loan_result("b", "200", "0"), make_loan_result("a", "100", "0")]

    rank_results(results, key=lambda r: r.monthly_payment)

    assert [r.product.id for r in results] == ["b", "a"]
    assert not any(r.is_cheapest for r in results)


def test_cheapest_key_can_differ_from_sort_key():
    # a long, low-payment loan accrues more interest
    long_loan = make_loan_result("long", "200", "2000")
    short_loan = make_loan_result("short", "300", "800")

    ranked = rank_results(
        [short_loan, long_loan],
        key=lambda r: r.monthly_payment,
        cheapest_key=lambda r: r.total_interest,
    )

    assert [r.product.id for r in ranked] == ["long", "short"]
    assert not ranked[0].is_cheapest
    assert ranked[1].is_cheapest
    assert ranked[0].difference_from_cheapest == Decimal("1200.00")
    assert ranked[1].difference_from_cheapest == Decimal("0.00")


def test_ties_keep_input_order_and_flag_only_the_first():
    ranked = rank_results(
        [make_loan_result("x", "100", "0"), make_loan_result("y", "100", "0")],
        key=lambda r: r.monthly_payment,
    )

    assert [r.product.id for r in ranked] == ["x", "y"]
    assert sum(r.is_cheapest for r in ranked) == 1
    assert ranked[0].is_cheapest
