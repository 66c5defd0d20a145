"""Unit tests for financing vs consortium calculations"""

import pytest
from decision_assistant.domain.models import FinancingTerms, ConsortiumTerms
from decision_assistant.domain.financial import (
    compute_consortium_total,
    compute_financial_totals,
    compute_financing_total,
    consortium_monthly_payment,
    consortium_total,
    financing_monthly_payment,
    financing_total,
)


def price_table_total(value: float, down: float, rate_percent: float, n: int) -> float:
    """Direct Price table computation used as reference"""
    r = rate_percent / 100
    payment = (value - down) * r * (1 + r) ** n / ((1 + r) ** n - 1)
    return down + payment * n


def test_financing_total_car_purchase():
    """Test the default car purchase scenario against the Price table formula"""
    terms = FinancingTerms(
        total_value=50000,
        down_payment=10000,
        interest_rate_monthly_percent=1.5,
        installment_count=48,
    )

    total = compute_financing_total(terms)

    assert total == pytest.approx(price_table_total(50000, 10000, 1.5, 48))
    # 40000 financed at 1.5% a month over 48 months ≈ 1175.00 per month
    assert total == pytest.approx(66400, abs=1)
    assert financing_monthly_payment(terms) == pytest.approx(1175.0, abs=0.01)


@pytest.mark.parametrize("down_payment,installments", [(0, 1), (10000, 48), (60000, 12)])
def test_financing_total_zero_interest_ignores_down_payment(down_payment, installments):
    """Test zero interest returns the asset value regardless of other terms"""
    terms = FinancingTerms(
        total_value=50000,
        down_payment=down_payment,
        interest_rate_monthly_percent=0,
        installment_count=installments,
    )
    assert compute_financing_total(terms) == 50000


@pytest.mark.parametrize("down_payment", [50000, 75000])
def test_financing_total_down_payment_covers_value(down_payment):
    """Test down payment >= value returns the down payment"""
    terms = FinancingTerms(
        total_value=50000,
        down_payment=down_payment,
        interest_rate_monthly_percent=2.0,
        installment_count=24,
    )
    assert compute_financing_total(terms) == down_payment
    assert financing_monthly_payment(terms) == 0.0


def test_financing_total_overflow_is_uncomputable():
    """Test overflowing formula gives None strictly and 0 in legacy mode"""
    terms = FinancingTerms(
        total_value=50000,
        down_payment=0,
        interest_rate_monthly_percent=1_000_000,
        installment_count=10_000,
    )
    assert financing_total(terms) is None
    assert compute_financing_total(terms) == 0.0
    assert financing_monthly_payment(terms) is None


def test_financing_total_degenerate_rate_is_uncomputable():
    """Test a rate too small to change (1+r)^n divides by zero without raising"""
    terms = FinancingTerms(
        total_value=50000,
        down_payment=0,
        interest_rate_monthly_percent=1e-20,
        installment_count=12,
    )
    assert financing_total(terms) is None
    assert compute_financing_total(terms) == 0.0


def test_financing_monthly_payment_zero_interest():
    """Test zero interest splits the financed amount evenly"""
    terms = FinancingTerms(
        total_value=12000,
        down_payment=2000,
        interest_rate_monthly_percent=0,
        installment_count=10,
    )
    assert financing_monthly_payment(terms) == 1000.0


def test_consortium_total_admin_fee():
    """Test consortium total adds the admin fee"""
    terms = ConsortiumTerms(total_value=50000, admin_fee_percent=15, installment_count=60)

    assert compute_consortium_total(terms) == pytest.approx(57500)
    assert consortium_monthly_payment(terms) == pytest.approx(57500 / 60)


def test_consortium_total_zero_fee():
    """Test zero fee returns the credit value"""
    terms = ConsortiumTerms(total_value=50000, admin_fee_percent=0, installment_count=60)
    assert compute_consortium_total(terms) == 50000


def test_consortium_total_monotonic_in_fee():
    """Test total never decreases as the admin fee grows"""
    totals = [
        compute_consortium_total(ConsortiumTerms(total_value=30000, admin_fee_percent=fee, installment_count=50))
        for fee in [0, 0.5, 5, 12.5, 20, 100]
    ]
    assert totals == sorted(totals)


def test_consortium_total_overflow_is_uncomputable():
    """Test non-finite consortium total"""
    terms = ConsortiumTerms(total_value=1e308, admin_fee_percent=1000, installment_count=10)
    assert consortium_total(terms) is None
    assert compute_consortium_total(terms) == 0.0
    assert consortium_monthly_payment(terms) is None


def test_compute_financial_totals_modes():
    """Test strict mode keeps None while legacy mode reports 0"""
    financing = FinancingTerms(
        total_value=50000,
        down_payment=0,
        interest_rate_monthly_percent=1_000_000,
        installment_count=10_000,
    )
    consortium = ConsortiumTerms(total_value=50000, admin_fee_percent=15, installment_count=60)

    strict = compute_financial_totals(financing, consortium, strict=True)
    legacy = compute_financial_totals(financing, consortium)

    assert strict.financing_total is None
    assert legacy.financing_total == 0.0
    assert strict.consortium_total == pytest.approx(57500)
    assert legacy.consortium_total == pytest.approx(57500)
