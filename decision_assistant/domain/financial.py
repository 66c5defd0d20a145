"""Financing vs consortium comparison - closed-form total cost of ownership"""

from typing import Optional
from decision_assistant.domain.models import FinancingTerms, ConsortiumTerms, FinancialTotals
from decision_assistant.utils.number_utils import finite_or_none


def _amortized_payment(principal: float, monthly_rate: float, installments: int) -> Optional[float]:
    """
    Fixed installment of the Price (French amortization) table.

    M = P * r * (1+r)^n / ((1+r)^n - 1)

    Returns None when the formula overflows or degenerates.
    """
    try:
        growth = (1 + monthly_rate) ** installments
        payment = principal * (monthly_rate * growth) / (growth - 1)
    except (OverflowError, ZeroDivisionError):
        return None
    return finite_or_none(payment)


def financing_total(terms: FinancingTerms) -> Optional[float]:
    """
    Total paid for a financed purchase, or None if not computable.

    Rules:
    - Zero interest: total is the asset value (down payment and installments
      are ignored in this simplified model)
    - Down payment covering the whole value: total is the down payment
    - Otherwise: down payment + amortized installment * installment count
    """
    if terms.interest_rate_monthly_percent == 0:
        return finite_or_none(terms.total_value)

    principal = terms.total_value - terms.down_payment
    if principal <= 0:
        return finite_or_none(terms.down_payment)

    monthly_rate = terms.interest_rate_monthly_percent / 100
    payment = _amortized_payment(principal, monthly_rate, terms.installment_count)
    if payment is None:
        return None

    return finite_or_none(terms.down_payment + payment * terms.installment_count)


def consortium_total(terms: ConsortiumTerms) -> Optional[float]:
    """Total paid in a consortium (value plus admin fee), or None if not computable"""
    return finite_or_none(terms.total_value * (1 + terms.admin_fee_percent / 100))


def financing_monthly_payment(terms: FinancingTerms) -> Optional[float]:
    """Monthly installment of the financing option, or None if not computable"""
    principal = terms.total_value - terms.down_payment
    if principal <= 0:
        return 0.0

    if terms.interest_rate_monthly_percent == 0:
        return finite_or_none(principal / terms.installment_count)

    monthly_rate = terms.interest_rate_monthly_percent / 100
    return _amortized_payment(principal, monthly_rate, terms.installment_count)


def consortium_monthly_payment(terms: ConsortiumTerms) -> Optional[float]:
    """Monthly installment of the consortium option, or None if not computable"""
    total = consortium_total(terms)
    if total is None:
        return None
    return finite_or_none(total / terms.installment_count)


def compute_financing_total(terms: FinancingTerms) -> float:
    """Legacy contract: uncomputable totals are reported as 0"""
    total = financing_total(terms)
    return 0.0 if total is None else total


def compute_consortium_total(terms: ConsortiumTerms) -> float:
    """Legacy contract: uncomputable totals are reported as 0"""
    total = consortium_total(terms)
    return 0.0 if total is None else total


def compute_financial_totals(
    financing: FinancingTerms,
    consortium: ConsortiumTerms,
    strict: bool = False,
) -> FinancialTotals:
    """
    Main entry point: total cost of both options.

    strict=True keeps None for uncomputable totals; strict=False reproduces
    the legacy behavior of reporting them as 0.
    """
    if strict:
        return FinancialTotals(
            financing_total=financing_total(financing),
            consortium_total=consortium_total(consortium),
        )

    return FinancialTotals(
        financing_total=compute_financing_total(financing),
        consortium_total=compute_consortium_total(consortium),
    )
