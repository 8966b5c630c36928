"""
Projection primitives.

Every function here is pure; nothing is rounded (rounding is a display concern).
"""
from __future__ import annotations

from typing import Iterable, Sequence

from erfpacht.domain.scenario import LoanTerms


def annual_canon(ground_value: float, canon_rate: float, management_fee: float = 0.0) -> float:
    """Gross yearly canon: ground value x canon rate, plus the management fee."""
    return ground_value * canon_rate + management_fee


def tax_benefit(deductible_amount: float, marginal_rate: float) -> float:
    """Income-tax refund on a deductible amount at a flat marginal rate."""
    return deductible_amount * marginal_rate


def net_cost(amount: float, marginal_rate: float, deductible: bool) -> float:
    """
    Cost after income-tax deduction.

    Known simplification: the progressive box-1 brackets are collapsed into a
    single marginal rate applied to the whole amount.
    """
    if not deductible:
        return amount
    return amount - tax_benefit(amount, marginal_rate)


def annuity_payment(principal: float, interest_rate: float, term_years: int) -> float:
    """
    Standard fixed-rate amortization formula:
    A = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    P = loan principal
    r = yearly interest rate
    n = number of yearly payments
    """
    if term_years <= 0:
        raise ValueError("term_years must be > 0")
    r = interest_rate
    n = term_years
    if abs(r) < 1e-12:
        return principal / n
    return principal * (r * (1 + r) ** n) / ((1 + r) ** n - 1)


def _annuity(loan: LoanTerms) -> float:
    return annuity_payment(loan.principal, loan.interest_rate, loan.term_years)


def yearly_interest(loan: LoanTerms, year: int) -> float:
    """
    Interest part of the payment in `year` (0-indexed).

    The remaining principal is re-derived from the start on every call so any
    year can be queried on its own; horizons are at most a few decades.
    """
    if year < 0 or year >= loan.term_years:
        return 0.0
    annuity = _annuity(loan)
    remaining = loan.principal
    for _ in range(year):
        interest = remaining * loan.interest_rate
        remaining -= annuity - interest
    return remaining * loan.interest_rate


def yearly_principal(loan: LoanTerms, year: int) -> float:
    """Repayment (amortization) part of the payment in `year`."""
    if year < 0 or year >= loan.term_years:
        return 0.0
    return _annuity(loan) - yearly_interest(loan, year)


def npv(cashflows: Iterable[float], discount_rate: float) -> float:
    """Net present value; year 0 is not discounted."""
    return sum(cf / (1 + discount_rate) ** t for t, cf in enumerate(cashflows))


def cumulative(cashflows: Sequence[float]) -> list[float]:
    out: list[float] = []
    total = 0.0
    for cf in cashflows:
        total += cf
        out.append(total)
    return out
