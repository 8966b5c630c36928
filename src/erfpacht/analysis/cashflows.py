# src/erfpacht/analysis/cashflows.py
from __future__ import annotations

from typing import Optional

from erfpacht.domain.finance import annual_canon, annuity_payment, net_cost, yearly_interest
from erfpacht.domain.scenario import CashflowSeries, LoanTerms
from erfpacht.domain.tariffs import DEFAULTS


def _check_years(years: int) -> None:
    if years < 0:
        raise ValueError("years must be non-negative")


def build_canon_cashflows(
    years: int,
    ground_value: float,
    canon_rate: float,
    management_fee: float = DEFAULTS.management_fee,
    occupied: bool = True,
    marginal_tax_rate: float = DEFAULTS.marginal_tax_rate,
) -> CashflowSeries:
    """
    Keep paying canon (AB1986 or AB2024).

    Today's rate is assumed to hold for the whole horizon, so every year costs
    the same. Canon is deductible when the house is the owner's primary residence.
    """
    _check_years(years)
    if ground_value < 0:
        raise ValueError("ground_value must be non-negative")

    yearly = annual_canon(ground_value, canon_rate, management_fee)
    yearly_net = net_cost(yearly, marginal_tax_rate, deductible=occupied)

    return CashflowSeries(gross=(yearly,) * years, net=(yearly_net,) * years)


def _one_off_cashflows(
    years: int,
    amount: float,
    loan: Optional[LoanTerms],
    occupied: bool,
    marginal_tax_rate: float,
    yearly_fee: float = 0.0,
) -> CashflowSeries:
    """
    A one-off payment, paid in cash at year 0 and/or financed with an annuity loan.

    Whatever the loan principal does not cover is paid in cash at year 0. Cash
    payments are not deductible. For the loan, interest is deductible for an
    owner-occupier and repayment is not. `yearly_fee` is added to every year
    and never deducted.
    """
    _check_years(years)
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if loan is not None and loan.principal > amount:
        raise ValueError("loan principal exceeds the amount to finance")

    cash = amount - loan.principal if loan is not None else amount

    annuity = (
        annuity_payment(loan.principal, loan.interest_rate, loan.term_years)
        if loan is not None
        else 0.0
    )

    gross: list[float] = []
    net: list[float] = []
    for year in range(years):
        year_gross = 0.0
        year_net = 0.0

        if year == 0 and cash > 0:
            year_gross += cash
            year_net += cash

        if loan is not None and year < loan.term_years:
            interest = yearly_interest(loan, year)
            repayment = annuity - interest
            year_gross += annuity
            year_net += net_cost(interest, marginal_tax_rate, deductible=occupied) + repayment

        year_gross += yearly_fee
        year_net += yearly_fee

        gross.append(year_gross)
        net.append(year_net)

    return CashflowSeries(gross=tuple(gross), net=tuple(net))


def build_buyout_cashflows(
    years: int,
    buyout_amount: float,
    management_fee: float = 0.0,
    include_management_fee: bool = False,
    loan: Optional[LoanTerms] = None,
    occupied: bool = True,
    marginal_tax_rate: float = DEFAULTS.marginal_tax_rate,
) -> CashflowSeries:
    """
    Perpetual buyout of the canon.

    `loan` finances (part of) the buyout when given. The management fee may
    survive the buyout.
    """
    return _one_off_cashflows(
        years,
        buyout_amount,
        loan,
        occupied,
        marginal_tax_rate,
        yearly_fee=management_fee if include_management_fee else 0.0,
    )


def build_land_cashflows(
    years: int,
    purchase_amount: float,
    surcharge: float = 0.0,
    loan: Optional[LoanTerms] = None,
    occupied: bool = True,
    marginal_tax_rate: float = DEFAULTS.marginal_tax_rate,
) -> CashflowSeries:
    """
    Buy out the canon and buy the land ("bloot eigendom").

    `purchase_amount` is the buyout plus the tiered land price; `surcharge`
    covers extra building rights. No management fee remains.
    """
    return _one_off_cashflows(
        years,
        purchase_amount + surcharge,
        loan,
        occupied,
        marginal_tax_rate,
    )
