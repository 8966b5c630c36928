from __future__ import annotations

from typing import Any, Optional, Sequence

from erfpacht.adapters.config import config
from erfpacht.adapters.logging_utils import get_logger, log_context
from erfpacht.analysis.aggregate import break_even_year, build_scenario
from erfpacht.analysis.cashflows import (
    build_buyout_cashflows,
    build_canon_cashflows,
    build_land_cashflows,
)
from erfpacht.domain.finance import cumulative
from erfpacht.domain.household import HouseholdInput
from erfpacht.domain.scenario import LoanTerms, Scenario
from erfpacht.domain.tariffs import buyout_amount, price_tier_for, rate_for

logger = get_logger(__name__)

BASELINE_ID = "current"


def _eur(value: float) -> str:
    # nl-NL style: €100.000
    return "€" + f"{round(value):,}".replace(",", ".")


def _table_rate_or_fallback(regime: str, year: int, fallback: float) -> float:
    rate = rate_for(regime, year)
    if rate is None:
        rate = fallback
        logger.warning(
            "no canon rate in tariff table, using fallback",
            extra=log_context(regime=regime, year=year, fallback_rate=rate),
        )
    return rate


def resolve_canon_rate(household: HouseholdInput) -> float:
    """
    Canon rate for the household's current contract.

    A custom rate wins; otherwise the tariff table for the selected year,
    otherwise the configured fallback canon rate (the same for either regime).
    """
    if household.custom_canon_rate:
        return household.custom_canon_rate
    return _table_rate_or_fallback(
        household.regime, household.selected_year, config.FALLBACK_CANON_RATE
    )


def _loan_for(household: HouseholdInput, amount: float) -> Optional[LoanTerms]:
    if not household.finance_with_loan:
        return None
    return LoanTerms(
        principal=amount,
        interest_rate=household.loan_interest_rate,
        term_years=household.loan_term_years,
    )


def compare_scenarios(household: HouseholdInput) -> list[Scenario]:
    """
    Build every scenario that applies to the household, baseline first.

    Order: current canon, switch to AB2024 (AB1986 contracts only), perpetual
    buyout, buyout plus land purchase (needs an assessed value). Buyout and
    land scenarios carry their break-even year against the current situation.
    """
    years = household.horizon_years if household.horizon_years is not None else config.PROJECTION_YEARS
    discount_rate = household.discount_rate if household.discount_rate is not None else config.DISCOUNT_RATE
    regime = household.regime

    logger.info(
        "comparing scenarios",
        extra=log_context(regime=regime, year=household.selected_year, years=years),
    )

    result: list[Scenario] = []

    # 1. current situation (baseline)
    current_cf = build_canon_cashflows(
        years,
        ground_value=household.ground_value,
        canon_rate=resolve_canon_rate(household),
        management_fee=household.management_fee,
        occupied=household.occupied,
        marginal_tax_rate=household.marginal_tax_rate,
    )
    result.append(
        build_scenario(
            BASELINE_ID,
            f"Huidige situatie ({regime})",
            f"Doorgaan met canonbetaling onder {regime}",
            current_cf,
            discount_rate,
        )
    )
    current_cumulative = cumulative(current_cf.net)

    # 2. voluntary switch to AB2024
    if regime == "AB1986":
        ab2024_cf = build_canon_cashflows(
            years,
            ground_value=household.ground_value,
            canon_rate=_table_rate_or_fallback(
                "AB2024", household.selected_year, config.FALLBACK_AB2024_RATE
            ),
            management_fee=household.management_fee,
            occupied=household.occupied,
            marginal_tax_rate=household.marginal_tax_rate,
        )
        result.append(
            build_scenario(
                "ab2024",
                "Overstappen naar AB2024",
                "Vrijwillig overstappen naar de nieuwe voorwaarden",
                ab2024_cf,
                discount_rate,
            )
        )

    # 3. perpetual buyout
    buyout = household.buyout_amount or buyout_amount(household.ground_value)
    buyout_cf = build_buyout_cashflows(
        years,
        buyout_amount=buyout,
        management_fee=household.management_fee,
        include_management_fee=household.buyout_keeps_management_fee,
        loan=_loan_for(household, buyout),
        occupied=household.occupied,
        marginal_tax_rate=household.marginal_tax_rate,
    )
    buyout_scenario = build_scenario(
        "buyout",
        "Eeuwigdurend afkopen",
        f"Eenmalige afkoop van {_eur(buyout)}",
        buyout_cf,
        discount_rate,
    )
    result.append(
        buyout_scenario.with_break_even(
            break_even_year(current_cumulative, cumulative(buyout_cf.net))
        )
    )

    # 4. buyout + land purchase; the canon must be bought out first
    if household.assessed_value and household.land_purchase_possible != "no":
        land_price = price_tier_for(household.assessed_value)
        surcharge = household.land_surcharge or 0.0
        total = buyout + land_price + surcharge
        land_cf = build_land_cashflows(
            years,
            purchase_amount=buyout + land_price,
            surcharge=surcharge,
            loan=_loan_for(household, total),
            occupied=household.occupied,
            marginal_tax_rate=household.marginal_tax_rate,
        )
        land_scenario = build_scenario(
            "land",
            "Eigen grond (bloot eigendom)",
            f"Afkoop {_eur(buyout)} + grond {_eur(land_price)}",
            land_cf,
            discount_rate,
        )
        result.append(
            land_scenario.with_break_even(
                break_even_year(current_cumulative, cumulative(land_cf.net))
            )
        )

    return result


def summarize(scenarios: Sequence[Scenario]) -> dict[str, Any]:
    """Headline figures for the results dashboard."""
    by_id = {s.id: s for s in scenarios}
    current = by_id.get(BASELINE_ID)
    ab2024 = by_id.get("ab2024")
    buyout = by_id.get("buyout")

    cheapest = min(scenarios, key=lambda s: s.npv_net, default=None)

    return {
        "current_yearly_net": current.yearly_net if current else None,
        "ab2024_yearly_saving": (
            current.yearly_net - ab2024.yearly_net if current and ab2024 else None
        ),
        "buyout_break_even_year": buyout.break_even_year if buyout else None,
        # positive means buying out is cheaper in present-value terms
        "buyout_npv_advantage": (
            current.npv_net - buyout.npv_net if current and buyout else None
        ),
        "cheapest_scenario": cheapest.id if cheapest else None,
    }
