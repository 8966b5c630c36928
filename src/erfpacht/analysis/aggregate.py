# src/erfpacht/analysis/aggregate.py
from __future__ import annotations

from typing import Optional, Sequence

from erfpacht.domain.finance import npv
from erfpacht.domain.scenario import CashflowSeries, Scenario
from erfpacht.domain.tariffs import DEFAULTS


def build_scenario(
    scenario_id: str,
    label: str,
    description: str,
    series: CashflowSeries,
    discount_rate: float = DEFAULTS.discount_rate,
) -> Scenario:
    """
    Totals, yearly averages and NPVs for one cashflow series.

    The yearly average is a plain mean over the horizon (not an annuity
    equivalent), so it only compares fairly between equal horizons.
    """
    total_gross = sum(series.gross)
    total_net = sum(series.net)
    years = series.years

    return Scenario(
        id=scenario_id,
        label=label,
        description=description,
        series=series,
        total_gross=total_gross,
        total_net=total_net,
        yearly_gross=total_gross / years if years else 0.0,
        yearly_net=total_net / years if years else 0.0,
        npv_gross=npv(series.gross, discount_rate),
        npv_net=npv(series.net, discount_rate),
    )


def break_even_year(
    baseline_cumulative: Sequence[float],
    challenger_cumulative: Sequence[float],
) -> Optional[int]:
    """
    First year (from 0) in which the challenger's cumulative cost is at or
    below the baseline's. None when that never happens within the horizon.
    """
    for year, (base, challenger) in enumerate(zip(baseline_cumulative, challenger_cumulative)):
        if challenger <= base:
            return year
    return None
