# src/erfpacht/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ScenarioItem(BaseModel):
    id: str
    label: str
    description: str

    cashflows_gross: list[float]
    cashflows_net: list[float]

    total_gross: float
    total_net: float
    yearly_gross: float
    yearly_net: float
    npv_gross: float
    npv_net: float

    break_even_year: int | None = None


class CompareSummary(BaseModel):
    current_yearly_net: float | None = None
    ab2024_yearly_saving: float | None = None
    buyout_break_even_year: int | None = None
    buyout_npv_advantage: float | None = None
    cheapest_scenario: str | None = None


class CompareResponse(BaseModel):
    """
    Typed response for /compare.

    `cumulative_net` is chart data: one list of cumulative net costs per scenario id.
    """
    model_config = ConfigDict(extra="allow")

    canon_rate: float
    horizon_years: int
    scenarios: list[ScenarioItem]
    summary: CompareSummary
    cumulative_net: dict[str, list[float]]


class RateResponse(BaseModel):
    regime: str
    year: int
    rate: float


class LandPriceResponse(BaseModel):
    assessed_value: float
    price: float


class ReferenceTables(BaseModel):
    model_config = ConfigDict(extra="allow")

    canon_rates: dict[str, dict[str, float]]
    land_price_tiers: list[dict[str, Any]]
    reissue_ground_value_cap: float
    defaults: dict[str, Any]


class RegimeRatesResponse(BaseModel):
    regime: str
    years: list[int]
    latest_rate: float | None = None
