# src/erfpacht/api/http.py
from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI, HTTPException, Query

from erfpacht.adapters.config import config
from erfpacht.adapters.logging_utils import get_logger
from erfpacht.adapters.state_store import JsonFileStateStore
from erfpacht.analysis.frames import cumulative_frame
from erfpacht.domain.household import HouseholdInput
from erfpacht.domain.ports import StateStore
from erfpacht.domain.tariffs import (
    REGIMES,
    available_years,
    price_tier_for,
    rate_for,
    reference_tables,
)
from erfpacht.services.comparison import compare_scenarios, resolve_canon_rate, summarize
from erfpacht.services.validation import parse_household
from .schemas import (
    CompareResponse,
    CompareSummary,
    LandPriceResponse,
    RateResponse,
    RegimeRatesResponse,
    ReferenceTables,
    ScenarioItem,
)

logger = get_logger(__name__)

app = FastAPI(title="Erfpacht calculator")

# replaced in tests with an in-memory store
app.state.store = JsonFileStateStore(config.STATE_PATH)


def _store() -> StateStore:
    return app.state.store


@app.post("/compare", response_model=CompareResponse)
def compare_endpoint(payload: dict[str, Any] = Body(...)) -> CompareResponse:
    """
    Compare all scenarios for a household.

    The payload is normalized first (percent strings, wizard keys), so the
    frontend can post its saved state as-is.
    """
    try:
        household = parse_household(payload)
        scenarios = compare_scenarios(household)
        canon_rate = resolve_canon_rate(household)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    frame = cumulative_frame(scenarios, net=True)
    horizon = scenarios[0].series.years if scenarios else 0

    return CompareResponse(
        canon_rate=canon_rate,
        horizon_years=horizon,
        scenarios=[ScenarioItem(**s.to_dict()) for s in scenarios],
        summary=CompareSummary(**summarize(scenarios)),
        cumulative_net={col: frame[col].round(2).tolist() for col in frame.columns},
    )


@app.get("/tariffs", response_model=ReferenceTables)
def tariffs() -> ReferenceTables:
    return ReferenceTables(**reference_tables())


@app.get("/tariffs/{regime}", response_model=RegimeRatesResponse)
def tariff_years(regime: str) -> RegimeRatesResponse:
    """Years the wizard can offer for a regime, most recent first."""
    if regime not in REGIMES:
        raise HTTPException(status_code=404, detail=f"unknown regime: {regime}")
    years = available_years(regime)
    return RegimeRatesResponse(
        regime=regime,
        years=years,
        latest_rate=rate_for(regime, years[0]) if years else None,
    )


@app.get("/tariffs/{regime}/{year}", response_model=RateResponse)
def tariff_rate(regime: str, year: int) -> RateResponse:
    if regime not in REGIMES:
        raise HTTPException(status_code=404, detail=f"unknown regime: {regime}")
    rate = rate_for(regime, year)
    if rate is None:
        # the frontend asks the user to enter the rate manually
        raise HTTPException(status_code=404, detail=f"no canon rate for {regime} in {year}")
    return RateResponse(regime=regime, year=year, rate=rate)


@app.get("/land-price", response_model=LandPriceResponse)
def land_price(assessed_value: float = Query(..., ge=0)) -> LandPriceResponse:
    return LandPriceResponse(assessed_value=assessed_value, price=price_tier_for(assessed_value))


# -----------------------------
# Wizard state
# -----------------------------
@app.get("/state", response_model=HouseholdInput)
def get_state() -> HouseholdInput:
    return _store().load()


@app.put("/state", response_model=HouseholdInput)
def put_state(payload: dict[str, Any] = Body(...)) -> HouseholdInput:
    try:
        household = parse_household(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    _store().save(household)
    logger.info("wizard state saved")
    return household


@app.delete("/state", status_code=204)
def delete_state() -> None:
    _store().clear()
