# src/erfpacht/domain/tariffs.py
"""
Den Haag ground-lease tariffs.

Sources:
  - AB1986 canon percentages: collegebesluit "Vaststelling canonpercentage" (RIS324183)
  - AB2024 canon percentages: Algemene Bepalingen 2024 (ten-year average)
  - Land purchase ("bloot eigendom") price schedule:
    https://www.denhaag.nl/nl/erfpacht/van-erfpacht-naar-eigen-grond/

Last updated: January 2026.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Literal, Mapping

Regime = Literal["AB1986", "AB2024"]

REGIMES: tuple[Regime, ...] = ("AB1986", "AB2024")

AB1986_CANON_RATES: Mapping[int, float] = MappingProxyType({
    2024: 0.032,
    2025: 0.033,
    2026: 0.033,
})

AB2024_CANON_RATES: Mapping[int, float] = MappingProxyType({
    2023: 0.019,
    2024: 0.020,
    2025: 0.021,
    2026: 0.022,
})

_RATES_BY_REGIME: Mapping[str, Mapping[int, float]] = MappingProxyType({
    "AB1986": AB1986_CANON_RATES,
    "AB2024": AB2024_CANON_RATES,
})


@dataclass(frozen=True)
class PriceTier:
    min_value: float  # inclusive
    max_value: float  # exclusive, math.inf for the last tier
    price: float      # full purchase price, not a fraction of ground value

    def contains(self, value: float) -> bool:
        return self.min_value <= value < self.max_value


# Ordered, contiguous and covering [0, inf).
LAND_PRICE_TIERS: tuple[PriceTier, ...] = (
    PriceTier(0, 200_000, 700),
    PriceTier(200_000, 300_000, 1205),
    PriceTier(300_000, 400_000, 1650),
    PriceTier(400_000, 500_000, 2350),
    PriceTier(500_000, 700_000, 2790),
    PriceTier(700_000, 1_000_000, 4315),
    PriceTier(1_000_000, math.inf, 6980),
)

# On reissue the developed ground value is capped at 55% of the undeveloped value.
REISSUE_GROUND_VALUE_CAP = 0.55


@dataclass(frozen=True)
class TariffDefaults:
    discount_rate: float = 0.035
    projection_years: int = 30
    management_fee: float = 34.0           # yearly, official 2026 tariff
    management_fee_buyout: float = 289.0   # one-off buyout of the management fee
    marginal_tax_rate: float = 0.37
    loan_interest_rate: float = 0.045
    loan_term_years: int = 30


DEFAULTS = TariffDefaults()


def _rates(regime: str) -> Mapping[int, float]:
    try:
        return _RATES_BY_REGIME[regime]
    except KeyError:
        raise ValueError(f"Unknown regime {regime!r}. Available: {list(REGIMES)}") from None


def rate_for(regime: Regime, year: int) -> float | None:
    """Canon rate for a regime and year, or None when the year is not covered."""
    return _rates(regime).get(int(year))


def available_years(regime: Regime) -> list[int]:
    """Years with a known canon rate, most recent first."""
    return sorted(_rates(regime), reverse=True)


def price_tier_for(assessed_value: float) -> float:
    """Land purchase price for an assessed (WOZ) property value."""
    if assessed_value < 0:
        raise ValueError("assessed_value must be non-negative")
    for tier in LAND_PRICE_TIERS:
        if tier.contains(assessed_value):
            return tier.price
    # unreachable for finite input while the tiers cover [0, inf)
    return LAND_PRICE_TIERS[-1].price


def buyout_amount(ground_value: float) -> float:
    """A perpetual buyout costs the full ground value."""
    if ground_value < 0:
        raise ValueError("ground_value must be non-negative")
    return ground_value


def reference_tables() -> dict[str, Any]:
    return {
        "canon_rates": {
            regime: {str(year): rate for year, rate in sorted(table.items())}
            for regime, table in _RATES_BY_REGIME.items()
        },
        "land_price_tiers": [
            {
                "min": tier.min_value,
                "max": None if math.isinf(tier.max_value) else tier.max_value,
                "price": tier.price,
            }
            for tier in LAND_PRICE_TIERS
        ],
        "reissue_ground_value_cap": REISSUE_GROUND_VALUE_CAP,
        "defaults": asdict(DEFAULTS),
    }
