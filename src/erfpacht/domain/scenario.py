from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    interest_rate: float  # annual, e.g. 0.045
    term_years: int


@dataclass(frozen=True)
class CashflowSeries:
    """Yearly outflows from year 0 (today) to horizon - 1, before and after tax."""
    gross: tuple[float, ...]
    net: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.gross) != len(self.net):
            raise ValueError(
                f"gross and net must have equal length ({len(self.gross)} != {len(self.net)})"
            )

    @property
    def years(self) -> int:
        return len(self.gross)


@dataclass(frozen=True)
class Scenario:
    id: str
    label: str
    description: str
    series: CashflowSeries

    total_gross: float
    total_net: float
    yearly_gross: float     # simple mean over the horizon
    yearly_net: float
    npv_gross: float
    npv_net: float

    # first year this scenario's cumulative net cost is <= the baseline's
    break_even_year: Optional[int] = None

    def with_break_even(self, year: Optional[int]) -> "Scenario":
        return replace(self, break_even_year=year)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        series = data.pop("series")
        data["cashflows_gross"] = list(series["gross"])
        data["cashflows_net"] = list(series["net"])
        return data
