# src/erfpacht/analysis/frames.py

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from erfpacht.domain.scenario import Scenario


def cumulative_frame(scenarios: Sequence[Scenario], *, net: bool = True) -> pd.DataFrame:
    """
    Cumulative cost per year, one column per scenario id (chart data).

    Scenarios are expected to share a horizon; shorter series are padded
    with NaN.
    """
    horizon = max((s.series.years for s in scenarios), default=0)
    columns: dict[str, np.ndarray] = {}
    for s in scenarios:
        flows = np.asarray(s.series.net if net else s.series.gross, dtype=float)
        col = np.full(horizon, np.nan)
        col[: flows.shape[0]] = np.cumsum(flows)
        columns[s.id] = col

    df = pd.DataFrame(columns, index=pd.RangeIndex(horizon, name="year"))
    return df
