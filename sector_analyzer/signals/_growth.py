"""Growth signal from year-over-year employment change."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import pandas as pd

from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals._config import NEUTRAL_SCORE, GrowthConfig
from sector_analyzer.signals._normalization import (
    drop_non_finite,
    fill_missing,
    z_score_normalize,
)

logger = logging.getLogger(__name__)


def compute_employment_growth(
    employment: Mapping[str, pd.Series],
    sectors: Sequence[str] = SECTOR_NAMES,
    config: GrowthConfig | None = None,
) -> pd.Series:
    """Year-over-year employment growth in percent.

    Gaps are dropped before counting observations; with monthly data
    the default lookback of 13 compares the latest month with the same
    month a year earlier.

    Parameters
    ----------
    employment : Mapping[str, pd.Series]
        Sector -> monthly employment level, ascending by date.
    sectors : Sequence[str]
        Sector universe.
    config : GrowthConfig or None
        Lookback configuration.

    Returns
    -------
    pd.Series
        Sector -> ``(latest - base) / base * 100``.  Sectors with too
        few observations or a non-positive base are absent.
    """
    if config is None:
        config = GrowthConfig()

    growth: dict[str, float] = {}
    for sector in sectors:
        series = employment.get(sector)
        if series is None:
            continue
        values = series.dropna()
        if len(values) < config.lookback:
            continue
        current = float(values.iloc[-1])
        base = float(values.iloc[-config.lookback])
        if base > 0:
            growth[sector] = (current - base) / base * 100.0
    return pd.Series(growth, dtype=float)


def compute_growth_score(
    employment: Mapping[str, pd.Series],
    sectors: Sequence[str] = SECTOR_NAMES,
    config: GrowthConfig | None = None,
) -> pd.Series:
    """Score sectors by employment growth; faster growth scores higher."""
    growth = drop_non_finite(compute_employment_growth(employment, sectors, config))
    if growth.empty:
        logger.debug("No usable employment series; growth scores neutral")
        return fill_missing({}, sectors, NEUTRAL_SCORE)

    return fill_missing(z_score_normalize(growth), sectors, NEUTRAL_SCORE)
