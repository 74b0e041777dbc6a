"""Macro signal: sector sensitivity to interest-rate changes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd
from scipy import stats as sp_stats

from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals._config import NEUTRAL_SCORE, MacroConfig
from sector_analyzer.signals._normalization import (
    drop_non_finite,
    fill_missing,
    z_score_normalize,
)

logger = logging.getLogger(__name__)


def compute_monthly_changes(series: pd.Series) -> np.ndarray:
    """Period-over-period fractional changes of a monthly series.

    NaN gaps are dropped first.  A step whose prior value is exactly
    zero is skipped.

    Parameters
    ----------
    series : pd.Series
        Monthly observations in ascending date order.

    Returns
    -------
    np.ndarray
        ``(v[i] - v[i-1]) / v[i-1]`` for each usable step.
    """
    values = series.dropna().to_numpy(dtype=float)
    if len(values) < 2:
        return np.array([], dtype=float)

    prev = values[:-1]
    curr = values[1:]
    mask = prev != 0
    return (curr[mask] - prev[mask]) / prev[mask]


def compute_monthly_returns(close: pd.Series, stride: int = 21) -> np.ndarray:
    """Approximate monthly returns from daily closes.

    Samples every ``stride`` bars starting from the head of the series.
    A step whose earlier close is not positive or either close is not
    finite is skipped.

    Parameters
    ----------
    close : pd.Series
        Daily closing prices in ascending date order.
    stride : int
        Bars per approximate month.

    Returns
    -------
    np.ndarray
        Fractional return for each full stride.
    """
    values = close.to_numpy(dtype=float)
    returns: list[float] = []
    for i in range(stride, len(values), stride):
        prev = values[i - stride]
        curr = values[i]
        if np.isfinite(prev) and np.isfinite(curr) and prev > 0:
            returns.append((curr - prev) / prev)
    return np.asarray(returns, dtype=float)


def compute_rate_sensitivity(
    sector_prices: Mapping[str, pd.DataFrame],
    rates: pd.Series,
    sectors: Sequence[str] = SECTOR_NAMES,
    config: MacroConfig | None = None,
) -> pd.Series:
    """Pearson correlation of sector monthly returns with rate changes.

    Both sequences are trimmed to their common most-recent length.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    rates : pd.Series
        Reference interest-rate series (monthly).
    sectors : Sequence[str]
        Sector universe.
    config : MacroConfig or None
        Stride and minimum observation count.

    Returns
    -------
    pd.Series
        Sector -> correlation.  Sectors with fewer than
        ``min_observations`` aligned points or a constant input are
        absent.
    """
    if config is None:
        config = MacroConfig()

    changes = compute_monthly_changes(rates)
    if len(changes) < config.min_observations:
        return pd.Series(dtype=float)

    sensitivity: dict[str, float] = {}
    for sector in sectors:
        frame = sector_prices.get(sector)
        if frame is None:
            continue
        returns = compute_monthly_returns(frame["close"], config.stride)
        n = min(len(returns), len(changes))
        if n < config.min_observations:
            continue

        x = returns[-n:]
        y = changes[-n:]
        if not (np.isfinite(x).all() and np.isfinite(y).all()):
            continue
        if np.ptp(x) == 0 or np.ptp(y) == 0:
            continue

        corr, _ = sp_stats.pearsonr(x, y)
        if np.isfinite(corr):
            sensitivity[sector] = float(corr)
    return pd.Series(sensitivity, dtype=float)


def compute_macro_score(
    sector_prices: Mapping[str, pd.DataFrame],
    macro_data: Mapping[str, pd.Series],
    sectors: Sequence[str] = SECTOR_NAMES,
    config: MacroConfig | None = None,
) -> pd.Series:
    """Score sectors by rate resilience; low correlation scores higher.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    macro_data : Mapping[str, pd.Series]
        Named macro series; ``config.reference_key`` must be present for
        a non-neutral result.
    sectors : Sequence[str]
        Sector universe.
    config : MacroConfig or None
        Reference key, stride and minimum observations.

    Returns
    -------
    pd.Series
        Macro score per sector; 50 for every sector when the reference
        series is missing or no correlation can be computed.
    """
    if config is None:
        config = MacroConfig()

    rates = macro_data.get(config.reference_key)
    if rates is None or rates.dropna().empty:
        logger.debug("Reference series %r missing; macro scores neutral", config.reference_key)
        return fill_missing({}, sectors, NEUTRAL_SCORE)

    sensitivity = drop_non_finite(
        compute_rate_sensitivity(sector_prices, rates, sectors, config)
    )
    if sensitivity.empty:
        logger.debug("No sector has enough aligned history; macro scores neutral")
        return fill_missing({}, sectors, NEUTRAL_SCORE)

    return fill_missing(
        z_score_normalize(sensitivity, higher_is_better=False), sectors, NEUTRAL_SCORE
    )
