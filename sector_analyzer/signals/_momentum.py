"""Momentum signal: price return, relative strength, and volume trend."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from sector_analyzer.exceptions import ConfigurationError
from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals._config import NEUTRAL_SCORE, MomentumConfig
from sector_analyzer.signals._normalization import (
    drop_non_finite,
    fill_missing,
    round_score,
    z_score_normalize,
)

logger = logging.getLogger(__name__)


def period_label(months: int) -> str:
    """Column label for a return horizon, e.g. ``"12mo"``."""
    return f"{months}mo"


def compute_period_return(close: pd.Series, trading_days: int) -> float | None:
    """Percent return over the trailing ``trading_days`` bars.

    The window starts ``trading_days`` bars from the end of the series,
    so the return spans ``trading_days - 1`` daily moves.

    Parameters
    ----------
    close : pd.Series
        Closing prices in ascending date order.
    trading_days : int
        Window length in bars.

    Returns
    -------
    float or None
        ``(end / start - 1) * 100``, or ``None`` if the series is shorter
        than the window or the start price is not positive.
    """
    if trading_days < 1 or len(close) < trading_days:
        return None
    start = float(close.iloc[-trading_days])
    end = float(close.iloc[-1])
    if start <= 0 or not np.isfinite(start) or not np.isfinite(end):
        return None
    return (end - start) / start * 100.0


def compute_price_returns(
    sector_prices: Mapping[str, pd.DataFrame],
    sectors: Sequence[str] = SECTOR_NAMES,
    config: MomentumConfig | None = None,
) -> pd.DataFrame:
    """Trailing percent returns for every configured horizon.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    sectors : Sequence[str]
        Sector universe.
    config : MomentumConfig or None
        Horizons and history requirements.

    Returns
    -------
    pd.DataFrame
        Sectors x horizons (``"3mo"``, ``"6mo"``, ``"12mo"``).  A horizon
        the series does not cover is NaN; sectors with no horizon at all
        are absent.
    """
    if config is None:
        config = MomentumConfig()

    columns = [period_label(m) for m in config.return_periods]
    rows: dict[str, dict[str, float]] = {}
    for sector in sectors:
        frame = sector_prices.get(sector)
        if frame is None or len(frame) < config.min_history:
            continue
        close = frame["close"]
        returns: dict[str, float] = {}
        for months in config.return_periods:
            ret = compute_period_return(close, months * config.trading_days_per_month)
            if ret is not None:
                returns[period_label(months)] = ret
        if returns:
            rows[sector] = returns

    return pd.DataFrame(
        [[row.get(col, np.nan) for col in columns] for row in rows.values()],
        index=pd.Index(list(rows), dtype=object),
        columns=columns,
        dtype=float,
    )


def compute_relative_strength(
    sector_prices: Mapping[str, pd.DataFrame],
    benchmark_prices: pd.DataFrame | None,
    period_months: int = 12,
    sectors: Sequence[str] = SECTOR_NAMES,
    trading_days_per_month: int = 21,
) -> pd.Series:
    """Sector return minus benchmark return over the same window.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    benchmark_prices : pd.DataFrame or None
        Benchmark OHLCV frame.
    period_months : int
        Window length in months.
    sectors : Sequence[str]
        Sector universe.
    trading_days_per_month : int
        Bars per month.

    Returns
    -------
    pd.Series
        Sector -> relative strength in percentage points.  Empty when the
        benchmark is missing or too short.
    """
    trading_days = period_months * trading_days_per_month
    if benchmark_prices is None or benchmark_prices.empty:
        return pd.Series(dtype=float)

    benchmark_return = compute_period_return(benchmark_prices["close"], trading_days)
    if benchmark_return is None:
        return pd.Series(dtype=float)

    strength: dict[str, float] = {}
    for sector in sectors:
        frame = sector_prices.get(sector)
        if frame is None:
            continue
        ret = compute_period_return(frame["close"], trading_days)
        if ret is not None:
            strength[sector] = ret - benchmark_return
    return pd.Series(strength, dtype=float)


def compute_volume_trend(
    sector_prices: Mapping[str, pd.DataFrame],
    short_window: int = 20,
    long_window: int = 50,
    sectors: Sequence[str] = SECTOR_NAMES,
) -> pd.Series:
    """Percent deviation of short-window average volume from long-window.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    short_window : int
        Short averaging window in bars.
    long_window : int
        Long averaging window in bars.
    sectors : Sequence[str]
        Sector universe.

    Returns
    -------
    pd.Series
        Sector -> ``(short_avg - long_avg) / long_avg * 100``.  Sectors
        shorter than ``long_window`` or with zero long average are
        absent.

    Raises
    ------
    ConfigurationError
        If ``short_window`` is not between 1 and ``long_window``.
    """
    if not 1 <= short_window <= long_window:
        msg = (
            f"volume windows must satisfy 1 <= short_window <= long_window, "
            f"got {short_window} and {long_window}"
        )
        raise ConfigurationError(msg)

    trends: dict[str, float] = {}
    for sector in sectors:
        frame = sector_prices.get(sector)
        if frame is None or len(frame) < long_window:
            continue
        volume = frame["volume"].to_numpy(dtype=float)
        short_avg = volume[-short_window:].mean()
        long_avg = volume[-long_window:].mean()
        if long_avg > 0:
            trends[sector] = (short_avg - long_avg) / long_avg * 100.0
    return pd.Series(trends, dtype=float)


def compute_momentum_score(
    sector_prices: Mapping[str, pd.DataFrame],
    benchmark_prices: pd.DataFrame | None = None,
    sectors: Sequence[str] = SECTOR_NAMES,
    config: MomentumConfig | None = None,
) -> pd.Series:
    """Blend of normalized return, relative strength and volume trend.

    Each component is z-score normalized on its own; a sector missing
    a component gets 50 for it before the blend.

    Parameters
    ----------
    sector_prices : Mapping[str, pd.DataFrame]
        Sector -> OHLCV frame.
    benchmark_prices : pd.DataFrame or None
        Benchmark OHLCV frame.
    sectors : Sequence[str]
        Sector universe.
    config : MomentumConfig or None
        Blend weights and windows.

    Returns
    -------
    pd.Series
        Momentum score per sector, indexed by ``sectors``.
    """
    if config is None:
        config = MomentumConfig()

    returns = compute_price_returns(sector_prices, sectors, config)
    label = period_label(config.score_period)
    period_returns = returns[label] if label in returns.columns else pd.Series(dtype=float)

    relative = compute_relative_strength(
        sector_prices,
        benchmark_prices,
        config.score_period,
        sectors,
        config.trading_days_per_month,
    )
    volume = compute_volume_trend(
        sector_prices,
        config.volume_short_window,
        config.volume_long_window,
        sectors,
    )

    return_scores = fill_missing(
        z_score_normalize(drop_non_finite(period_returns)), sectors, NEUTRAL_SCORE
    )
    relative_scores = fill_missing(
        z_score_normalize(drop_non_finite(relative)), sectors, NEUTRAL_SCORE
    )
    volume_scores = fill_missing(
        z_score_normalize(drop_non_finite(volume)), sectors, NEUTRAL_SCORE
    )

    if returns.empty:
        logger.debug("No sector covers the momentum window; return component neutral")

    combined = (
        config.return_weight * return_scores
        + config.relative_strength_weight * relative_scores
        + config.volume_weight * volume_scores
    )
    return round_score(combined)
