"""Cross-sectional normalization of raw metrics onto a 0-100 scale."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np
import pandas as pd
from scipy import stats as sp_stats

from sector_analyzer.signals._config import (
    NEUTRAL_SCORE,
    Z_SCORE_SCALE,
    NormalizationMethod,
)

RawMetrics = Mapping[str, float] | pd.Series


def round_score(values):
    """Round to 2 decimals with halves away from zero.

    Accepts a scalar, ndarray or Series.  Unlike ``round`` and
    ``Series.round`` an exact half never rounds to even: 0.125 gives
    0.13.
    """
    return np.sign(values) * np.floor(np.abs(values) * 100.0 + 0.5) / 100.0


def _as_series(raw: RawMetrics) -> pd.Series:
    if isinstance(raw, pd.Series):
        return raw.astype(float)
    return pd.Series(dict(raw), dtype=float)


def drop_non_finite(raw: RawMetrics) -> pd.Series:
    """Remove NaN and infinite values from a raw metric map.

    Parameters
    ----------
    raw : Mapping[str, float] or pd.Series
        Sector -> raw metric.

    Returns
    -------
    pd.Series
        The finite entries only.
    """
    series = _as_series(raw)
    return series[np.isfinite(series.to_numpy())]


def min_max_normalize(
    raw: RawMetrics,
    higher_is_better: bool = True,
) -> pd.Series:
    """Min-max normalization: ``(x - min) / (max - min) * 100``.

    Parameters
    ----------
    raw : Mapping[str, float] or pd.Series
        Sector -> raw metric.  Must already be free of NaN/inf.
    higher_is_better : bool
        When ``False`` scores are inverted (``100 - score``).

    Returns
    -------
    pd.Series
        Scores in ``[0, 100]`` rounded to 2 decimals.  Empty input gives
        an empty series; zero spread gives 50.0 for every sector.
    """
    values = _as_series(raw)
    if values.empty:
        return values

    lo = values.min()
    hi = values.max()
    if hi == lo:
        return pd.Series(NEUTRAL_SCORE, index=values.index)

    scores = (values - lo) / (hi - lo) * 100.0
    if not higher_is_better:
        scores = 100.0 - scores
    return round_score(scores)


def z_score_normalize(
    raw: RawMetrics,
    higher_is_better: bool = True,
) -> pd.Series:
    """Z-score normalization mapped to ``50 + 15 * z`` and clamped.

    Uses the population mean and standard deviation.  A typical sector
    lands near 50 and +/-2 standard deviations reach the bounds, which
    keeps one outlier from flattening everyone else the way min-max
    does.

    Parameters
    ----------
    raw : Mapping[str, float] or pd.Series
        Sector -> raw metric.  Must already be free of NaN/inf.
    higher_is_better : bool
        When ``False`` clamped scores are inverted (``100 - score``).

    Returns
    -------
    pd.Series
        Scores in ``[0, 100]`` rounded to 2 decimals.  Empty input gives
        an empty series; zero variance gives 50.0 for every sector.
    """
    values = _as_series(raw)
    if values.empty:
        return values

    arr = values.to_numpy()
    if arr.max() == arr.min() or arr.std() == 0:
        return pd.Series(NEUTRAL_SCORE, index=values.index)

    z = sp_stats.zscore(arr, ddof=0)
    scores = pd.Series(
        np.clip(NEUTRAL_SCORE + z * Z_SCORE_SCALE, 0.0, 100.0),
        index=values.index,
    )
    if not higher_is_better:
        scores = 100.0 - scores
    return round_score(scores)


def normalize(
    raw: RawMetrics,
    method: NormalizationMethod = NormalizationMethod.Z_SCORE,
    higher_is_better: bool = True,
) -> pd.Series:
    """Dispatch to :func:`z_score_normalize` or :func:`min_max_normalize`."""
    if method == NormalizationMethod.MIN_MAX:
        return min_max_normalize(raw, higher_is_better)
    return z_score_normalize(raw, higher_is_better)


def score_or_default(scores: RawMetrics, sector: str, default: float) -> float:
    """Look up one sector's score, falling back to ``default``."""
    value = scores.get(sector)
    if value is None or not np.isfinite(value):
        return default
    return float(value)


def fill_missing(
    scores: RawMetrics,
    sectors: Iterable[str],
    default: float,
) -> pd.Series:
    """Return one score per sector, supplying ``default`` for gaps.

    Parameters
    ----------
    scores : Mapping[str, float] or pd.Series
        Partial sector -> score map.
    sectors : Iterable[str]
        Full sector universe, in output order.
    default : float
        Score for sectors missing from ``scores``.

    Returns
    -------
    pd.Series
        Scores indexed by ``sectors`` in the given order.  Entries of
        ``scores`` outside the universe are dropped.
    """
    sectors = list(sectors)
    return pd.Series(
        [score_or_default(scores, s, default) for s in sectors],
        index=pd.Index(sectors, dtype=object),
        dtype=float,
    )
