"""Valuation signal from forward P/E ratios."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from sector_analyzer.data import SectorInfo
from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals._config import NEUTRAL_SCORE
from sector_analyzer.signals._normalization import fill_missing, z_score_normalize

logger = logging.getLogger(__name__)


def _positive(value: float | None) -> bool:
    return value is not None and np.isfinite(value) and value > 0


def collect_forward_pe(
    sector_info: Mapping[str, SectorInfo],
    primary_pe: Mapping[str, float] | None = None,
    sectors: Sequence[str] = SECTOR_NAMES,
) -> pd.Series:
    """Forward P/E per sector from the primary source with a fallback.

    A primary value is used when positive; otherwise the sector's
    ``SectorInfo.forward_pe`` is used when positive.

    Parameters
    ----------
    sector_info : Mapping[str, SectorInfo]
        Secondary source.
    primary_pe : Mapping[str, float] or None
        Primary source.
    sectors : Sequence[str]
        Sector universe.

    Returns
    -------
    pd.Series
        Sector -> forward P/E, sectors with no usable value omitted.
    """
    primary_pe = primary_pe or {}
    pe: dict[str, float] = {}
    for sector in sectors:
        value = primary_pe.get(sector)
        if _positive(value):
            pe[sector] = float(value)
            continue
        info = sector_info.get(sector)
        if info is not None and _positive(info.forward_pe):
            pe[sector] = float(info.forward_pe)
    return pd.Series(pe, dtype=float)


def compute_valuation_score(
    sector_info: Mapping[str, SectorInfo],
    primary_pe: Mapping[str, float] | None = None,
    sectors: Sequence[str] = SECTOR_NAMES,
) -> pd.Series:
    """Score sectors by forward P/E; cheaper sectors score higher.

    Parameters
    ----------
    sector_info : Mapping[str, SectorInfo]
        Secondary P/E source.
    primary_pe : Mapping[str, float] or None
        Primary P/E source.
    sectors : Sequence[str]
        Sector universe.

    Returns
    -------
    pd.Series
        Valuation score per sector; 50 when a sector has no P/E.
    """
    pe = collect_forward_pe(sector_info, primary_pe, sectors)
    if pe.empty:
        logger.debug("No forward P/E data; valuation scores neutral")
        return fill_missing({}, sectors, NEUTRAL_SCORE)

    return fill_missing(
        z_score_normalize(pe, higher_is_better=False), sectors, NEUTRAL_SCORE
    )
