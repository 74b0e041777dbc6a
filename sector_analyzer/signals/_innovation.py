"""Innovation signal from R&D intensity."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import pandas as pd

from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals._config import INNOVATION_MISSING_SCORE, NEUTRAL_SCORE
from sector_analyzer.signals._normalization import (
    drop_non_finite,
    fill_missing,
    z_score_normalize,
)

logger = logging.getLogger(__name__)


def compute_innovation_score(
    rd_data: Mapping[str, float],
    sectors: Sequence[str] = SECTOR_NAMES,
) -> pd.Series:
    """Score sectors by R&D intensity.

    Only positive intensities enter the normalization.  Sectors without
    one score 30 rather than 50, so unknown R&D spend is penalized.
    With no positive intensity anywhere every sector gets 50.

    Parameters
    ----------
    rd_data : Mapping[str, float]
        Sector -> R&D / revenue.
    sectors : Sequence[str]
        Sector universe.

    Returns
    -------
    pd.Series
        Innovation score per sector.
    """
    intensity = drop_non_finite(
        pd.Series({s: rd_data[s] for s in sectors if s in rd_data}, dtype=float)
    )
    intensity = intensity[intensity > 0]
    if intensity.empty:
        logger.debug("No positive R&D intensity; innovation scores neutral")
        return fill_missing({}, sectors, NEUTRAL_SCORE)

    return fill_missing(z_score_normalize(intensity), sectors, INNOVATION_MISSING_SCORE)
