"""Aggregation of industry-level R&D intensity onto sectors."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import pandas as pd

from sector_analyzer.exceptions import DataError
from sector_analyzer.sectors import DAMODARAN_TO_GICS, SECTOR_NAMES

logger = logging.getLogger(__name__)


def aggregate_industry_rd(
    industry_rd: Mapping[str, float] | pd.Series,
    industry_map: Mapping[str, str] | None = None,
    sectors: tuple[str, ...] = SECTOR_NAMES,
    min_sectors: int = 3,
) -> dict[str, float]:
    """Average industry R&D/revenue ratios within each sector.

    Industries absent from ``industry_map`` and ratios outside
    ``[0, 1]`` are ignored.  Sectors with no mapped industry get 0.0.

    Parameters
    ----------
    industry_rd : Mapping[str, float] or pd.Series
        Industry name -> R&D as a fraction of revenue.
    industry_map : Mapping[str, str] or None
        Industry name -> sector.  Defaults to ``DAMODARAN_TO_GICS``.
    sectors : tuple[str, ...]
        Sector universe.
    min_sectors : int
        Minimum number of sectors that must end up with a positive
        intensity.

    Returns
    -------
    dict[str, float]
        Sector -> mean R&D intensity, one entry per sector.

    Raises
    ------
    DataError
        If fewer than ``min_sectors`` sectors have a positive value.
    """
    if industry_map is None:
        industry_map = DAMODARAN_TO_GICS

    raw = pd.Series(industry_rd, dtype=float).dropna()
    raw = raw[(raw >= 0.0) & (raw <= 1.0)]

    sector_keys = pd.Series(
        [industry_map.get(str(name).strip()) for name in raw.index],
        index=raw.index,
        dtype=object,
    )
    mapped = raw.groupby(sector_keys).mean()

    result = {sector: float(mapped.get(sector, 0.0)) for sector in sectors}

    n_positive = sum(1 for v in result.values() if v > 0)
    if n_positive < min_sectors:
        msg = (
            f"insufficient R&D data: only {n_positive} sectors with a "
            f"positive intensity, need {min_sectors}"
        )
        raise DataError(msg)

    logger.debug("Aggregated R&D intensity for %d sectors", n_positive)
    return result
