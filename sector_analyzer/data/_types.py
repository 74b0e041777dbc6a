"""Snapshot types consumed by the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

PRICE_COLUMNS: tuple[str, ...] = ("open", "high", "low", "close", "volume")


@dataclass(frozen=True)
class SectorInfo:
    """Per-sector ETF metadata.  Every field is optional.

    Parameters
    ----------
    forward_pe : float or None
        Forward price/earnings ratio.
    trailing_pe : float or None
        Trailing price/earnings ratio.
    dividend_yield : float or None
        Dividend yield as a fraction.
    avg_volume : float or None
        Average daily share volume.
    market_cap : float or None
        Fund market capitalisation (USD).
    """

    forward_pe: float | None = None
    trailing_pe: float | None = None
    dividend_yield: float | None = None
    avg_volume: float | None = None
    market_cap: float | None = None


@dataclass(frozen=True)
class MarketSnapshot:
    """Aggregated provider data handed to the scoring engine.

    The snapshot is shared by reference between concurrent scoring
    calls; nothing in the engine mutates it.  Any collection may be
    partially or fully empty.

    Attributes
    ----------
    sector_prices : dict[str, pd.DataFrame]
        Sector name -> daily OHLCV frame (ascending ``DatetimeIndex``).
    benchmark_prices : pd.DataFrame or None
        Market benchmark OHLCV frame used for relative strength.
    sector_info : dict[str, SectorInfo]
        Sector name -> ETF metadata.
    sector_pe : dict[str, float]
        Primary forward P/E source; ``sector_info`` is the fallback.
    macro_data : dict[str, pd.Series]
        Named macro series (e.g. ``"treasury_10y"``).
    employment_data : dict[str, pd.Series]
        Sector name -> monthly employment level series.
    rd_data : dict[str, float]
        Sector name -> R&D intensity (R&D / revenue).
    fetched_at : datetime or None
        When the underlying data was acquired.
    """

    sector_prices: dict[str, pd.DataFrame] = field(default_factory=dict)
    benchmark_prices: pd.DataFrame | None = None
    sector_info: dict[str, SectorInfo] = field(default_factory=dict)
    sector_pe: dict[str, float] = field(default_factory=dict)
    macro_data: dict[str, pd.Series] = field(default_factory=dict)
    employment_data: dict[str, pd.Series] = field(default_factory=dict)
    rd_data: dict[str, float] = field(default_factory=dict)
    fetched_at: datetime | None = None

    @classmethod
    def empty(cls) -> MarketSnapshot:
        """Snapshot with no data at all."""
        return cls()
