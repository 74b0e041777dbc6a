"""Shared test fixtures for the sector analyzer test suite."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pandas as pd
import pytest

from sector_analyzer.data import MarketSnapshot, SectorInfo
from sector_analyzer.sectors import DEFAULT_RD_INTENSITY, SECTOR_NAMES

PriceFrameFactory = Callable[..., pd.DataFrame]


@pytest.fixture()
def make_price_frame() -> PriceFrameFactory:
    """Factory for OHLCV frames on a business-day index."""

    def _make(
        closes: np.ndarray | list[float],
        volumes: np.ndarray | list[float] | None = None,
        start: str = "2020-01-01",
    ) -> pd.DataFrame:
        closes = np.asarray(closes, dtype=float)
        if volumes is None:
            volumes = np.full(len(closes), 1_000_000.0)
        index = pd.bdate_range(start, periods=len(closes), name="date")
        return pd.DataFrame(
            {
                "open": closes,
                "high": closes * 1.01,
                "low": closes * 0.99,
                "close": closes,
                "volume": np.asarray(volumes, dtype=float),
            },
            index=index,
        )

    return _make


@pytest.fixture()
def sector_prices(make_price_frame: PriceFrameFactory) -> dict[str, pd.DataFrame]:
    """Synthetic prices: 11 sectors, 300 bars, seed 42, drift varies by sector."""
    rng = np.random.default_rng(42)
    frames: dict[str, pd.DataFrame] = {}
    for i, sector in enumerate(SECTOR_NAMES):
        returns = rng.normal(0.0003 * (i - 5), 0.01, 300)
        closes = 100 * np.cumprod(1 + returns)
        volumes = rng.uniform(500_000, 2_000_000, 300)
        frames[sector] = make_price_frame(closes, volumes)
    return frames


@pytest.fixture()
def benchmark_prices(make_price_frame: PriceFrameFactory) -> pd.DataFrame:
    """Synthetic benchmark, 300 bars, seed 7."""
    rng = np.random.default_rng(7)
    closes = 400 * np.cumprod(1 + rng.normal(0.0004, 0.008, 300))
    return make_price_frame(closes)


@pytest.fixture()
def treasury_10y() -> pd.Series:
    """60 monthly 10-year yields wandering around 3%."""
    rng = np.random.default_rng(3)
    values = 3.0 + np.cumsum(rng.normal(0.0, 0.1, 60))
    return pd.Series(
        values,
        index=pd.date_range("2019-01-01", periods=60, freq="MS"),
        name="treasury_10y",
    )


@pytest.fixture()
def employment_data() -> dict[str, pd.Series]:
    """36 monthly employment levels per sector with sector-specific growth."""
    index = pd.date_range("2021-01-01", periods=36, freq="MS")
    data: dict[str, pd.Series] = {}
    for i, sector in enumerate(SECTOR_NAMES):
        monthly_growth = 0.001 * (i - 4)
        data[sector] = pd.Series(
            1000.0 * (1 + monthly_growth) ** np.arange(36),
            index=index,
        )
    return data


@pytest.fixture()
def sector_info() -> dict[str, SectorInfo]:
    """Forward P/E between 12 and 22 for every sector."""
    return {
        sector: SectorInfo(forward_pe=12.0 + i, trailing_pe=14.0 + i, dividend_yield=0.02)
        for i, sector in enumerate(SECTOR_NAMES)
    }


@pytest.fixture()
def full_snapshot(
    sector_prices: dict[str, pd.DataFrame],
    benchmark_prices: pd.DataFrame,
    sector_info: dict[str, SectorInfo],
    treasury_10y: pd.Series,
    employment_data: dict[str, pd.Series],
) -> MarketSnapshot:
    """Snapshot with complete data for every sector."""
    return MarketSnapshot(
        sector_prices=sector_prices,
        benchmark_prices=benchmark_prices,
        sector_info=sector_info,
        macro_data={"treasury_10y": treasury_10y},
        employment_data=employment_data,
        rd_data=dict(DEFAULT_RD_INTENSITY),
    )
