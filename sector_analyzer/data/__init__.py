"""Market snapshot types, builders, storage, and quality reporting."""

from sector_analyzer.data._frames import build_price_frame, build_time_series
from sector_analyzer.data._quality import (
    DataQualityReport,
    DataSourceStatus,
    SourceStatus,
    assess_data_quality,
)
from sector_analyzer.data._rd import aggregate_industry_rd
from sector_analyzer.data._store import SnapshotLoader, SnapshotStore
from sector_analyzer.data._types import PRICE_COLUMNS, MarketSnapshot, SectorInfo

__all__ = [
    "PRICE_COLUMNS",
    "DataQualityReport",
    "DataSourceStatus",
    "MarketSnapshot",
    "SectorInfo",
    "SnapshotLoader",
    "SnapshotStore",
    "SourceStatus",
    "aggregate_industry_rd",
    "assess_data_quality",
    "build_price_frame",
    "build_time_series",
]
