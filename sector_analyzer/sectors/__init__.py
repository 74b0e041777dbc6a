"""The fixed GICS sector universe and provider reference tables."""

from sector_analyzer.sectors._constants import (
    BLS_EMPLOYMENT_SERIES,
    DAMODARAN_TO_GICS,
    DEFAULT_RD_INTENSITY,
    FRED_SERIES,
    MARKET_BENCHMARK,
    REFERENCE_RATE_KEY,
    SECTOR_ETFS,
    SECTOR_NAMES,
)

__all__ = [
    "BLS_EMPLOYMENT_SERIES",
    "DAMODARAN_TO_GICS",
    "DEFAULT_RD_INTENSITY",
    "FRED_SERIES",
    "MARKET_BENCHMARK",
    "REFERENCE_RATE_KEY",
    "SECTOR_ETFS",
    "SECTOR_NAMES",
]
