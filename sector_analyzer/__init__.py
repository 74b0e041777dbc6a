"""Sector opportunity scoring built on pandas and scipy.

Modules
-------
sectors
    The fixed, ordered GICS sector set and static reference tables
    (sector ETFs, FRED/BLS series identifiers, Damodaran industry map).
data
    Market snapshot type, price/time-series frame builders, a
    thread-safe snapshot store, R&D aggregation, and data-quality
    reporting.
signals
    Min-max and z-score normalization onto a 0-100 scale, plus the five
    signal calculators: momentum, valuation, growth, innovation, and
    macro sensitivity.
scoring
    Weight configuration, the composite scorer that ranks sectors, and
    the summary report.
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

logging.getLogger("sector_analyzer").addHandler(logging.NullHandler())

from sector_analyzer.exceptions import (
    ConfigurationError,
    DataError,
    SectorAnalyzerError,
)

__all__ = [
    "ConfigurationError",
    "DataError",
    "SectorAnalyzerError",
]

try:
    __version__ = _pkg_version("sector-analyzer")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
