"""Per-provider data-quality report for a market snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sector_analyzer.data._types import MarketSnapshot


class SourceStatus(str, Enum):
    """Health of a single data provider."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


_SEVERITY: dict[SourceStatus, int] = {
    SourceStatus.OK: 0,
    SourceStatus.WARNING: 1,
    SourceStatus.ERROR: 2,
}


@dataclass(frozen=True)
class DataSourceStatus:
    """Status line for one provider."""

    name: str
    status: SourceStatus
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "status": self.status.value, "message": self.message}


@dataclass(frozen=True)
class DataQualityReport:
    """Status of every provider plus the worst-case overall status."""

    sources: tuple[DataSourceStatus, ...] = field(default_factory=tuple)
    overall_status: SourceStatus = SourceStatus.OK

    def to_dict(self) -> dict[str, Any]:
        return {
            "sources": [s.to_dict() for s in self.sources],
            "overall_status": self.overall_status.value,
        }


def _grade(
    name: str,
    count: int,
    ok_at: int,
    ok_msg: str,
    partial_msg: str,
    empty: tuple[SourceStatus, str],
) -> DataSourceStatus:
    if count >= ok_at:
        return DataSourceStatus(name, SourceStatus.OK, ok_msg.format(count))
    if count > 0:
        return DataSourceStatus(name, SourceStatus.WARNING, partial_msg.format(count))
    return DataSourceStatus(name, empty[0], empty[1])


def assess_data_quality(snapshot: MarketSnapshot | None) -> DataQualityReport:
    """Grade each provider's contribution to a snapshot.

    Parameters
    ----------
    snapshot : MarketSnapshot or None
        Snapshot to inspect.  ``None`` means no data has been loaded.

    Returns
    -------
    DataQualityReport
        One status per provider (Yahoo Finance, FRED, BLS, Damodaran)
        and the most severe status as the overall status.
    """
    names = ("Yahoo Finance", "FRED", "BLS", "Damodaran")
    if snapshot is None:
        sources = tuple(
            DataSourceStatus(n, SourceStatus.ERROR, "Data not loaded yet")
            for n in names
        )
        return DataQualityReport(sources=sources, overall_status=SourceStatus.ERROR)

    n_rd = sum(1 for v in snapshot.rd_data.values() if v > 0)
    sources = (
        _grade(
            names[0],
            len(snapshot.sector_prices),
            10,
            "{} sectors loaded",
            "Only {} sectors loaded",
            (SourceStatus.ERROR, "No price data available"),
        ),
        _grade(
            names[1],
            len(snapshot.macro_data),
            3,
            "{} series loaded",
            "Only {} series loaded",
            (SourceStatus.WARNING, "No macro series loaded"),
        ),
        _grade(
            names[2],
            len(snapshot.employment_data),
            8,
            "{} sectors loaded",
            "Only {} sectors loaded",
            (SourceStatus.WARNING, "No employment data"),
        ),
        _grade(
            names[3],
            n_rd,
            8,
            "{} sectors with R&D data",
            "Only {} sectors with R&D data",
            (SourceStatus.ERROR, "R&D data failed to load"),
        ),
    )
    overall = max((s.status for s in sources), key=_SEVERITY.__getitem__)
    return DataQualityReport(sources=sources, overall_status=overall)
