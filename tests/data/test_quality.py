"""Tests for the per-provider data-quality report."""

from __future__ import annotations

import pandas as pd

from sector_analyzer.data import (
    MarketSnapshot,
    SourceStatus,
    assess_data_quality,
)
from sector_analyzer.sectors import DEFAULT_RD_INTENSITY, SECTOR_NAMES


def _statuses(report) -> dict[str, SourceStatus]:
    return {s.name: s.status for s in report.sources}


class TestAssessDataQuality:
    def test_not_loaded(self) -> None:
        report = assess_data_quality(None)
        assert report.overall_status == SourceStatus.ERROR
        assert len(report.sources) == 4
        assert all(s.message == "Data not loaded yet" for s in report.sources)

    def test_full_snapshot_ok(self, full_snapshot: MarketSnapshot) -> None:
        snapshot = MarketSnapshot(
            sector_prices=full_snapshot.sector_prices,
            macro_data={
                "treasury_10y": pd.Series([1.0]),
                "treasury_2y": pd.Series([1.0]),
                "cpi": pd.Series([1.0]),
            },
            employment_data=full_snapshot.employment_data,
            rd_data=full_snapshot.rd_data,
        )
        report = assess_data_quality(snapshot)
        assert report.overall_status == SourceStatus.OK
        messages = {s.name: s.message for s in report.sources}
        assert messages["Yahoo Finance"] == "11 sectors loaded"
        assert messages["FRED"] == "3 series loaded"
        assert messages["Damodaran"] == "11 sectors with R&D data"

    def test_empty_snapshot(self) -> None:
        report = assess_data_quality(MarketSnapshot.empty())
        statuses = _statuses(report)
        assert statuses == {
            "Yahoo Finance": SourceStatus.ERROR,
            "FRED": SourceStatus.WARNING,
            "BLS": SourceStatus.WARNING,
            "Damodaran": SourceStatus.ERROR,
        }
        assert report.overall_status == SourceStatus.ERROR

    def test_partial_is_warning(self, full_snapshot: MarketSnapshot) -> None:
        prices = {s: full_snapshot.sector_prices[s] for s in SECTOR_NAMES[:4]}
        snapshot = MarketSnapshot(
            sector_prices=prices,
            macro_data=full_snapshot.macro_data,
            employment_data=full_snapshot.employment_data,
            rd_data=dict(DEFAULT_RD_INTENSITY),
        )
        report = assess_data_quality(snapshot)
        by_name = {s.name: s for s in report.sources}
        assert by_name["Yahoo Finance"].status == SourceStatus.WARNING
        assert by_name["Yahoo Finance"].message == "Only 4 sectors loaded"
        assert by_name["FRED"].status == SourceStatus.WARNING
        assert report.overall_status == SourceStatus.WARNING

    def test_zero_rd_not_counted(self) -> None:
        report = assess_data_quality(MarketSnapshot(rd_data={"Energy": 0.0}))
        assert _statuses(report)["Damodaran"] == SourceStatus.ERROR

    def test_to_dict(self) -> None:
        payload = assess_data_quality(None).to_dict()
        assert payload["overall_status"] == "error"
        assert payload["sources"][0] == {
            "name": "Yahoo Finance",
            "status": "error",
            "message": "Data not loaded yet",
        }
