"""Tests for the momentum signal."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from sector_analyzer.exceptions import ConfigurationError
from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.signals import (
    MomentumConfig,
    compute_momentum_score,
    compute_period_return,
    compute_price_returns,
    compute_relative_strength,
    compute_volume_trend,
    round_score,
    z_score_normalize,
)


class TestMomentumConfig:
    def test_defaults(self) -> None:
        cfg = MomentumConfig()
        assert cfg.return_periods == (3, 6, 12)
        assert cfg.score_period == 12
        assert cfg.trading_days_per_month == 21
        assert (cfg.return_weight, cfg.relative_strength_weight, cfg.volume_weight) == (
            0.50,
            0.35,
            0.15,
        )
        assert (cfg.volume_short_window, cfg.volume_long_window) == (20, 50)

    def test_frozen(self) -> None:
        cfg = MomentumConfig()
        with pytest.raises(AttributeError):
            cfg.score_period = 6  # type: ignore[misc]

    def test_score_period_must_be_reported(self) -> None:
        with pytest.raises(ConfigurationError, match="score_period"):
            MomentumConfig(score_period=9)

    def test_short_window_above_long_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="volume_short_window"):
            MomentumConfig(volume_short_window=60, volume_long_window=50)

    def test_negative_blend_weight_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="non-negative"):
            MomentumConfig(volume_weight=-0.1)

    def test_price_only_preset(self) -> None:
        assert MomentumConfig.for_price_only().volume_weight == 0.0

    def test_blend_weights_must_sum_to_one(self) -> None:
        with pytest.raises(ConfigurationError, match="sum to 1.0"):
            MomentumConfig(return_weight=1.0, relative_strength_weight=1.0, volume_weight=1.0)

    def test_blend_weights_within_tolerance(self) -> None:
        cfg = MomentumConfig(return_weight=0.5, relative_strength_weight=0.35, volume_weight=0.155)
        assert cfg.volume_weight == 0.155

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("volume_short_window", 0),
            ("trading_days_per_month", 0),
            ("min_history", 0),
        ],
    )
    def test_non_positive_window_raises(self, field: str, value: int) -> None:
        with pytest.raises(ConfigurationError, match=field):
            MomentumConfig(**{field: value})

    def test_non_positive_return_period_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="return_periods"):
            MomentumConfig(return_periods=(0, 12))

    def test_empty_return_periods_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="return_periods"):
            MomentumConfig(return_periods=())


class TestComputePeriodReturn:
    def test_window_from_tail(self) -> None:
        close = pd.Series(np.arange(1.0, 301.0))
        # 252 bars back from the end is the value 49
        assert compute_period_return(close, 252) == pytest.approx((300 - 49) / 49 * 100)

    def test_too_short(self) -> None:
        assert compute_period_return(pd.Series([1.0, 2.0]), 3) is None

    def test_non_positive_start(self) -> None:
        assert compute_period_return(pd.Series([0.0, 1.0, 2.0]), 3) is None


class TestComputePriceReturns:
    def test_partial_horizons(self, make_price_frame) -> None:
        prices = {
            "Energy": make_price_frame(np.linspace(100, 120, 100)),
            "Utilities": make_price_frame(np.linspace(100, 80, 300)),
        }
        result = compute_price_returns(prices)
        assert list(result.columns) == ["3mo", "6mo", "12mo"]
        assert not np.isnan(result.loc["Energy", "3mo"])
        assert np.isnan(result.loc["Energy", "6mo"])
        assert np.isnan(result.loc["Energy", "12mo"])
        assert result.loc["Utilities"].notna().all()
        assert result.loc["Utilities", "12mo"] < 0

    def test_history_below_minimum_absent(self, make_price_frame) -> None:
        prices = {"Energy": make_price_frame(np.linspace(100, 101, 10))}
        result = compute_price_returns(prices)
        assert result.empty
        assert list(result.columns) == ["3mo", "6mo", "12mo"]

    def test_ignores_sectors_outside_universe(self, make_price_frame) -> None:
        prices = {"Crypto": make_price_frame(np.linspace(1, 2, 300))}
        assert compute_price_returns(prices).empty


class TestComputeRelativeStrength:
    def test_flat_benchmark(self, make_price_frame) -> None:
        closes = np.linspace(100, 150, 300)
        prices = {"Energy": make_price_frame(closes)}
        benchmark = make_price_frame(np.full(300, 400.0))
        result = compute_relative_strength(prices, benchmark)
        expected = compute_period_return(pd.Series(closes), 252)
        assert result["Energy"] == pytest.approx(expected)

    def test_missing_benchmark(self, make_price_frame) -> None:
        prices = {"Energy": make_price_frame(np.linspace(100, 150, 300))}
        assert compute_relative_strength(prices, None).empty

    def test_short_benchmark(self, make_price_frame) -> None:
        prices = {"Energy": make_price_frame(np.linspace(100, 150, 300))}
        benchmark = make_price_frame(np.full(100, 400.0))
        assert compute_relative_strength(prices, benchmark).empty

    def test_short_sector_absent(self, make_price_frame) -> None:
        prices = {
            "Energy": make_price_frame(np.linspace(100, 150, 300)),
            "Utilities": make_price_frame(np.linspace(100, 150, 200)),
        }
        benchmark = make_price_frame(np.full(300, 400.0))
        result = compute_relative_strength(prices, benchmark)
        assert "Energy" in result.index
        assert "Utilities" not in result.index


class TestComputeVolumeTrend:
    def test_short_vs_long_average(self, make_price_frame) -> None:
        volumes = np.concatenate([np.full(30, 100.0), np.full(20, 200.0)])
        prices = {"Energy": make_price_frame(np.full(50, 10.0), volumes)}
        result = compute_volume_trend(prices)
        # short avg 200, long avg 140
        assert result["Energy"] == pytest.approx((200 - 140) / 140 * 100)

    def test_shorter_than_long_window(self, make_price_frame) -> None:
        prices = {"Energy": make_price_frame(np.full(49, 10.0))}
        assert compute_volume_trend(prices).empty

    def test_zero_volume_absent(self, make_price_frame) -> None:
        prices = {"Energy": make_price_frame(np.full(60, 10.0), np.zeros(60))}
        assert compute_volume_trend(prices).empty

    @pytest.mark.parametrize(("short", "long"), [(0, 50), (60, 50)])
    def test_invalid_windows_raise(self, make_price_frame, short: int, long: int) -> None:
        volumes = np.concatenate([np.full(50, 1000.0), np.full(50, 3000.0)])
        prices = {"Energy": make_price_frame(np.full(100, 10.0), volumes)}
        with pytest.raises(ConfigurationError, match="volume windows"):
            compute_volume_trend(prices, short_window=short, long_window=long)

    def test_nan_volume_tail_absent(self, make_price_frame) -> None:
        volumes = np.full(60, 100.0)
        volumes[-1] = np.nan
        prices = {"Energy": make_price_frame(np.full(60, 10.0), volumes)}
        assert compute_volume_trend(prices).empty


class TestComputeMomentumScore:
    def test_full_coverage(self, sector_prices, benchmark_prices) -> None:
        result = compute_momentum_score(sector_prices, benchmark_prices)
        assert list(result.index) == list(SECTOR_NAMES)
        assert result.between(0.0, 100.0).all()

    def test_no_data_is_neutral(self) -> None:
        result = compute_momentum_score({}, None)
        assert list(result.index) == list(SECTOR_NAMES)
        assert (result == 50.0).all()

    def test_blend_of_normalized_components(self, sector_prices, benchmark_prices) -> None:
        returns = compute_price_returns(sector_prices)["12mo"]
        relative = compute_relative_strength(sector_prices, benchmark_prices)
        volume = compute_volume_trend(sector_prices)
        expected = (
            0.50 * z_score_normalize(returns)
            + 0.35 * z_score_normalize(relative)
            + 0.15 * z_score_normalize(volume)
        )
        expected = round_score(expected)

        result = compute_momentum_score(sector_prices, benchmark_prices)
        pd.testing.assert_series_equal(
            result, expected.reindex(result.index), check_names=False
        )

    def test_missing_components_default_to_neutral(self, make_price_frame) -> None:
        # 60 bars: volume trend only, no 12-month return or relative strength
        volumes = np.concatenate([np.full(40, 100.0), np.full(20, 300.0)])
        prices = {
            "Energy": make_price_frame(np.full(60, 10.0), volumes),
            "Utilities": make_price_frame(np.full(60, 10.0)),
        }
        result = compute_momentum_score(prices, None)
        # volume component: Energy 65, Utilities 35; others 50
        assert result["Energy"] == pytest.approx(0.50 * 50 + 0.35 * 50 + 0.15 * 65)
        assert result["Utilities"] == pytest.approx(0.50 * 50 + 0.35 * 50 + 0.15 * 35)
        assert result["Financials"] == 50.0

    def test_custom_universe(self, sector_prices, benchmark_prices) -> None:
        sectors = ("Energy", "Utilities", "Financials")
        result = compute_momentum_score(sector_prices, benchmark_prices, sectors=sectors)
        assert list(result.index) == list(sectors)

    def test_nan_tail_gets_neutral_components(self, sector_prices, benchmark_prices) -> None:
        prices = dict(sector_prices)
        broken = prices["Energy"].copy()
        broken.iloc[-1, broken.columns.get_loc("close")] = np.nan
        broken.iloc[-1, broken.columns.get_loc("volume")] = np.inf
        prices["Energy"] = broken

        result = compute_momentum_score(prices, benchmark_prices)
        assert result["Energy"] == 50.0
        assert result.drop("Energy").nunique() > 1
        assert result.between(0.0, 100.0).all()

    def test_nan_benchmark_tail(self, sector_prices, benchmark_prices) -> None:
        benchmark = benchmark_prices.copy()
        benchmark.iloc[-1, benchmark.columns.get_loc("close")] = np.nan
        assert compute_relative_strength(sector_prices, benchmark).empty
        result = compute_momentum_score(sector_prices, benchmark)
        assert result.between(0.0, 100.0).all()
