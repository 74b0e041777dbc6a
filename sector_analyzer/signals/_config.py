"""Configuration for signal normalization and signal calculators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sector_analyzer.exceptions import ConfigurationError
from sector_analyzer.sectors import REFERENCE_RATE_KEY

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SignalType(str, Enum):
    """Scoring dimensions, in declaration order."""

    MOMENTUM = "momentum"
    VALUATION = "valuation"
    GROWTH = "growth"
    INNOVATION = "innovation"
    MACRO = "macro"


class NormalizationMethod(str, Enum):
    """Mapping of raw metrics onto the 0-100 score scale."""

    MIN_MAX = "min_max"
    Z_SCORE = "z_score"


# ---------------------------------------------------------------------------
# Score constants
# ---------------------------------------------------------------------------

NEUTRAL_SCORE = 50.0
INNOVATION_MISSING_SCORE = 30.0

# 50 + z * 15 puts +/-2 std near the edges of the 0-100 range
Z_SCORE_SCALE = 15.0

TRADING_DAYS_PER_MONTH = 21

BLEND_WEIGHT_TOLERANCE = 0.01


# ---------------------------------------------------------------------------
# Frozen dataclass configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MomentumConfig:
    """Configuration for the momentum signal.

    Parameters
    ----------
    return_periods : tuple[int, ...]
        Return horizons in months reported for display.
    score_period : int
        Horizon in months used for the return and relative-strength
        components of the score.  Must be one of ``return_periods``.
    trading_days_per_month : int
        Calendar approximation of trading days per month.
    min_history : int
        Series shorter than this many bars produce no returns.
    return_weight : float
        Blend weight for the normalized price return.  The three blend
        weights must sum to 1.0 within 0.01.
    relative_strength_weight : float
        Blend weight for the normalized relative strength.
    volume_weight : float
        Blend weight for the normalized volume trend.
    volume_short_window : int
        Short volume averaging window in trading days.
    volume_long_window : int
        Long volume averaging window in trading days.
    """

    return_periods: tuple[int, ...] = (3, 6, 12)
    score_period: int = 12
    trading_days_per_month: int = TRADING_DAYS_PER_MONTH
    min_history: int = 20
    return_weight: float = 0.50
    relative_strength_weight: float = 0.35
    volume_weight: float = 0.15
    volume_short_window: int = 20
    volume_long_window: int = 50

    def __post_init__(self) -> None:
        if not self.return_periods or any(m < 1 for m in self.return_periods):
            msg = f"return_periods must be positive months, got {self.return_periods}"
            raise ConfigurationError(msg)
        if self.score_period not in self.return_periods:
            msg = (
                f"score_period ({self.score_period}) must be one of "
                f"return_periods {self.return_periods}"
            )
            raise ConfigurationError(msg)
        if self.trading_days_per_month < 1:
            msg = f"trading_days_per_month must be >= 1, got {self.trading_days_per_month}"
            raise ConfigurationError(msg)
        if self.min_history < 1:
            msg = f"min_history must be >= 1, got {self.min_history}"
            raise ConfigurationError(msg)
        if self.volume_short_window < 1:
            msg = f"volume_short_window must be >= 1, got {self.volume_short_window}"
            raise ConfigurationError(msg)
        if self.volume_short_window > self.volume_long_window:
            msg = (
                f"volume_short_window ({self.volume_short_window}) must be "
                f"<= volume_long_window ({self.volume_long_window})"
            )
            raise ConfigurationError(msg)
        weights = (
            self.return_weight,
            self.relative_strength_weight,
            self.volume_weight,
        )
        if any(w < 0 for w in weights):
            msg = f"momentum blend weights must be non-negative, got {weights}"
            raise ConfigurationError(msg)
        if abs(sum(weights) - 1.0) > BLEND_WEIGHT_TOLERANCE:
            msg = f"momentum blend weights must sum to 1.0, got {sum(weights)}"
            raise ConfigurationError(msg)

    @classmethod
    def for_default(cls) -> MomentumConfig:
        """12-month returns blended 50/35/15 with 20d/50d volume trend."""
        return cls()

    @classmethod
    def for_price_only(cls) -> MomentumConfig:
        """Ignore volume; blend return and relative strength only."""
        return cls(return_weight=0.6, relative_strength_weight=0.4, volume_weight=0.0)


@dataclass(frozen=True)
class GrowthConfig:
    """Configuration for the employment-growth signal.

    Parameters
    ----------
    lookback : int
        Observations spanned by the year-over-year comparison; the base
        value is the ``lookback``-th observation from the end.
    """

    lookback: int = 13

    def __post_init__(self) -> None:
        if self.lookback < 2:
            msg = f"lookback must be >= 2, got {self.lookback}"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class MacroConfig:
    """Configuration for the interest-rate sensitivity signal.

    Parameters
    ----------
    reference_key : str
        Key of the reference interest-rate series in the macro data.
    stride : int
        Trading days per approximate month when sampling daily prices.
    min_observations : int
        Minimum aligned monthly points needed for a correlation.
    """

    reference_key: str = REFERENCE_RATE_KEY
    stride: int = TRADING_DAYS_PER_MONTH
    min_observations: int = 12

    def __post_init__(self) -> None:
        if self.min_observations < 2:
            msg = f"min_observations must be >= 2, got {self.min_observations}"
            raise ConfigurationError(msg)
        if self.stride < 1:
            msg = f"stride must be >= 1, got {self.stride}"
            raise ConfigurationError(msg)
