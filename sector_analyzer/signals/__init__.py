"""Signal normalization and the five sector signal calculators."""

from sector_analyzer.signals._config import (
    BLEND_WEIGHT_TOLERANCE,
    INNOVATION_MISSING_SCORE,
    NEUTRAL_SCORE,
    TRADING_DAYS_PER_MONTH,
    Z_SCORE_SCALE,
    GrowthConfig,
    MacroConfig,
    MomentumConfig,
    NormalizationMethod,
    SignalType,
)
from sector_analyzer.signals._growth import (
    compute_employment_growth,
    compute_growth_score,
)
from sector_analyzer.signals._innovation import compute_innovation_score
from sector_analyzer.signals._macro import (
    compute_macro_score,
    compute_monthly_changes,
    compute_monthly_returns,
    compute_rate_sensitivity,
)
from sector_analyzer.signals._momentum import (
    compute_momentum_score,
    compute_period_return,
    compute_price_returns,
    compute_relative_strength,
    compute_volume_trend,
    period_label,
)
from sector_analyzer.signals._normalization import (
    drop_non_finite,
    fill_missing,
    min_max_normalize,
    normalize,
    round_score,
    score_or_default,
    z_score_normalize,
)
from sector_analyzer.signals._valuation import (
    collect_forward_pe,
    compute_valuation_score,
)

__all__ = [
    "BLEND_WEIGHT_TOLERANCE",
    "INNOVATION_MISSING_SCORE",
    "NEUTRAL_SCORE",
    "TRADING_DAYS_PER_MONTH",
    "Z_SCORE_SCALE",
    "GrowthConfig",
    "MacroConfig",
    "MomentumConfig",
    "NormalizationMethod",
    "SignalType",
    "collect_forward_pe",
    "compute_employment_growth",
    "compute_growth_score",
    "compute_innovation_score",
    "compute_macro_score",
    "compute_momentum_score",
    "compute_monthly_changes",
    "compute_monthly_returns",
    "compute_period_return",
    "compute_price_returns",
    "compute_rate_sensitivity",
    "compute_relative_strength",
    "compute_valuation_score",
    "compute_volume_trend",
    "drop_non_finite",
    "fill_missing",
    "min_max_normalize",
    "normalize",
    "round_score",
    "period_label",
    "score_or_default",
    "z_score_normalize",
]
