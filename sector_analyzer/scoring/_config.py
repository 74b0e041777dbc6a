"""Weight configuration and driver labels for composite scoring."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields

from sector_analyzer.exceptions import ConfigurationError
from sector_analyzer.signals import SignalType

WEIGHT_TOLERANCE = 0.01

DRIVER_THRESHOLD = 70.0

# Ordered as SignalType is declared
DRIVER_LABELS: dict[SignalType, str] = {
    SignalType.MOMENTUM: "strong momentum",
    SignalType.VALUATION: "attractive valuation",
    SignalType.GROWTH: "employment growth",
    SignalType.INNOVATION: "high R&D investment",
    SignalType.MACRO: "favorable macro positioning",
}


@dataclass(frozen=True)
class ScoringWeights:
    """Relative weight of each signal in the opportunity score.

    Weights must be non-negative and finite with a positive sum.  Use
    :meth:`normalized` to obtain weights summing to 1.0.

    Parameters
    ----------
    momentum : float
        Weight of the momentum signal.
    valuation : float
        Weight of the valuation signal.
    growth : float
        Weight of the employment-growth signal.
    innovation : float
        Weight of the R&D innovation signal.
    macro : float
        Weight of the rate-sensitivity signal.
    """

    momentum: float = 0.25
    valuation: float = 0.20
    growth: float = 0.20
    innovation: float = 0.20
    macro: float = 0.15

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0:
                msg = f"weight {f.name!r} must be a finite non-negative number, got {value}"
                raise ConfigurationError(msg)
        if self.total == 0:
            msg = "at least one signal weight must be positive"
            raise ConfigurationError(msg)

    @property
    def total(self) -> float:
        return sum(self.to_dict().values())

    def get(self, signal: SignalType) -> float:
        """Weight for one signal."""
        return getattr(self, signal.value)

    def to_dict(self) -> dict[str, float]:
        return {signal.value: getattr(self, signal.value) for signal in SignalType}

    def normalized(self, tolerance: float = WEIGHT_TOLERANCE) -> ScoringWeights:
        """Rescale to sum 1.0 when the sum is off by more than ``tolerance``."""
        total = self.total
        if abs(total - 1.0) <= tolerance:
            return self
        return ScoringWeights(**{k: v / total for k, v in self.to_dict().items()})

    @classmethod
    def for_default(cls) -> ScoringWeights:
        """Momentum 0.25, valuation/growth/innovation 0.20, macro 0.15."""
        return cls()

    @classmethod
    def for_equal(cls) -> ScoringWeights:
        """Every signal weighted 0.2."""
        return cls(momentum=0.2, valuation=0.2, growth=0.2, innovation=0.2, macro=0.2)

    @classmethod
    def from_mapping(cls, weights: Mapping[str, float]) -> ScoringWeights:
        """Build from a signal-name -> weight mapping.

        Signals absent from the mapping get weight 0.

        Raises
        ------
        ConfigurationError
            If the mapping names an unknown signal or a weight is
            invalid.
        """
        known = {signal.value for signal in SignalType}
        unknown = sorted(set(weights) - known)
        if unknown:
            msg = f"unknown signal names {unknown}; expected a subset of {sorted(known)}"
            raise ConfigurationError(msg)
        return cls(**{name: float(weights.get(name, 0.0)) for name in known})

    @classmethod
    def from_overrides(cls, params: Mapping[str, str]) -> ScoringWeights | None:
        """Parse string weight overrides such as request query parameters.

        Values that do not parse as a float in ``[0, 1]`` are ignored.
        Signals without a valid override keep their default weight and
        the result is rescaled to sum 1.0.

        Returns
        -------
        ScoringWeights or None
            ``None`` when no valid override is present.
        """
        defaults = cls().to_dict()
        overrides: dict[str, float] = {}
        for name in defaults:
            raw = params.get(name)
            if raw is None or raw == "":
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                continue
            if 0.0 <= value <= 1.0:
                overrides[name] = value

        if not overrides:
            return None

        merged = {**defaults, **overrides}
        total = sum(merged.values())
        if total == 0:
            return None
        return cls(**{k: v / total for k, v in merged.items()})
