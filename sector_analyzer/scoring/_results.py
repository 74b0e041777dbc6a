"""Result records returned by the composite scorer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class SectorScore:
    """Complete scoring breakdown for one sector.

    Component scores are on the 0-100 scale.  The raw display metrics
    are ``None`` when the underlying data was insufficient.

    Attributes
    ----------
    sector : str
        Sector name.
    opportunity_score : float
        Weighted composite, rounded to 2 decimals.
    rank : int
        1-based rank, 1 being the highest opportunity score.
    momentum_score, valuation_score, growth_score, innovation_score, macro_score : float
        Normalized signal scores.
    price_return_3mo, price_return_6mo, price_return_12mo : float or None
        Trailing price returns in percent.
    relative_strength : float or None
        12-month return minus benchmark return, percentage points.
    forward_pe : float or None
        Forward P/E from sector metadata.
    employment_growth : float or None
        Year-over-year employment growth in percent.
    rd_intensity : float or None
        R&D as a fraction of revenue.
    """

    sector: str
    opportunity_score: float
    rank: int
    momentum_score: float
    valuation_score: float
    growth_score: float
    innovation_score: float
    macro_score: float
    price_return_3mo: float | None = None
    price_return_6mo: float | None = None
    price_return_12mo: float | None = None
    relative_strength: float | None = None
    forward_pe: float | None = None
    employment_growth: float | None = None
    rd_intensity: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SectorRank:
    """Rank, name and opportunity score of one sector."""

    rank: int
    sector: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ScoreDistribution:
    """Summary statistics of opportunity scores."""

    average: float = 0.0
    max: float = 0.0
    min: float = 0.0
    spread: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SummaryReport:
    """Headline view of a ranked score list.

    Attributes
    ----------
    timestamp : str
        ISO-8601 generation time.
    top_sectors : tuple[SectorRank, ...]
        Up to three best-ranked sectors.
    bottom_sectors : tuple[SectorRank, ...]
        Up to three worst-ranked sectors, in rank order.
    score_distribution : ScoreDistribution
        Average, max, min and spread of opportunity scores.
    top_sector_drivers : tuple[str, ...]
        Labels for the top sector's components scoring >= 70.
    weights_used : dict[str, float]
        Effective signal weights.
    """

    timestamp: str
    top_sectors: tuple[SectorRank, ...] = ()
    bottom_sectors: tuple[SectorRank, ...] = ()
    score_distribution: ScoreDistribution = field(default_factory=ScoreDistribution)
    top_sector_drivers: tuple[str, ...] = ()
    weights_used: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "top_sectors": [r.to_dict() for r in self.top_sectors],
            "bottom_sectors": [r.to_dict() for r in self.bottom_sectors],
            "score_distribution": self.score_distribution.to_dict(),
            "top_sector_drivers": list(self.top_sector_drivers),
            "weights_used": dict(self.weights_used),
        }
