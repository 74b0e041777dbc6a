"""Composite opportunity scoring, ranking, and summary reports."""

from sector_analyzer.scoring._config import (
    DRIVER_LABELS,
    DRIVER_THRESHOLD,
    WEIGHT_TOLERANCE,
    ScoringWeights,
)
from sector_analyzer.scoring._results import (
    ScoreDistribution,
    SectorRank,
    SectorScore,
    SummaryReport,
)
from sector_analyzer.scoring._scorer import (
    SectorScorer,
    find_sector_score,
    run_analysis,
)

__all__ = [
    "DRIVER_LABELS",
    "DRIVER_THRESHOLD",
    "WEIGHT_TOLERANCE",
    "ScoreDistribution",
    "ScoringWeights",
    "SectorRank",
    "SectorScore",
    "SectorScorer",
    "SummaryReport",
    "find_sector_score",
    "run_analysis",
]
