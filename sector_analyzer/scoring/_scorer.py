"""Composite sector scoring, ranking and summary reporting."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime, timezone

import pandas as pd

from sector_analyzer.data import MarketSnapshot
from sector_analyzer.scoring._config import (
    DRIVER_LABELS,
    DRIVER_THRESHOLD,
    ScoringWeights,
)
from sector_analyzer.scoring._results import (
    ScoreDistribution,
    SectorRank,
    SectorScore,
    SummaryReport,
)
from sector_analyzer.sectors import SECTOR_NAMES
from sector_analyzer.settings import Settings, get_settings
from sector_analyzer.signals import (
    NEUTRAL_SCORE,
    GrowthConfig,
    MacroConfig,
    MomentumConfig,
    SignalType,
    compute_employment_growth,
    compute_growth_score,
    compute_innovation_score,
    compute_macro_score,
    compute_momentum_score,
    compute_price_returns,
    compute_relative_strength,
    compute_valuation_score,
    period_label,
    round_score,
    score_or_default,
)

logger = logging.getLogger(__name__)


def _optional(value: object) -> float | None:
    if value is None:
        return None
    value = float(value)
    return value if math.isfinite(value) else None


class SectorScorer:
    """Weighted composite of the five normalized sector signals.

    The scorer holds only its configuration; every call is a pure
    function of the snapshot it is given, so one instance may be shared
    across threads.

    Parameters
    ----------
    weights : ScoringWeights, Mapping[str, float] or None
        Signal weights.  ``None`` uses the defaults.  Weights whose sum
        differs from 1.0 by more than 0.01 are rescaled.
    sectors : Sequence[str]
        Ordered sector universe; ties in ranking keep this order.
    momentum_config : MomentumConfig or None
        Momentum signal parameters.
    growth_config : GrowthConfig or None
        Growth signal parameters.
    macro_config : MacroConfig or None
        Macro signal parameters.
    """

    def __init__(
        self,
        weights: ScoringWeights | Mapping[str, float] | None = None,
        sectors: Sequence[str] = SECTOR_NAMES,
        momentum_config: MomentumConfig | None = None,
        growth_config: GrowthConfig | None = None,
        macro_config: MacroConfig | None = None,
    ) -> None:
        if weights is None:
            weights = ScoringWeights()
        elif not isinstance(weights, ScoringWeights):
            weights = ScoringWeights.from_mapping(weights)

        self.weights = weights.normalized()
        self.sectors = tuple(sectors)
        self.momentum_config = momentum_config or MomentumConfig()
        self.growth_config = growth_config or GrowthConfig()
        self.macro_config = macro_config or MacroConfig()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SectorScorer:
        """Build a scorer from environment-driven settings."""
        if settings is None:
            settings = get_settings()
        weights = ScoringWeights.from_mapping(settings.weights) if settings.weights else None
        return cls(
            weights=weights,
            macro_config=MacroConfig(reference_key=settings.reference_rate_key),
        )

    def compute_signal_scores(self, snapshot: MarketSnapshot) -> pd.DataFrame:
        """Normalized score of every signal for every sector.

        Returns
        -------
        pd.DataFrame
            Sectors (in universe order) x signals (declaration order).
        """
        signals = {
            SignalType.MOMENTUM: compute_momentum_score(
                snapshot.sector_prices,
                snapshot.benchmark_prices,
                self.sectors,
                self.momentum_config,
            ),
            SignalType.VALUATION: compute_valuation_score(
                snapshot.sector_info, snapshot.sector_pe, self.sectors
            ),
            SignalType.GROWTH: compute_growth_score(
                snapshot.employment_data, self.sectors, self.growth_config
            ),
            SignalType.INNOVATION: compute_innovation_score(
                snapshot.rd_data, self.sectors
            ),
            SignalType.MACRO: compute_macro_score(
                snapshot.sector_prices,
                snapshot.macro_data,
                self.sectors,
                self.macro_config,
            ),
        }
        return pd.DataFrame(
            {signal.value: scores for signal, scores in signals.items()},
            index=pd.Index(self.sectors, dtype=object),
        )

    def calculate_scores(self, snapshot: MarketSnapshot) -> list[SectorScore]:
        """Score and rank every sector in the universe.

        Parameters
        ----------
        snapshot : MarketSnapshot
            Aggregated provider data; may be partially or fully empty.

        Returns
        -------
        list[SectorScore]
            One record per sector, sorted by descending opportunity
            score with ranks 1..N.
        """
        signal_scores = self.compute_signal_scores(snapshot)

        returns = compute_price_returns(
            snapshot.sector_prices, self.sectors, self.momentum_config
        )
        relative = compute_relative_strength(
            snapshot.sector_prices,
            snapshot.benchmark_prices,
            self.momentum_config.score_period,
            self.sectors,
            self.momentum_config.trading_days_per_month,
        )
        employment_growth = compute_employment_growth(
            snapshot.employment_data, self.sectors, self.growth_config
        )

        def display_return(sector: str, months: int) -> float | None:
            label = period_label(months)
            if sector not in returns.index or label not in returns.columns:
                return None
            return _optional(returns.at[sector, label])

        records: list[SectorScore] = []
        for sector in self.sectors:
            components = {
                signal: score_or_default(signal_scores[signal.value], sector, NEUTRAL_SCORE)
                for signal in SignalType
            }
            opportunity = sum(
                self.weights.get(signal) * score for signal, score in components.items()
            )
            info = snapshot.sector_info.get(sector)

            records.append(
                SectorScore(
                    sector=sector,
                    opportunity_score=float(round_score(opportunity)),
                    rank=0,
                    momentum_score=components[SignalType.MOMENTUM],
                    valuation_score=components[SignalType.VALUATION],
                    growth_score=components[SignalType.GROWTH],
                    innovation_score=components[SignalType.INNOVATION],
                    macro_score=components[SignalType.MACRO],
                    price_return_3mo=display_return(sector, 3),
                    price_return_6mo=display_return(sector, 6),
                    price_return_12mo=display_return(sector, 12),
                    relative_strength=_optional(relative.get(sector)),
                    forward_pe=_optional(info.forward_pe) if info is not None else None,
                    employment_growth=_optional(employment_growth.get(sector)),
                    rd_intensity=_optional(snapshot.rd_data.get(sector)),
                )
            )

        # sorted() is stable, so ties keep universe order
        ranked = sorted(records, key=lambda r: r.opportunity_score, reverse=True)
        return [replace(record, rank=i + 1) for i, record in enumerate(ranked)]

    def summary_report(
        self,
        scores: Sequence[SectorScore],
        now: datetime | None = None,
    ) -> SummaryReport:
        """Headline summary of a ranked score list.

        Parameters
        ----------
        scores : Sequence[SectorScore]
            Output of :meth:`calculate_scores`, in rank order.
        now : datetime or None
            Generation time; defaults to the current UTC time.

        Returns
        -------
        SummaryReport
            Top/bottom three, distribution, top-sector drivers and the
            weights used.  Zeroed when ``scores`` is empty.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        timestamp = now.isoformat(timespec="seconds")
        weights_used = self.weights.to_dict()

        if not scores:
            return SummaryReport(timestamp=timestamp, weights_used=weights_used)

        def as_rank(score: SectorScore) -> SectorRank:
            return SectorRank(rank=score.rank, sector=score.sector, score=score.opportunity_score)

        top = tuple(as_rank(s) for s in scores[:3])
        bottom = tuple(as_rank(s) for s in scores[max(len(scores) - 3, 0):])

        values = [s.opportunity_score for s in scores]
        hi = max(values)
        lo = min(values)
        distribution = ScoreDistribution(
            average=float(round_score(sum(values) / len(values))),
            max=float(round_score(hi)),
            min=float(round_score(lo)),
            spread=float(round_score(hi - lo)),
        )

        leader = scores[0]
        leader_components = {
            SignalType.MOMENTUM: leader.momentum_score,
            SignalType.VALUATION: leader.valuation_score,
            SignalType.GROWTH: leader.growth_score,
            SignalType.INNOVATION: leader.innovation_score,
            SignalType.MACRO: leader.macro_score,
        }
        drivers = tuple(
            label
            for signal, label in DRIVER_LABELS.items()
            if leader_components[signal] >= DRIVER_THRESHOLD
        )

        return SummaryReport(
            timestamp=timestamp,
            top_sectors=top,
            bottom_sectors=bottom,
            score_distribution=distribution,
            top_sector_drivers=drivers,
            weights_used=weights_used,
        )


def run_analysis(
    snapshot: MarketSnapshot,
    weights: ScoringWeights | Mapping[str, float] | None = None,
) -> tuple[list[SectorScore], SummaryReport]:
    """Score a snapshot and summarise the ranking in one call."""
    scorer = SectorScorer(weights)
    scores = scorer.calculate_scores(snapshot)
    summary = scorer.summary_report(scores)
    logger.debug(
        "Scored %d sectors; leader %s",
        len(scores),
        scores[0].sector if scores else None,
    )
    return scores, summary


def find_sector_score(
    scores: Sequence[SectorScore],
    sector: str,
) -> SectorScore | None:
    """Case-insensitive lookup of one sector's record."""
    wanted = sector.casefold()
    for score in scores:
        if score.sector.casefold() == wanted:
            return score
    return None
