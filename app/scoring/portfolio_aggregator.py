"""
scoring/portfolio_aggregator.py

Portfolio-level view of the IEOP: scores a collection of projects and
summarises the results.

    score_all  → ScoredResult list, index descending (stable for ties)
    summarize  → PortfolioStatistics in a single pass

An empty portfolio summarises to the neutral statistics object (every count,
mean and rate is 0) instead of dividing by zero.
"""

import structlog
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from app.models.enumerations import Classification, ProjectStatus
from app.models.project import ProjectRecord
from app.scoring.ieop_calculator import IEOPCalculator, ScoredResult
from app.scoring.reference_costs import ReferenceCostTable, DEFAULT_REFERENCE_COSTS
from app.scoring.utils import HUNDRED, round_half_up

logger = structlog.get_logger(__name__)


def _zero_classification_counts() -> Dict[Classification, int]:
    return {tier: 0 for tier in Classification}


def _zero_status_counts() -> Dict[ProjectStatus, int]:
    return {status: 0 for status in ProjectStatus}


@dataclass(frozen=True)
class PortfolioStatistics:
    """Summary of a scored portfolio. All means and rates are integers."""
    total: int = 0
    mean_index: int = 0
    mean_cost_per_m2: int = 0
    mean_delay_percent: int = 0
    recurrence_rate: int = 0  # percent of projects flagged
    by_classification: Dict[Classification, int] = field(default_factory=_zero_classification_counts)
    by_status: Dict[ProjectStatus, int] = field(default_factory=_zero_status_counts)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def _mean(total: Decimal, count: int) -> int:
    return int(round_half_up(total / count))


class PortfolioAggregator:
    """Map the scoring engine over a portfolio and reduce to statistics."""

    def __init__(self, calculator: Optional[IEOPCalculator] = None):
        self.calculator = calculator or IEOPCalculator()

    def score_all(
        self,
        records: Iterable[ProjectRecord],
        reference_table: ReferenceCostTable = DEFAULT_REFERENCE_COSTS,
        as_of: Optional[date] = None,
    ) -> List[ScoredResult]:
        """
        Score every record and sort by index, highest first.

        `as_of` is resolved once so every ongoing project in the pass is
        measured against the same evaluation date. Python's sort is stable,
        so projects with equal index keep their input order.
        """
        if as_of is None:
            as_of = self.calculator.clock()

        results = [
            self.calculator.score(record, reference_table, as_of=as_of)
            for record in records
        ]
        results.sort(key=lambda r: r.index, reverse=True)

        logger.info("portfolio_scored", projects=len(results), as_of=as_of.isoformat())
        return results

    def summarize(self, results: List[ScoredResult]) -> PortfolioStatistics:
        """
        Compute portfolio statistics in one pass over the results.

        Means are taken over the reported (rounded) per-project metrics.
        Both frequency tables contain every enumerated key, zero-filled.
        """
        total = len(results)
        if total == 0:
            logger.info("portfolio_summarized", total=0)
            return PortfolioStatistics()

        index_sum = Decimal(0)
        cost_sum = Decimal(0)
        delay_sum = Decimal(0)
        recurrent = 0
        by_classification = _zero_classification_counts()
        by_status = _zero_status_counts()

        for result in results:
            index_sum += result.index
            cost_sum += result.metrics.cost_per_m2
            delay_sum += result.metrics.delay_percent
            if result.metrics.has_recurrence:
                recurrent += 1
            by_classification[result.classification] += 1
            by_status[result.status] += 1

        stats = PortfolioStatistics(
            total=total,
            mean_index=_mean(index_sum, total),
            mean_cost_per_m2=_mean(cost_sum, total),
            mean_delay_percent=_mean(delay_sum, total),
            recurrence_rate=_mean(Decimal(recurrent) * HUNDRED, total),
            by_classification=by_classification,
            by_status=by_status,
        )

        logger.info(
            "portfolio_summarized",
            total=stats.total,
            mean_index=stats.mean_index,
            recurrence_rate=stats.recurrence_rate,
        )
        return stats
