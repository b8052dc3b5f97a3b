# app/scoring/ieop_calculator.py
"""
IEOP Calculator - Índice de Eficiência de Obras Públicas
---------------------------------------------------------
Combines the four component scores of one project into the final index and
its classification tier.

Formula:
    IEOP = round(0.30 × cost + 0.30 × schedule + 0.15 × recurrence + 0.25 × execution)
    clamped to [0, 100]

Classification (lower bound inclusive):
    ≥ 80  Excellent
    ≥ 60  Good
    ≥ 40  Regular
    ≥ 20  Poor
    else  Critical

The result is a pure function of the record, the reference table and the
evaluation date. Ongoing projects are scored up to the evaluation date, so
the same ongoing record scored on different days can produce different
schedule scores; pass `as_of` explicitly to pin it.
"""
import structlog
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Callable, Dict, Optional, Tuple

from app.models.enumerations import Classification, ProjectStatus, WorkType
from app.models.project import ProjectRecord
from app.scoring.cost_calculator import CostCalculator
from app.scoring.execution_calculator import ExecutionCalculator
from app.scoring.recurrence_calculator import RecurrenceCalculator
from app.scoring.reference_costs import ReferenceCostTable, DEFAULT_REFERENCE_COSTS
from app.scoring.schedule_calculator import ScheduleCalculator
from app.scoring.utils import round_half_up, to_score

logger = structlog.get_logger(__name__)

# Component weights (sum = 1.0)
COMPONENT_WEIGHTS: Dict[str, Decimal] = {
    "cost":       Decimal("0.30"),
    "schedule":   Decimal("0.30"),
    "recurrence": Decimal("0.15"),
    "execution":  Decimal("0.25"),
}

# (lower bound, tier), checked top-down
CLASSIFICATION_BANDS: Tuple[Tuple[int, Classification], ...] = (
    (80, Classification.EXCELLENT),
    (60, Classification.GOOD),
    (40, Classification.REGULAR),
    (20, Classification.POOR),
    (0,  Classification.CRITICAL),
)


def classify(index: int) -> Classification:
    """Map an index in [0, 100] to its classification tier."""
    for lower_bound, tier in CLASSIFICATION_BANDS:
        if index >= lower_bound:
            return tier
    return Classification.CRITICAL


@dataclass(frozen=True)
class ComponentScores:
    """The four weighted sub-scores, each in [0, 100]."""
    cost: int
    schedule: int
    recurrence: int
    execution: int


@dataclass(frozen=True)
class RawMetrics:
    """Raw values behind the component scores, rounded for reporting."""
    cost_per_m2: int
    delay_percent: int
    budget_deviation: Decimal  # percent, 2 decimal places, negative = underspend
    has_recurrence: bool


@dataclass(frozen=True)
class ScoredResult:
    """Output of IEOPCalculator.score() - one per project."""
    project_id: str
    project_name: str
    municipality: str
    work_type: WorkType
    status: ProjectStatus
    index: int                      # Final IEOP in [0, 100]
    classification: Classification
    components: ComponentScores
    metrics: RawMetrics


def utc_today() -> date:
    """Current calendar date in UTC, independent of the host timezone."""
    return datetime.now(timezone.utc).date()


class IEOPCalculator:
    """
    Scoring engine: one project record in, one ScoredResult out.

    Never raises on a validated ProjectRecord. Zero or negative areas,
    zero-length planned schedules and zero contract values are floored
    to 1 by the component calculators.
    """

    def __init__(self, clock: Callable[[], date] = utc_today):
        self.clock = clock
        self.cost_calculator = CostCalculator()
        self.schedule_calculator = ScheduleCalculator()
        self.recurrence_calculator = RecurrenceCalculator()
        self.execution_calculator = ExecutionCalculator()

    def score(
        self,
        record: ProjectRecord,
        reference_table: ReferenceCostTable = DEFAULT_REFERENCE_COSTS,
        as_of: Optional[date] = None,
    ) -> ScoredResult:
        """
        Args:
            record: Validated project record.
            reference_table: Work type → reference cost per m².
            as_of: Evaluation date for ongoing projects. Defaults to the
                   injected clock (the current UTC date unless overridden).

        Returns:
            ScoredResult with index, classification, components and metrics.

        Examples:
            >>> # 1000 m² building, R$ 3M paid, on time, no penalties
            >>> result = IEOPCalculator().score(record, as_of=date(2025, 1, 1))
            >>> result.index, result.classification
            (99, <Classification.EXCELLENT: 'Excellent'>)
        """
        if as_of is None:
            as_of = self.clock()

        cost = self.cost_calculator.calculate(record, reference_table)
        schedule = self.schedule_calculator.calculate(record, as_of)
        recurrence = self.recurrence_calculator.calculate(record)
        execution = self.execution_calculator.calculate(record)

        components = ComponentScores(
            cost=cost.score,
            schedule=schedule.score,
            recurrence=recurrence.score,
            execution=execution.score,
        )

        weighted = (
            cost.score * COMPONENT_WEIGHTS["cost"]
            + schedule.score * COMPONENT_WEIGHTS["schedule"]
            + recurrence.score * COMPONENT_WEIGHTS["recurrence"]
            + execution.score * COMPONENT_WEIGHTS["execution"]
        )
        index = to_score(weighted)
        classification = classify(index)

        metrics = RawMetrics(
            cost_per_m2=int(round_half_up(cost.cost_per_m2)),
            delay_percent=int(round_half_up(schedule.delay_percent)),
            budget_deviation=round_half_up(execution.budget_deviation, places=2),
            has_recurrence=recurrence.has_recurrence,
        )

        logger.debug(
            "ieop_calculated",
            project_id=record.id,
            as_of=as_of.isoformat(),
            cost_score=cost.score,
            schedule_score=schedule.score,
            recurrence_score=recurrence.score,
            execution_score=execution.score,
            ieop=index,
            classification=classification.value,
        )

        return ScoredResult(
            project_id=record.id,
            project_name=record.name,
            municipality=record.municipality,
            work_type=record.work_type,
            status=record.status,
            index=index,
            classification=classification,
            components=components,
            metrics=metrics,
        )
