"""
scoring/recurrence_calculator.py

Recurrence component of the IEOP. Penalises rework in the same municipality,
work stoppages and contract amendments.

Formula:
    score = 100 − 40 × recurrence − 10 × stoppages − 5 × amendments
    clamped to [0, 100] once, at the end
"""

from dataclasses import dataclass
from decimal import Decimal

from app.models.project import ProjectRecord
from app.scoring.utils import HUNDRED, to_score

RECURRENCE_PENALTY = Decimal("40")
STOPPAGE_PENALTY = Decimal("10")
AMENDMENT_PENALTY = Decimal("5")


@dataclass(frozen=True)
class RecurrenceResult:
    """Output of RecurrenceCalculator.calculate()."""
    score: int  # [0, 100]
    has_recurrence: bool


class RecurrenceCalculator:
    """Score recurrence, stoppages and amendments."""

    def calculate(self, record: ProjectRecord) -> RecurrenceResult:
        raw = HUNDRED
        if record.recurrence:
            raw -= RECURRENCE_PENALTY
        raw -= STOPPAGE_PENALTY * record.stoppages
        raw -= AMENDMENT_PENALTY * record.amendments

        return RecurrenceResult(score=to_score(raw), has_recurrence=record.recurrence)
