"""
scoring/schedule_calculator.py

Schedule component of the IEOP: actual duration against planned duration.

Formula:
    planned_days  = max(1, planned_end − planned_start)
    actual_days   = max(1, (actual_end or as_of) − actual_start)
    delay_percent = max(0, (actual_days − planned_days) / planned_days × 100)

    delay ≤ 0    → 100
    delay ≥ 100  → 0
    otherwise    → 100 × (1 − delay / 100)

Ongoing projects (no actual_end) are measured up to `as_of`, so their score
depends on the evaluation date. `as_of` is always passed in by the caller;
this module never reads the clock.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from app.models.project import ProjectRecord
from app.scoring.utils import HUNDRED, ONE, ZERO, days_between, to_score


@dataclass(frozen=True)
class ScheduleResult:
    """Output of ScheduleCalculator.calculate()."""
    score: int              # [0, 100]
    delay_percent: Decimal  # ≥ 0, unrounded
    planned_days: int
    actual_days: int
    ongoing: bool


class ScheduleCalculator:
    """Score schedule adherence."""

    def calculate(self, record: ProjectRecord, as_of: date) -> ScheduleResult:
        """
        Args:
            record: Project to score.
            as_of: Evaluation date, used as the end date of ongoing projects.
        """
        planned_days = days_between(record.planned_start, record.planned_end)
        end = as_of if record.is_ongoing else record.actual_end
        actual_days = days_between(record.actual_start, end)

        planned = Decimal(planned_days)
        delay = max(ZERO, (Decimal(actual_days) - planned) / planned * HUNDRED)

        if delay <= ZERO:
            raw = HUNDRED
        elif delay >= HUNDRED:
            raw = ZERO
        else:
            raw = HUNDRED * (ONE - delay / HUNDRED)

        return ScheduleResult(
            score=to_score(raw),
            delay_percent=delay,
            planned_days=planned_days,
            actual_days=actual_days,
            ongoing=record.is_ongoing,
        )
