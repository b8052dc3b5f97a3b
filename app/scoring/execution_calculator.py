"""
scoring/execution_calculator.py

Execution component of the IEOP: alignment between physical and financial
progress, plus budget overrun.

Formula:
    misalignment     = |physical_progress_pct − financial_progress_pct|
    budget_deviation = (paid − contracted) / max(1, contracted) × 100   (signed)
    score = 100 − 1.5 × misalignment − 0.8 × max(0, budget_deviation)

Underspending never adds to the score; only overspending is penalised.
"""

from dataclasses import dataclass
from decimal import Decimal

from app.models.project import ProjectRecord
from app.scoring.utils import HUNDRED, ZERO, floor_at_one, to_decimal, to_score

MISALIGNMENT_WEIGHT = Decimal("1.5")
OVERRUN_WEIGHT = Decimal("0.8")


@dataclass(frozen=True)
class ExecutionResult:
    """Output of ExecutionCalculator.calculate()."""
    score: int                  # [0, 100]
    misalignment: Decimal       # percentage points
    budget_deviation: Decimal   # percent, negative = underspend


class ExecutionCalculator:
    """Score physical/financial execution alignment."""

    def calculate(self, record: ProjectRecord) -> ExecutionResult:
        """
        Examples:
            >>> # 60% physical vs 50% financial, paid 10% over contract
            >>> ExecutionCalculator().calculate(record).score
            77
        """
        misalignment = abs(
            to_decimal(record.physical_progress_pct) - to_decimal(record.financial_progress_pct)
        )

        contracted = to_decimal(record.contracted_amount)
        paid = to_decimal(record.paid_amount)
        budget_deviation = (paid - contracted) / floor_at_one(contracted) * HUNDRED

        raw = (
            HUNDRED
            - misalignment * MISALIGNMENT_WEIGHT
            - max(ZERO, budget_deviation) * OVERRUN_WEIGHT
        )

        return ExecutionResult(
            score=to_score(raw),
            misalignment=misalignment,
            budget_deviation=budget_deviation,
        )
