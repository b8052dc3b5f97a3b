"""
scoring/cost_calculator.py

Cost component of the IEOP: how the effective cost per m² compares to the
reference cost for the project's work type.

Formula:
    effective_cost = paid_amount if paid_amount > 0 else contracted_amount
    cost_per_m2    = effective_cost / max(1, built_area_m2)
    ratio          = cost_per_m2 / reference_cost[work_type]

    ratio ≤ 0.8  → 100
    ratio ≥ 2.0  → 0
    otherwise    → 100 × (1 − (ratio − 0.8) / 1.2)

Spending at or below 80% of the reference earns full marks; the score falls
linearly to zero at twice the reference.
"""

from dataclasses import dataclass
from decimal import Decimal

from app.models.project import ProjectRecord
from app.scoring.reference_costs import ReferenceCostTable, DEFAULT_REFERENCE_COSTS
from app.scoring.utils import HUNDRED, ONE, ZERO, floor_at_one, to_decimal, to_score

RATIO_FULL_SCORE = Decimal("0.8")
RATIO_ZERO_SCORE = Decimal("2.0")
_RATIO_SPAN = RATIO_ZERO_SCORE - RATIO_FULL_SCORE  # 1.2


@dataclass(frozen=True)
class CostResult:
    """Output of CostCalculator.calculate()."""
    score: int             # [0, 100]
    cost_per_m2: Decimal   # unrounded effective cost per m²
    reference_cost: Decimal
    ratio: Decimal


class CostCalculator:
    """Score cost efficiency against the reference cost table."""

    def calculate(
        self,
        record: ProjectRecord,
        reference_table: ReferenceCostTable = DEFAULT_REFERENCE_COSTS,
    ) -> CostResult:
        """
        Args:
            record: Project to score.
            reference_table: Work type → reference cost per m².

        Returns:
            CostResult with score, cost_per_m2, reference_cost and ratio.

        Examples:
            >>> # 1000 m² building paid R$ 4.9M → R$ 4900/m², ratio 1.4
            >>> CostCalculator().calculate(record).score
            50
        """
        paid = to_decimal(record.paid_amount)
        effective_cost = paid if paid > ZERO else to_decimal(record.contracted_amount)
        cost_per_m2 = effective_cost / floor_at_one(to_decimal(record.built_area_m2))

        reference = reference_table.cost_for(record.work_type)
        ratio = cost_per_m2 / reference

        if ratio <= RATIO_FULL_SCORE:
            raw = HUNDRED
        elif ratio >= RATIO_ZERO_SCORE:
            raw = ZERO
        else:
            raw = HUNDRED * (ONE - (ratio - RATIO_FULL_SCORE) / _RATIO_SPAN)

        return CostResult(
            score=to_score(raw),
            cost_per_m2=cost_per_m2,
            reference_cost=reference,
            ratio=ratio,
        )
