"""
Decimal Utilities
app/scoring/utils.py

Provides precision-safe decimal math for the IEOP component calculators.

Every component score follows the same two-step contract:
    raw Decimal value → round half-up to integer → clamp to [0, 100]
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

Number = Union[int, float, Decimal]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its string form (no binary float noise)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def clamp(
    value: Decimal,
    min_val: Decimal = ZERO,
    max_val: Decimal = HUNDRED,
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """
    Round to `places` decimal places, halves away from zero.

    Precision is widened to the magnitude of `value`, so very large
    amounts round exactly instead of raising InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def to_score(raw: Decimal) -> int:
    """
    Turn a raw real-valued score into a component score.

    Rounds first, then clamps, so the order never depends on the caller.
    Values far outside the range are first narrowed to [-1, 101], which
    leaves the rounded and clamped result unchanged.
    """
    narrowed = clamp(raw, -ONE, HUNDRED + ONE)
    return int(clamp(round_half_up(narrowed)))


def floor_at_one(value: Decimal) -> Decimal:
    """Denominator guard: max(1, value)."""
    return max(ONE, value)


def days_between(start: date, end: date) -> int:
    """
    Whole days from start to end, never less than 1.

    A zero or negative span (same-day or inverted dates) counts as one day
    so it can safely be used as a divisor.
    """
    return max(1, (end - start).days)
