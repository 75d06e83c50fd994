"""
Quintile classifier for bucket totals.

Thresholds are sampled (not interpolated) from the sorted non-zero totals at
index floor(n * p) for p in 0.2, 0.4, 0.6, 0.8. A value equal to a threshold
falls into the lower tier.
"""
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from ..domain.entities import Number, QuintileThresholds, SeverityTier

QUINTILE_POINTS = (0.2, 0.4, 0.6, 0.8)

@dataclass(frozen=True)
class Classification:
    thresholds: QuintileThresholds
    severities: List[SeverityTier]
    degenerate: bool = False

def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))

def non_zero_values(values: Sequence[Optional[Number]]) -> List[Number]:
    return [v for v in values if not _is_missing(v) and v > 0]

def calculate_quintiles(values: Sequence[Optional[Number]]) -> QuintileThresholds:
    non_zero = non_zero_values(values)
    if not non_zero:
        return QuintileThresholds()

    ordered = sorted(non_zero)
    n = len(ordered)
    return QuintileThresholds(*(ordered[math.floor(n * p)] for p in QUINTILE_POINTS))

def is_degenerate(values: Sequence[Optional[Number]]) -> bool:
    """All totals zero/missing, or a single distinct non-zero total."""
    return len(set(non_zero_values(values))) <= 1

def classify_value(value: Optional[Number], thresholds: QuintileThresholds) -> SeverityTier:
    if _is_missing(value) or value == 0:
        return SeverityTier.NONE
    if value <= thresholds.q20:
        return SeverityTier.VERY_LOW
    if value <= thresholds.q40:
        return SeverityTier.LOW
    if value <= thresholds.q60:
        return SeverityTier.MODERATE
    if value <= thresholds.q80:
        return SeverityTier.HIGH
    return SeverityTier.VERY_HIGH

def classify_values(values: Sequence[Optional[Number]]) -> Classification:
    """
    Computes the run's thresholds and assigns a tier to every value.
    Never raises for numeric input.
    """
    thresholds = calculate_quintiles(values)
    return Classification(
        thresholds=thresholds,
        severities=[classify_value(v, thresholds) for v in values],
        degenerate=is_degenerate(values)
    )
