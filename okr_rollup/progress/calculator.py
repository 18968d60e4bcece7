# okr_rollup/progress/calculator.py
"""
Progress Calculator & Aggregator

VERSION: 1.0.0

Pure numeric functions shared by every level of the rollup:
- calculate_progress(): current/target pair -> percentage
- aggregate_progress(): child percentages -> parent percentage
"""

import logging
from typing import Optional, Sequence
import numpy as np

from .constants import DEFAULT_CHILD_WEIGHT
from .formulas import FormulaType

logger = logging.getLogger(__name__)


def has_measurement(current: Optional[float], target: Optional[float]) -> bool:
    """True when a current/target pair yields a real data point."""
    return current is not None and target is not None and target > 0


def calculate_progress(current: Optional[float], target: Optional[float]) -> float:
    """
    Convert a current/target pair into a percentage.

    Returns 0 when either value is missing or target <= 0. Callers that need to
    tell "no data" apart from a real 0% must check has_measurement() first.
    No rounding here; rounding is a display concern.
    """
    if not has_measurement(current, target):
        return 0.0
    return (float(current) / float(target)) * 100


def child_weight(target: Optional[float]) -> float:
    """Weight a child carries into a WEIGHTED_AVG parent: its own target, else 1."""
    if target is None or target == 0:
        return DEFAULT_CHILD_WEIGHT
    return float(target)


def aggregate_progress(
    values: Sequence[float],
    formula_type: FormulaType,
    weights: Optional[Sequence[float]] = None
) -> float:
    """
    Aggregate child progress values into one parent value.

    Args:
        values: Child progress percentages (children without data already excluded)
        formula_type: Resolved aggregation type
        weights: Per-child weights, only used for WEIGHTED_AVG

    Returns:
        Aggregated percentage, 0 for an empty list
    """
    if len(values) == 0:
        return 0.0

    arr = np.asarray(values, dtype=float)

    if formula_type == FormulaType.SUM:
        return float(np.sum(arr))

    if formula_type == FormulaType.MIN:
        return float(np.min(arr))

    if formula_type == FormulaType.MAX:
        return float(np.max(arr))

    if formula_type == FormulaType.WEIGHTED_AVG:
        if weights is None or len(weights) != len(values):
            logger.debug("WEIGHTED_AVG without matching weights, using plain average")
            return float(np.mean(arr))

        weight_arr = np.asarray(weights, dtype=float)
        if float(np.sum(weight_arr)) == 0:
            logger.debug("WEIGHTED_AVG weights sum to zero, using plain average")
            return float(np.mean(arr))

        return float(np.sum(arr * weight_arr) / np.sum(weight_arr))

    return float(np.mean(arr))
