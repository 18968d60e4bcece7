# okr_rollup/progress/formulas.py
"""
Formula Resolver

The formula field on a Key Result / Functional Objective is free text written
by users or carried in from Excel (e.g. "AVG(KRs)", "(KR1 % + KR2 %) / 2",
"Weighted avg by target"). Only the aggregation keyword is extracted; the
arithmetic itself is never evaluated.
"""

from enum import Enum
from typing import Optional


class FormulaType(str, Enum):
    AVG = 'AVG'
    SUM = 'SUM'
    WEIGHTED_AVG = 'WEIGHTED_AVG'
    MIN = 'MIN'
    MAX = 'MAX'


FORMULA_DESCRIPTIONS = {
    FormulaType.AVG: 'Average of all child values',
    FormulaType.SUM: 'Sum of all child values',
    FormulaType.WEIGHTED_AVG: 'Weighted average using target values as weights',
    FormulaType.MIN: 'Minimum value among all children',
    FormulaType.MAX: 'Maximum value among all children',
}


def parse_formula_type(formula: Optional[str]) -> FormulaType:
    """
    Resolve a stored formula string into an aggregation type.

    Case-insensitive substring match, first hit wins:
    WEIGHTED_AVG -> SUM -> MIN -> MAX -> AVG (default).

    Args:
        formula: Raw formula text, may be None or empty

    Returns:
        FormulaType, AVG when nothing matches
    """
    if not formula:
        return FormulaType.AVG

    normalized = str(formula).upper().strip()

    if 'WEIGHTED_AVG' in normalized or 'WEIGHTED AVG' in normalized:
        return FormulaType.WEIGHTED_AVG
    if 'SUM' in normalized:
        return FormulaType.SUM
    if 'MIN' in normalized:
        return FormulaType.MIN
    if 'MAX' in normalized:
        return FormulaType.MAX

    return FormulaType.AVG


def describe_formula(formula_type: FormulaType) -> str:
    return FORMULA_DESCRIPTIONS.get(formula_type, FORMULA_DESCRIPTIONS[FormulaType.AVG])
