# okr_rollup/progress/breakdown.py
"""
Calculation breakdowns for drill-down screens.

Built from an already annotated tree, so the explanation shown for a node
always matches the value shown on the dashboard.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .constants import DEFAULT_FORMULA_LABEL, LEVEL_DISPLAY_NAMES, HierarchyLevel
from .formulas import FormulaType, describe_formula
from .models import AnnotatedNode
from .status import RAGStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildContribution:
    name: str
    progress: float
    status: RAGStatus
    weight: float
    has_data: bool


@dataclass(frozen=True)
class CalculationBreakdown:
    entity_name: str
    level: HierarchyLevel
    formula: str
    formula_type: FormulaType
    formula_description: str
    calculated_progress: float
    status: RAGStatus
    source: str
    child_values: List[ChildContribution] = field(default_factory=list)

    @property
    def entity_type(self) -> str:
        return LEVEL_DISPLAY_NAMES[self.level]

    @property
    def contributing_children(self) -> List[ChildContribution]:
        return [c for c in self.child_values if c.has_data]

    def to_lines(self) -> List[str]:
        """Plain-text rendering, one line per child."""
        lines = [
            f"{self.entity_type}: {self.entity_name}",
            f"Formula: {self.formula} -> {self.formula_type.value} ({self.formula_description})",
        ]
        for child in self.child_values:
            marker = '' if child.has_data else ' [no data, excluded]'
            weight = f", weight {child.weight:g}" if self.formula_type == FormulaType.WEIGHTED_AVG else ''
            lines.append(f"  - {child.name}: {child.progress:.1f}%{weight}{marker}")
        lines.append(f"Result: {self.calculated_progress:.1f}% ({self.status.value})")
        return lines


def _formula_label(annotated: AnnotatedNode) -> str:
    # Levels whose policy ignores the stored formula text show the default
    if annotated.formula_honored and annotated.node.formula:
        return annotated.node.formula
    return DEFAULT_FORMULA_LABEL


def build_breakdown(annotated: AnnotatedNode) -> CalculationBreakdown:
    """
    Explain how an annotated node got its progress.

    Args:
        annotated: Any node returned by the rollup

    Returns:
        CalculationBreakdown listing every child (including excluded ones)
    """
    child_values = [
        ChildContribution(
            name=child.node.display_name,
            progress=child.progress,
            status=child.status,
            weight=child.weight,
            has_data=child.has_data,
        )
        for child in annotated.children
    ]

    return CalculationBreakdown(
        entity_name=annotated.node.display_name,
        level=annotated.level,
        formula=_formula_label(annotated),
        formula_type=annotated.formula_type,
        formula_description=describe_formula(annotated.formula_type),
        calculated_progress=annotated.progress,
        status=annotated.status,
        source=annotated.source,
        child_values=child_values,
    )


def indicator_contributions(key_result: AnnotatedNode) -> List[ChildContribution]:
    """Each indicator's own progress and status under a Key Result."""
    if key_result.level != HierarchyLevel.KEY_RESULT:
        logger.warning(f"indicator_contributions called on {key_result.level.value} {key_result.id}")
        return []
    return build_breakdown(key_result).child_values
