# okr_rollup/progress/models.py
"""
Data classes for the OKR hierarchy and rollup output.

VERSION: 1.0.0

All classes are frozen: the rollup never mutates its input and every
result is re-derived from the snapshot handed to it.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import HierarchyLevel, SOURCE_NONE
from .formulas import FormulaType
from .status import RAGStatus, display_progress


# =============================================================================
# INPUT
# =============================================================================

@dataclass(frozen=True)
class HierarchyNode:
    """
    One node of the hierarchy, tagged with its level.

    Indicators are leaves (no children). Aggregation nodes carry an optional
    free-text formula and an optional fallback current/target pair that is
    used only when none of their children has data.
    """
    id: str
    level: HierarchyLevel
    name: str = ''
    formula: Optional[str] = None
    current_value: Optional[float] = None
    target_value: Optional[float] = None
    children: Tuple['HierarchyNode', ...] = ()

    @classmethod
    def indicator(
        cls,
        id: str,
        current_value: Optional[float] = None,
        target_value: Optional[float] = None,
        name: str = ''
    ) -> 'HierarchyNode':
        return cls(
            id=id,
            level=HierarchyLevel.INDICATOR,
            name=name,
            current_value=current_value,
            target_value=target_value,
        )

    @property
    def is_leaf(self) -> bool:
        return self.level == HierarchyLevel.INDICATOR

    @property
    def display_name(self) -> str:
        return self.name or self.id


# =============================================================================
# OUTPUT
# =============================================================================

@dataclass(frozen=True)
class ProgressResult:
    """Progress and status attached to every node after rollup."""
    progress: float = 0.0
    status: RAGStatus = RAGStatus.NOT_SET
    has_data: bool = False

    @property
    def display_progress(self) -> int:
        return display_progress(self.progress)


NOT_SET_RESULT = ProgressResult()


@dataclass(frozen=True)
class AnnotatedNode:
    """
    A hierarchy node together with its computed result.

    Attributes:
        node: The input node (unchanged)
        result: Computed progress/status
        formula_type: Aggregation actually applied at this node
        formula_honored: Whether the level policy let the node's own formula apply
        source: 'children' | 'own_values' | 'none'
        weight: Weight this node carries into a WEIGHTED_AVG parent
        children: Annotated children, same order as the input
    """
    node: HierarchyNode
    result: ProgressResult = NOT_SET_RESULT
    formula_type: FormulaType = FormulaType.AVG
    formula_honored: bool = False
    source: str = SOURCE_NONE
    weight: float = 1.0
    children: Tuple['AnnotatedNode', ...] = field(default_factory=tuple)

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def level(self) -> HierarchyLevel:
        return self.node.level

    @property
    def progress(self) -> float:
        return self.result.progress

    @property
    def status(self) -> RAGStatus:
        return self.result.status

    @property
    def has_data(self) -> bool:
        return self.result.has_data

    def find(self, node_id: str) -> Optional['AnnotatedNode']:
        """Depth-first lookup by id."""
        if self.node.id == node_id:
            return self
        for child in self.children:
            found = child.find(node_id)
            if found is not None:
                return found
        return None
