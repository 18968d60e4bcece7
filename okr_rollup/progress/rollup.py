# okr_rollup/progress/rollup.py
"""
Hierarchy Rollup Driver

VERSION: 1.0.0

Recomputes progress and RAG status bottom-up for the whole tree:

    Key Result           <- Indicators            (own formula)
    Functional Objective <- Key Results           (own formula)
    Department           <- Functional Objectives (always AVG)
    Org Objective        <- Departments           (always AVG)
    Business Outcome     <- Org Objectives        (always AVG)

One post-order traversal serves every level; which levels honor their
stored formula is a per-level flag in LEVEL_POLICIES.

Per node:
- Children without data are excluded (never counted as 0)
- No child with data -> fall back to the node's own current/target
- Nothing at all -> {progress: 0, status: not-set}

Usage:
    tree = rollup(org_objectives, name='Grow ARR 2026')
    tree.result.status, tree.result.display_progress
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .calculator import aggregate_progress, calculate_progress, child_weight, has_measurement
from .constants import (
    HierarchyLevel,
    MAX_HIERARCHY_DEPTH,
    SOURCE_CHILDREN,
    SOURCE_OWN_VALUES,
    SOURCE_NONE,
)
from .formulas import FormulaType, parse_formula_type
from .models import AnnotatedNode, HierarchyNode, ProgressResult
from .status import DEFAULT_RAG_THRESHOLDS, RAGThresholds, progress_to_status

logger = logging.getLogger(__name__)


# =============================================================================
# LEVEL POLICIES
# =============================================================================

@dataclass(frozen=True)
class LevelPolicy:
    """How one aggregation level treats its children."""
    level: HierarchyLevel
    child_level: HierarchyLevel
    honors_formula: bool


LEVEL_POLICIES: Dict[HierarchyLevel, LevelPolicy] = {
    HierarchyLevel.KEY_RESULT: LevelPolicy(
        HierarchyLevel.KEY_RESULT, HierarchyLevel.INDICATOR, honors_formula=True
    ),
    HierarchyLevel.FUNCTIONAL_OBJECTIVE: LevelPolicy(
        HierarchyLevel.FUNCTIONAL_OBJECTIVE, HierarchyLevel.KEY_RESULT, honors_formula=True
    ),
    HierarchyLevel.DEPARTMENT: LevelPolicy(
        HierarchyLevel.DEPARTMENT, HierarchyLevel.FUNCTIONAL_OBJECTIVE, honors_formula=False
    ),
    HierarchyLevel.ORG_OBJECTIVE: LevelPolicy(
        HierarchyLevel.ORG_OBJECTIVE, HierarchyLevel.DEPARTMENT, honors_formula=False
    ),
    HierarchyLevel.BUSINESS_OUTCOME: LevelPolicy(
        HierarchyLevel.BUSINESS_OUTCOME, HierarchyLevel.ORG_OBJECTIVE, honors_formula=False
    ),
}


# =============================================================================
# ROLLUP
# =============================================================================

class HierarchyRollup:
    """
    Stateless rollup driver.

    Holds only configuration (thresholds, level policies); safe to share
    between threads.

    Usage:
        driver = HierarchyRollup(thresholds=config.get_rag_thresholds())
        annotated = driver.annotate(key_result_node)
        tree = driver.rollup(org_objectives, name='Grow ARR 2026')
    """

    def __init__(
        self,
        thresholds: Optional[RAGThresholds] = None,
        level_policies: Optional[Dict[HierarchyLevel, LevelPolicy]] = None
    ):
        self.thresholds = thresholds or DEFAULT_RAG_THRESHOLDS
        self.level_policies = dict(LEVEL_POLICIES if level_policies is None else level_policies)

    def effective_formula(self, node: HierarchyNode) -> FormulaType:
        """Aggregation type applied at this node after the level policy."""
        policy = self.level_policies.get(node.level)
        if policy is None or not policy.honors_formula:
            return FormulaType.AVG
        return parse_formula_type(node.formula)

    def annotate(self, node: HierarchyNode, depth: int = 0) -> AnnotatedNode:
        """
        Compute progress/status for a node and all of its descendants.

        Args:
            node: Subtree root at any level
            depth: Levels already descended (bounded by MAX_HIERARCHY_DEPTH)

        Returns:
            AnnotatedNode mirroring the input subtree
        """
        if node.is_leaf:
            return self._annotate_indicator(node)

        policy = self.level_policies.get(node.level)
        if policy is None or depth > MAX_HIERARCHY_DEPTH:
            logger.warning(f"Cannot roll up node {node.id} at level {node.level} (depth {depth})")
            return AnnotatedNode(node=node, weight=child_weight(node.target_value))

        annotated_children = []
        for child in node.children:
            if child.level != policy.child_level:
                logger.warning(
                    f"Skipping child {child.id} of {node.id}: expected {policy.child_level.value}, "
                    f"got {child.level.value}"
                )
                continue
            annotated_children.append(self.annotate(child, depth + 1))

        formula_type = self.effective_formula(node)
        contributing = [c for c in annotated_children if c.has_data]

        if contributing:
            progress = aggregate_progress(
                [c.progress for c in contributing],
                formula_type,
                [c.weight for c in contributing]
            )
            has_data = True
            source = SOURCE_CHILDREN
        elif has_measurement(node.current_value, node.target_value):
            # STOP: no child reported, use the node's own values
            progress = calculate_progress(node.current_value, node.target_value)
            has_data = True
            source = SOURCE_OWN_VALUES
        else:
            progress = 0.0
            has_data = False
            source = SOURCE_NONE

        result = ProgressResult(
            progress=progress,
            status=progress_to_status(progress, has_data, self.thresholds),
            has_data=has_data,
        )

        logger.debug(
            f"[rollup] {node.level.value} {node.id}: {formula_type.value} over "
            f"{len(contributing)}/{len(annotated_children)} children -> "
            f"{progress:.2f}% ({result.status.value}, source={source})"
        )

        return AnnotatedNode(
            node=node,
            result=result,
            formula_type=formula_type,
            formula_honored=policy.honors_formula,
            source=source,
            weight=child_weight(node.target_value),
            children=tuple(annotated_children),
        )

    def _annotate_indicator(self, node: HierarchyNode) -> AnnotatedNode:
        has_data = has_measurement(node.current_value, node.target_value)
        progress = calculate_progress(node.current_value, node.target_value)
        return AnnotatedNode(
            node=node,
            result=ProgressResult(
                progress=progress,
                status=progress_to_status(progress, has_data, self.thresholds),
                has_data=has_data,
            ),
            formula_type=FormulaType.AVG,
            source=SOURCE_OWN_VALUES if has_data else SOURCE_NONE,
            weight=child_weight(node.target_value),
        )

    def rollup(
        self,
        org_objectives: Sequence[HierarchyNode],
        name: str = '',
        outcome_id: Optional[str] = None
    ) -> AnnotatedNode:
        """
        Roll up a Business Outcome group (all Org Objectives sharing one outcome).

        Args:
            org_objectives: Org Objective subtrees
            name: Business Outcome name
            outcome_id: Identifier for the synthetic root, defaults to name

        Returns:
            Annotated Business Outcome tree
        """
        outcome = HierarchyNode(
            id=outcome_id or name or 'business_outcome',
            level=HierarchyLevel.BUSINESS_OUTCOME,
            name=name,
            children=tuple(org_objectives),
        )
        tree = self.annotate(outcome)

        logger.info(
            f"Rolled up '{outcome.display_name}': {count_nodes(tree)} nodes, "
            f"progress={tree.progress:.1f}%, status={tree.status.value}"
        )
        return tree


def count_nodes(tree: AnnotatedNode) -> int:
    return 1 + sum(count_nodes(child) for child in tree.children)


# =============================================================================
# MODULE-LEVEL SHORTCUTS
# =============================================================================

def annotate(node: HierarchyNode, thresholds: Optional[RAGThresholds] = None) -> AnnotatedNode:
    return HierarchyRollup(thresholds=thresholds).annotate(node)


def rollup(
    org_objectives: Sequence[HierarchyNode],
    name: str = '',
    thresholds: Optional[RAGThresholds] = None
) -> AnnotatedNode:
    return HierarchyRollup(thresholds=thresholds).rollup(org_objectives, name=name)
