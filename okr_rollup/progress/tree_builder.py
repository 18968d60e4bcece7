# okr_rollup/progress/tree_builder.py
"""
OKR Tree Builder

VERSION: 1.0.0

Build HierarchyNode trees from already-fetched flat rows (one DataFrame per
level). No queries are executed here; the caller loads the rows.

Expected columns:
- all levels: id, name (optional)
- org_objectives: business_outcome (optional)
- departments: org_objective_id
- functional_objectives: department_id, formula (optional)
- key_results: functional_objective_id, formula, current_value, target_value (optional)
- indicators: key_result_id, current_value, target_value
"""

import logging
from typing import Any, Dict, List, Optional
import pandas as pd

from .constants import HierarchyLevel
from .models import HierarchyNode

logger = logging.getLogger(__name__)


# (level, parent id column)
PARENT_COLUMNS = {
    HierarchyLevel.INDICATOR: 'key_result_id',
    HierarchyLevel.KEY_RESULT: 'functional_objective_id',
    HierarchyLevel.FUNCTIONAL_OBJECTIVE: 'department_id',
    HierarchyLevel.DEPARTMENT: 'org_objective_id',
    HierarchyLevel.ORG_OBJECTIVE: None,
}

LEVEL_PARENTS = {
    HierarchyLevel.INDICATOR: HierarchyLevel.KEY_RESULT,
    HierarchyLevel.KEY_RESULT: HierarchyLevel.FUNCTIONAL_OBJECTIVE,
    HierarchyLevel.FUNCTIONAL_OBJECTIVE: HierarchyLevel.DEPARTMENT,
    HierarchyLevel.DEPARTMENT: HierarchyLevel.ORG_OBJECTIVE,
}

LEVEL_CHILDREN = {parent: child for child, parent in LEVEL_PARENTS.items()}


def _clean(value: Any) -> Any:
    """NaN/NaT -> None."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _to_float(value: Any) -> Optional[float]:
    value = _clean(value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric value ignored: {value!r}")
        return None


def _to_text(value: Any) -> Optional[str]:
    value = _clean(value)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_id(value: Any) -> Optional[str]:
    value = _clean(value)
    if value is None:
        return None
    # 12.0 from a float column -> '12'
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


class OKRTreeBuilder:
    """
    Build hierarchy trees from flat per-level DataFrames.

    Usage:
        builder = OKRTreeBuilder(
            org_objectives_df=org_df,
            departments_df=dept_df,
            functional_objectives_df=fo_df,
            key_results_df=kr_df,
            indicators_df=ind_df,
        )
        outcomes = builder.build_business_outcomes()
        tree = rollup(outcomes['Grow ARR'], name='Grow ARR')
    """

    def __init__(
        self,
        org_objectives_df: pd.DataFrame,
        departments_df: pd.DataFrame = None,
        functional_objectives_df: pd.DataFrame = None,
        key_results_df: pd.DataFrame = None,
        indicators_df: pd.DataFrame = None
    ):
        self._frames = {
            HierarchyLevel.ORG_OBJECTIVE: org_objectives_df if org_objectives_df is not None else pd.DataFrame(),
            HierarchyLevel.DEPARTMENT: departments_df if departments_df is not None else pd.DataFrame(),
            HierarchyLevel.FUNCTIONAL_OBJECTIVE: (
                functional_objectives_df if functional_objectives_df is not None else pd.DataFrame()
            ),
            HierarchyLevel.KEY_RESULT: key_results_df if key_results_df is not None else pd.DataFrame(),
            HierarchyLevel.INDICATOR: indicators_df if indicators_df is not None else pd.DataFrame(),
        }
        self._children_map: Dict[HierarchyLevel, Dict[str, List[dict]]] = {}
        self._build_children_maps()

    def _build_children_maps(self):
        """Build parent_id -> [rows] per level, dropping orphans."""
        for level, parent_col in PARENT_COLUMNS.items():
            if parent_col is None:
                continue

            df = self._frames[level]
            children_map: Dict[str, List[dict]] = {}
            self._children_map[level] = children_map

            if df.empty:
                continue
            if parent_col not in df.columns:
                logger.warning(f"{level.value} rows have no '{parent_col}' column, skipped")
                continue

            parent_level = LEVEL_PARENTS[level]
            parent_ids = self._ids(parent_level)

            for row in df.to_dict('records'):
                parent_id = _to_id(row.get(parent_col))
                if parent_id is None or parent_id not in parent_ids:
                    logger.warning(
                        f"Dropping {level.value} {row.get('id')}: parent {parent_id!r} not found"
                    )
                    continue
                children_map.setdefault(parent_id, []).append(row)

    def _ids(self, level: HierarchyLevel) -> set:
        df = self._frames[level]
        if df.empty or 'id' not in df.columns:
            return set()
        return {i for i in (_to_id(v) for v in df['id']) if i is not None}

    def _build_node(self, level: HierarchyLevel, row: dict) -> HierarchyNode:
        node_id = _to_id(row.get('id'))
        children = ()
        child_level = LEVEL_CHILDREN.get(level)
        if child_level is not None:
            children = tuple(
                self._build_node(child_level, child_row)
                for child_row in self._children_map.get(child_level, {}).get(node_id, [])
            )

        return HierarchyNode(
            id=node_id,
            level=level,
            name=_to_text(row.get('name')) or '',
            formula=_to_text(row.get('formula')),
            current_value=_to_float(row.get('current_value')),
            target_value=_to_float(row.get('target_value')),
            children=children,
        )

    # =========================================================================
    # PUBLIC
    # =========================================================================

    def build_org_objectives(self) -> List[HierarchyNode]:
        """All Org Objective subtrees, in row order."""
        df = self._frames[HierarchyLevel.ORG_OBJECTIVE]
        if df.empty or 'id' not in df.columns:
            return []
        return [
            self._build_node(HierarchyLevel.ORG_OBJECTIVE, row)
            for row in df.to_dict('records')
            if _to_id(row.get('id')) is not None
        ]

    def build_business_outcomes(self) -> Dict[str, List[HierarchyNode]]:
        """
        Group Org Objectives by their business_outcome text.

        Org Objectives without a business outcome are left out.
        """
        df = self._frames[HierarchyLevel.ORG_OBJECTIVE]
        if df.empty or 'business_outcome' not in df.columns:
            return {}

        outcome_by_id = {
            _to_id(row.get('id')): _to_text(row.get('business_outcome'))
            for row in df.to_dict('records')
        }

        groups: Dict[str, List[HierarchyNode]] = {}
        for org in self.build_org_objectives():
            outcome = outcome_by_id.get(org.id)
            if not outcome:
                logger.debug(f"Org objective {org.id} has no business outcome")
                continue
            groups.setdefault(outcome, []).append(org)
        return groups
