# okr_rollup/progress/data_processor.py
"""
Data Processor for OKR Progress

VERSION: 1.0.0

Turn annotated rollup trees into pandas DataFrames for dashboards and
reports. All operations are Pandas-based; nothing is recomputed here, values
are read from the annotated tree as-is.
"""

import logging
from typing import Dict, List, Optional
import pandas as pd

from .constants import COLORS, LEVEL_ORDER, HierarchyLevel
from .models import AnnotatedNode
from .status import RAGStatus, status_label

logger = logging.getLogger(__name__)


FLAT_COLUMNS = [
    'node_id', 'parent_id', 'level', 'depth', 'name', 'formula', 'formula_type',
    'progress', 'display_progress', 'status', 'status_label', 'status_color', 'has_data',
    'source', 'weight', 'children_count',
]

STATUS_ORDER = [s.value for s in RAGStatus]


def flatten_tree(tree: AnnotatedNode) -> pd.DataFrame:
    """
    One row per node, pre-order (parent before its children).

    Args:
        tree: Annotated root at any level

    Returns:
        DataFrame with FLAT_COLUMNS
    """
    rows: List[Dict] = []

    def visit(node: AnnotatedNode, parent_id: Optional[str], depth: int):
        rows.append({
            'node_id': node.id,
            'parent_id': parent_id,
            'level': node.level.value,
            'depth': depth,
            'name': node.node.display_name,
            'formula': node.node.formula,
            'formula_type': node.formula_type.value,
            'progress': node.progress,
            'display_progress': node.result.display_progress,
            'status': node.status.value,
            'status_label': status_label(node.status),
            'status_color': COLORS[node.status.value],
            'has_data': node.has_data,
            'source': node.source,
            'weight': node.weight,
            'children_count': len(node.children),
        })
        for child in node.children:
            visit(child, node.id, depth + 1)

    visit(tree, None, 0)
    return pd.DataFrame(rows, columns=FLAT_COLUMNS)


def summarize_status(flat_df: pd.DataFrame) -> pd.DataFrame:
    """
    Count nodes per level and status (RAG matrix).

    Returns:
        DataFrame indexed by level (leaves first) with one column per status
        plus 'total'
    """
    if flat_df.empty:
        return pd.DataFrame(columns=STATUS_ORDER + ['total'])

    matrix = (
        flat_df.groupby(['level', 'status'])
        .size()
        .unstack(fill_value=0)
        .reindex(columns=STATUS_ORDER, fill_value=0)
    )

    level_order = [lvl.value for lvl in LEVEL_ORDER if lvl.value in matrix.index]
    matrix = matrix.reindex(level_order)
    matrix['total'] = matrix[STATUS_ORDER].sum(axis=1)
    matrix.index.name = 'level'
    matrix.columns.name = None
    return matrix


def nodes_at_level(flat_df: pd.DataFrame, level: HierarchyLevel) -> pd.DataFrame:
    """Rows for one level, worst progress first; nodes without data last."""
    if flat_df.empty:
        return flat_df
    subset = flat_df[flat_df['level'] == HierarchyLevel(level).value]
    return subset.sort_values(['has_data', 'progress'], ascending=[False, True]).reset_index(drop=True)
