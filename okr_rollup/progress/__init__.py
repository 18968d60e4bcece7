# okr_rollup/progress/__init__.py
"""
OKR Progress Module

Hierarchical progress aggregation and RAG status classification for
Business Outcome -> Org Objective -> Department -> Functional Objective ->
Key Result -> Indicator.

VERSION: 1.0.0

Components:
- calculate_progress / aggregate_progress: numeric core
- parse_formula_type: free-text formula -> FormulaType
- progress_to_status: percentage -> RAGStatus
- HierarchyRollup / rollup: bottom-up recomputation of the whole tree
- build_breakdown: drill-down explanation of one node
- OKRTreeBuilder: flat DataFrames -> HierarchyNode trees
- flatten_tree / summarize_status: DataFrames for reporting

Usage:
    from okr_rollup.progress import OKRTreeBuilder, rollup, flatten_tree

    outcomes = OKRTreeBuilder(org_df, dept_df, fo_df, kr_df, ind_df).build_business_outcomes()
    tree = rollup(outcomes['Grow ARR'], name='Grow ARR')
    report_df = flatten_tree(tree)
"""

# Constants
from .constants import (
    HierarchyLevel,
    LEVEL_ORDER,
    LEVEL_DISPLAY_NAMES,
    DEFAULT_GREEN_THRESHOLD,
    DEFAULT_AMBER_THRESHOLD,
    COLORS,
)

# Formula Resolver
from .formulas import FormulaType, parse_formula_type, describe_formula

# Progress Calculator & Aggregator
from .calculator import (
    calculate_progress,
    has_measurement,
    child_weight,
    aggregate_progress,
)

# Status Classifier
from .status import (
    RAGStatus,
    RAGThresholds,
    DEFAULT_RAG_THRESHOLDS,
    progress_to_status,
    score_to_status,
    status_to_score,
    status_label,
    display_progress,
)

# Models
from .models import HierarchyNode, ProgressResult, AnnotatedNode

# Rollup Driver
from .rollup import HierarchyRollup, LevelPolicy, LEVEL_POLICIES, annotate, rollup

# Breakdown
from .breakdown import (
    CalculationBreakdown,
    ChildContribution,
    build_breakdown,
    indicator_contributions,
)

# Adapters
from .tree_builder import OKRTreeBuilder
from .data_processor import flatten_tree, summarize_status, nodes_at_level

__all__ = [
    # Classes
    'HierarchyLevel',
    'FormulaType',
    'RAGStatus',
    'RAGThresholds',
    'HierarchyNode',
    'ProgressResult',
    'AnnotatedNode',
    'HierarchyRollup',
    'LevelPolicy',
    'CalculationBreakdown',
    'ChildContribution',
    'OKRTreeBuilder',

    # Functions
    'parse_formula_type',
    'describe_formula',
    'calculate_progress',
    'has_measurement',
    'child_weight',
    'aggregate_progress',
    'progress_to_status',
    'score_to_status',
    'status_to_score',
    'status_label',
    'display_progress',
    'annotate',
    'rollup',
    'build_breakdown',
    'indicator_contributions',
    'flatten_tree',
    'summarize_status',
    'nodes_at_level',

    # Constants
    'LEVEL_ORDER',
    'LEVEL_DISPLAY_NAMES',
    'LEVEL_POLICIES',
    'DEFAULT_GREEN_THRESHOLD',
    'DEFAULT_AMBER_THRESHOLD',
    'DEFAULT_RAG_THRESHOLDS',
    'COLORS',
]

__version__ = '1.0.0'
