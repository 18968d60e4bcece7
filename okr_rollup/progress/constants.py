# okr_rollup/progress/constants.py
"""
Constants for OKR Progress Rollup

VERSION: 1.0.0
"""

from enum import Enum


# =============================================================================
# HIERARCHY LEVELS
# =============================================================================

class HierarchyLevel(str, Enum):
    """Levels of the tracked hierarchy, leaves first."""
    INDICATOR = 'indicator'
    KEY_RESULT = 'key_result'
    FUNCTIONAL_OBJECTIVE = 'functional_objective'
    DEPARTMENT = 'department'
    ORG_OBJECTIVE = 'org_objective'
    BUSINESS_OUTCOME = 'business_outcome'


LEVEL_ORDER = [
    HierarchyLevel.INDICATOR,
    HierarchyLevel.KEY_RESULT,
    HierarchyLevel.FUNCTIONAL_OBJECTIVE,
    HierarchyLevel.DEPARTMENT,
    HierarchyLevel.ORG_OBJECTIVE,
    HierarchyLevel.BUSINESS_OUTCOME,
]

# Five aggregation levels above the indicators
MAX_HIERARCHY_DEPTH = len(LEVEL_ORDER) - 1

LEVEL_DISPLAY_NAMES = {
    HierarchyLevel.INDICATOR: 'KPI',
    HierarchyLevel.KEY_RESULT: 'Key Result',
    HierarchyLevel.FUNCTIONAL_OBJECTIVE: 'Functional Objective',
    HierarchyLevel.DEPARTMENT: 'Department',
    HierarchyLevel.ORG_OBJECTIVE: 'Org Objective',
    HierarchyLevel.BUSINESS_OUTCOME: 'Business Outcome',
}

# =============================================================================
# RAG THRESHOLDS
# 76-100% = Green, 51-75% = Amber, 1-50% = Red, 0 / no data = Not Set
# =============================================================================

DEFAULT_GREEN_THRESHOLD = 76.0
DEFAULT_AMBER_THRESHOLD = 51.0

# Representative score per status (manual scoring screens)
STATUS_SCORES = {
    'green': 85,
    'amber': 55,
    'red': 25,
    'not-set': 0,
}

STATUS_LABELS = {
    'green': 'On Track',
    'amber': 'At Risk',
    'red': 'Critical',
    'not-set': 'Not Set',
}

# =============================================================================
# COLOR SCHEME
# =============================================================================

COLORS = {
    "green": "#28a745",
    "amber": "#ffc107",
    "red": "#dc3545",
    "not-set": "#d3d3d3",
}

# =============================================================================
# FORMULA DISPLAY
# =============================================================================

DEFAULT_FORMULA_LABEL = 'AVG (default)'

# Weight used when a child carries no usable target value
DEFAULT_CHILD_WEIGHT = 1.0

# =============================================================================
# DATA SOURCES (where a node's progress came from)
# =============================================================================

SOURCE_CHILDREN = 'children'
SOURCE_OWN_VALUES = 'own_values'
SOURCE_NONE = 'none'
