# okr_rollup/__init__.py
"""
OKR Progress Rollup Package

- progress: progress calculation, formula resolution, aggregation,
  RAG classification and the hierarchy rollup driver
- config: Configuration management (.env), thresholds and logging setup

Usage:
    from okr_rollup.config import config, configure_logging
    from okr_rollup.progress import OKRTreeBuilder, HierarchyRollup

    configure_logging()
    driver = HierarchyRollup(thresholds=config.get_rag_thresholds())

The config module is not imported here so the engine can be used without
loading any environment settings.
"""

from .progress import (
    HierarchyLevel,
    HierarchyNode,
    AnnotatedNode,
    ProgressResult,
    RAGStatus,
    FormulaType,
    HierarchyRollup,
    rollup,
)

__all__ = [
    'HierarchyLevel',
    'HierarchyNode',
    'AnnotatedNode',
    'ProgressResult',
    'RAGStatus',
    'FormulaType',
    'HierarchyRollup',
    'rollup',
]

__version__ = '1.0.0'
