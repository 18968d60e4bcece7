# okr_rollup/progress/status.py
"""
Status Classifier

Maps progress percentages onto RAG bands:
    >= 76  Green
    >= 51  Amber
    >  0   Red
    <= 0   Not Set (zero means "not yet measured", not "failing")
No data at all is always Not Set.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .constants import (
    DEFAULT_GREEN_THRESHOLD,
    DEFAULT_AMBER_THRESHOLD,
    STATUS_LABELS,
    STATUS_SCORES,
)


class RAGStatus(str, Enum):
    GREEN = 'green'
    AMBER = 'amber'
    RED = 'red'
    NOT_SET = 'not-set'


@dataclass(frozen=True)
class RAGThresholds:
    """Lower bounds (inclusive) of the green and amber bands."""
    green: float = DEFAULT_GREEN_THRESHOLD
    amber: float = DEFAULT_AMBER_THRESHOLD


DEFAULT_RAG_THRESHOLDS = RAGThresholds()


def progress_to_status(
    progress: float,
    has_data: bool,
    thresholds: RAGThresholds = DEFAULT_RAG_THRESHOLDS
) -> RAGStatus:
    """
    Classify a progress percentage.

    Args:
        progress: Percentage, may exceed 100
        has_data: False when no child or own value contributed
        thresholds: Band boundaries, defaults to 76/51

    Returns:
        RAGStatus
    """
    if not has_data:
        return RAGStatus.NOT_SET
    if progress >= thresholds.green:
        return RAGStatus.GREEN
    if progress >= thresholds.amber:
        return RAGStatus.AMBER
    if progress > 0:
        return RAGStatus.RED
    return RAGStatus.NOT_SET


def score_to_status(
    score: float,
    thresholds: RAGThresholds = DEFAULT_RAG_THRESHOLDS
) -> RAGStatus:
    """Three-band classification for manually entered scores (no Not Set band)."""
    if score >= thresholds.green:
        return RAGStatus.GREEN
    if score >= thresholds.amber:
        return RAGStatus.AMBER
    return RAGStatus.RED


def status_to_score(status: RAGStatus) -> int:
    return STATUS_SCORES[RAGStatus(status).value]


def status_label(status: RAGStatus) -> str:
    return STATUS_LABELS[RAGStatus(status).value]


def display_progress(progress: float) -> int:
    """Nearest whole percentage, halves rounded up. For display only."""
    return int(math.floor(progress + 0.5))
