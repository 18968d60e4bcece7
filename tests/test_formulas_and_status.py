"""Tests for formula resolution and RAG classification."""
import pytest

from okr_rollup.progress import (
    FormulaType,
    RAGStatus,
    RAGThresholds,
    describe_formula,
    display_progress,
    parse_formula_type,
    progress_to_status,
    score_to_status,
    status_label,
    status_to_score,
)


# ---------------------------------------------------------------------------
# parse_formula_type
# ---------------------------------------------------------------------------


class TestParseFormulaType:
    def test_none_defaults_to_avg(self):
        assert parse_formula_type(None) == FormulaType.AVG

    def test_empty_defaults_to_avg(self):
        assert parse_formula_type("") == FormulaType.AVG
        assert parse_formula_type("   ") == FormulaType.AVG

    def test_unrecognized_defaults_to_avg(self):
        assert parse_formula_type("banana") == FormulaType.AVG

    def test_weighted_avg_with_space(self):
        assert parse_formula_type("weighted avg") == FormulaType.WEIGHTED_AVG

    def test_weighted_avg_with_underscore(self):
        assert parse_formula_type("WEIGHTED_AVG(KRs)") == FormulaType.WEIGHTED_AVG

    def test_sum_substring(self):
        assert parse_formula_type("SUM of KPIs") == FormulaType.SUM

    def test_min_and_max(self):
        assert parse_formula_type("min(KR1, KR2)") == FormulaType.MIN
        assert parse_formula_type("Max of children") == FormulaType.MAX

    def test_sum_wins_over_min(self):
        assert parse_formula_type("MIN(SUM(KRs), 100)") == FormulaType.SUM

    def test_arithmetic_text_is_avg(self):
        assert parse_formula_type("(KR1 % + KR2 %) / 2") == FormulaType.AVG

    def test_description(self):
        assert "target values" in describe_formula(FormulaType.WEIGHTED_AVG)


# ---------------------------------------------------------------------------
# progress_to_status
# ---------------------------------------------------------------------------


class TestProgressToStatus:
    @pytest.mark.parametrize("progress", [-5, 0, 30, 51, 76, 120, 1000])
    def test_no_data_is_always_not_set(self, progress):
        assert progress_to_status(progress, False) == RAGStatus.NOT_SET

    def test_zero_with_data_is_not_set(self):
        assert progress_to_status(0, True) == RAGStatus.NOT_SET

    def test_negative_with_data_is_not_set(self):
        assert progress_to_status(-10, True) == RAGStatus.NOT_SET

    def test_red(self):
        assert progress_to_status(50, True) == RAGStatus.RED
        assert progress_to_status(0.5, True) == RAGStatus.RED

    def test_amber_bounds(self):
        assert progress_to_status(51, True) == RAGStatus.AMBER
        assert progress_to_status(75, True) == RAGStatus.AMBER
        assert progress_to_status(75.99, True) == RAGStatus.AMBER

    def test_green(self):
        assert progress_to_status(76, True) == RAGStatus.GREEN
        assert progress_to_status(120, True) == RAGStatus.GREEN

    def test_custom_thresholds(self):
        thresholds = RAGThresholds(green=70, amber=40)
        assert progress_to_status(70, True, thresholds) == RAGStatus.GREEN
        assert progress_to_status(45, True, thresholds) == RAGStatus.AMBER
        assert progress_to_status(39, True, thresholds) == RAGStatus.RED

    def test_status_values(self):
        assert RAGStatus.NOT_SET.value == 'not-set'
        assert RAGStatus.GREEN == 'green'


class TestStatusHelpers:
    def test_labels(self):
        assert status_label(RAGStatus.GREEN) == 'On Track'
        assert status_label(RAGStatus.AMBER) == 'At Risk'
        assert status_label(RAGStatus.RED) == 'Critical'
        assert status_label(RAGStatus.NOT_SET) == 'Not Set'

    def test_scores(self):
        assert status_to_score(RAGStatus.GREEN) == 85
        assert status_to_score('not-set') == 0

    def test_score_to_status_has_no_not_set_band(self):
        assert score_to_status(0) == RAGStatus.RED
        assert score_to_status(60) == RAGStatus.AMBER
        assert score_to_status(90) == RAGStatus.GREEN

    def test_display_rounding_half_up(self):
        assert display_progress(87.5) == 88
        assert display_progress(86.5) == 87
        assert display_progress(33.333) == 33
        assert display_progress(0) == 0
