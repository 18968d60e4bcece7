"""Tests for the progress calculator and the aggregator."""
import pytest

from okr_rollup.progress import (
    FormulaType,
    aggregate_progress,
    calculate_progress,
    child_weight,
    has_measurement,
)


# ---------------------------------------------------------------------------
# calculate_progress
# ---------------------------------------------------------------------------


class TestCalculateProgress:
    def test_missing_current(self):
        assert calculate_progress(None, 100) == 0

    def test_missing_target(self):
        assert calculate_progress(50, None) == 0

    def test_zero_target(self):
        assert calculate_progress(50, 0) == 0

    def test_negative_target(self):
        assert calculate_progress(50, -10) == 0

    def test_half(self):
        assert calculate_progress(50, 100) == 50

    def test_can_exceed_hundred(self):
        assert calculate_progress(150, 100) == 150

    def test_not_rounded(self):
        assert calculate_progress(1, 3) == pytest.approx(33.3333333, rel=1e-6)
        assert calculate_progress(1, 3) != 33

    def test_zero_current_is_real_zero(self):
        assert calculate_progress(0, 100) == 0
        assert has_measurement(0, 100)


class TestHasMeasurement:
    @pytest.mark.parametrize("current,target", [(None, 100), (50, None), (50, 0), (None, None), (5, -1)])
    def test_no_data(self, current, target):
        assert not has_measurement(current, target)

    def test_has_data(self):
        assert has_measurement(10, 20)


class TestChildWeight:
    def test_uses_target(self):
        assert child_weight(3) == 3.0

    def test_missing_target_defaults_to_one(self):
        assert child_weight(None) == 1.0

    def test_zero_target_defaults_to_one(self):
        assert child_weight(0) == 1.0


# ---------------------------------------------------------------------------
# aggregate_progress
# ---------------------------------------------------------------------------


class TestAggregateProgress:
    def test_empty_is_zero(self):
        assert aggregate_progress([], FormulaType.AVG) == 0
        assert aggregate_progress([], FormulaType.MIN) == 0
        assert aggregate_progress([], FormulaType.WEIGHTED_AVG, []) == 0

    def test_avg(self):
        assert aggregate_progress([50, 100], FormulaType.AVG) == 75

    def test_sum(self):
        assert aggregate_progress([10, 20, 30], FormulaType.SUM) == 60

    def test_sum_can_exceed_hundred(self):
        assert aggregate_progress([80, 90], FormulaType.SUM) == 170

    def test_min(self):
        assert aggregate_progress([80, 20], FormulaType.MIN) == 20

    def test_max(self):
        assert aggregate_progress([80, 20], FormulaType.MAX) == 80

    def test_weighted_avg(self):
        assert aggregate_progress([50, 100], FormulaType.WEIGHTED_AVG, [1, 3]) == 87.5

    def test_weighted_avg_zero_weights_falls_back_to_avg(self):
        assert aggregate_progress([50, 100], FormulaType.WEIGHTED_AVG, [0, 0]) == 75

    def test_weighted_avg_without_weights_falls_back_to_avg(self):
        assert aggregate_progress([50, 100], FormulaType.WEIGHTED_AVG) == 75

    def test_weighted_avg_length_mismatch_falls_back_to_avg(self):
        assert aggregate_progress([50, 100], FormulaType.WEIGHTED_AVG, [1, 2, 3]) == 75

    def test_weights_ignored_for_other_formulas(self):
        assert aggregate_progress([50, 100], FormulaType.AVG, [1, 3]) == 75

    def test_returns_builtin_float(self):
        assert type(aggregate_progress([50, 100], FormulaType.AVG)) is float
