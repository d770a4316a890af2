"""Tests for numerical and categorical metrics calculators."""

import pytest

from sheet_analyzer.grid import Cell
from sheet_analyzer.profiling.metrics import (
    CategoricalMetricsCalculator,
    NumericalMetricsCalculator
)


def cells(*values):
    return [Cell.from_raw(v) for v in values]


class TestNumericalMetrics:

    @pytest.fixture
    def calc(self):
        return NumericalMetricsCalculator()

    def test_one_to_five(self, calc):
        stats = calc.calculate_metrics('x', [1, 2, 3, 4, 5])
        assert stats.count == 5
        assert stats.mean == 3
        assert stats.median == 3
        assert stats.std_dev == pytest.approx(1.4142, abs=1e-4)
        assert stats.min == 1
        assert stats.max == 5
        assert stats.q1 == 2
        assert stats.sum == 15

    def test_even_count_median(self, calc):
        assert calc.calculate_metrics('x', [1, 2]).median == 1.5

    def test_unsorted_input(self, calc):
        stats = calc.calculate_metrics('x', [9, 1, 5, 3])
        assert stats.median == 4
        # floor(4 * 0.25) = 1 -> second smallest
        assert stats.q1 == 3
        assert stats.min == 1
        assert stats.max == 9

    def test_population_std_dev(self, calc):
        stats = calc.calculate_metrics('x', [2, 4, 4, 4, 5, 5, 7, 9])
        assert stats.std_dev == pytest.approx(2.0)

    def test_single_value(self, calc):
        stats = calc.calculate_metrics('x', [7])
        assert stats.q1 == 7
        assert stats.std_dev == 0
        assert stats.skewness is None

    def test_empty_is_unavailable(self, calc):
        stats = calc.calculate_metrics('x', [])
        assert not stats.available
        assert stats.count == 0
        for value in (stats.min, stats.max, stats.mean, stats.median, stats.std_dev, stats.q1):
            assert value is None

    def test_skewness_of_symmetric_data(self, calc):
        stats = calc.calculate_metrics('x', [1, 2, 3, 4, 5])
        assert stats.skewness == pytest.approx(0.0)
        assert stats.kurtosis is not None

    def test_results_are_plain_floats(self, calc):
        stats = calc.calculate_metrics('x', [1, 2, 3])
        assert type(stats.mean) is float
        assert type(stats.q1) is float


class TestCategoricalMetrics:

    @pytest.fixture
    def calc(self):
        return CategoricalMetricsCalculator()

    def test_frequencies_in_first_seen_order(self, calc):
        stats = calc.calculate_metrics('c', cells('b', 'a', 'b', 'c'))
        assert list(stats.frequencies.items()) == [('b', 2), ('a', 1), ('c', 1)]

    def test_most_common_ties_keep_first_seen_order(self, calc):
        stats = calc.calculate_metrics('c', cells('x', 'y', 'z', 'y', 'x', 'w'))
        assert stats.most_common == [('x', 2), ('y', 2), ('z', 1), ('w', 1)]

    def test_most_common_limited_to_five(self, calc):
        stats = calc.calculate_metrics('c', cells(*'abcdefg'))
        assert len(stats.most_common) == 5
        assert stats.most_common[0] == ('a', 1)

    def test_number_and_string_collide(self, calc):
        stats = calc.calculate_metrics('c', cells(5, '5', 5.0))
        assert stats.frequencies == {'5': 3}

    def test_missing_values_skipped(self, calc):
        stats = calc.calculate_metrics('c', cells('a', None, ''))
        assert stats.frequencies == {'a': 1}

    def test_avg_length(self, calc):
        stats = calc.calculate_metrics('c', cells('ab', 'abcd'))
        assert stats.avg_length == 3

    def test_empty(self, calc):
        stats = calc.calculate_metrics('c', [])
        assert stats.most_common == []
        assert stats.avg_length is None
