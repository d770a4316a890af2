"""Tests for Pearson correlation and the correlation matrix."""

import pytest

from sheet_analyzer.grid import Grid
from sheet_analyzer.profiling.correlation import CorrelationEngine, paired_values, pearson


def test_perfect_positive():
    assert pearson([1, 2, 3], [2, 4, 6]) == 1.0


def test_perfect_negative():
    assert pearson([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)


def test_zero_variance_is_zero():
    assert pearson([1, 1, 1], [5, 9, 2]) == 0
    assert pearson([5, 9, 2], [1, 1, 1]) == 0


def test_no_pairs_is_zero():
    assert pearson([], []) == 0


def test_length_mismatch():
    with pytest.raises(ValueError):
        pearson([1, 2], [1])


def test_symmetric():
    x = [1.5, 2.0, 7.25, 3.0]
    y = [10, 3, 8, 1]
    assert pearson(x, y) == pearson(y, x)


def test_large_magnitudes():
    assert pearson([1e200, -1e200, 0], [1, 2, 3]) == pytest.approx(-0.5)
    assert pearson([1e300, 2e300, 3e300], [2e300, 4e300, 6e300]) == pytest.approx(1.0)


def test_result_is_plain_float():
    assert type(pearson([1, 2, 4], [3, 1, 2])) is float


def test_pairwise_complete_rows():
    grid = Grid.from_rows([['x', 'y'], [1, 2], [2, None], [3, 'abc'], [4, 8]])
    xs, ys = paired_values(grid.column(0), grid.column(1))
    assert xs == [1.0, 4.0]
    assert ys == [2.0, 8.0]


class TestCorrelationEngine:

    def test_matrix(self):
        grid = Grid.from_rows([
            ['a', 'b', 'c'],
            [1, 2, 5],
            [2, 4, 5],
            [3, 6, 5],
        ])
        matrix = CorrelationEngine().build_matrix(grid.columns())
        assert matrix.columns == ['a', 'b', 'c']
        assert matrix.get('a', 'b') == 1.0
        assert matrix.get('b', 'a') == 1.0
        assert matrix.get('a', 'a') == 1.0
        # zero-variance column: 0 on the diagonal and against everything else
        assert matrix.get('c', 'c') == 0.0
        assert matrix.get('a', 'c') == 0.0

    def test_column_cap(self):
        header = [f"c{i}" for i in range(7)]
        rows = [[i * (j + 1) for j in range(7)] for i in range(1, 5)]
        grid = Grid.from_rows([header] + rows)
        matrix = CorrelationEngine(max_columns=5).build_matrix(grid.columns())
        assert matrix.columns == header[:5]
        assert len(matrix.values) == 5
        assert all(len(row) == 5 for row in matrix.values)

    def test_single_column_has_no_matrix(self):
        grid = Grid.from_rows([['a'], [1], [2]])
        assert CorrelationEngine().build_matrix(grid.columns()) is None

    def test_unknown_column(self):
        grid = Grid.from_rows([['a', 'b'], [1, 2], [2, 1]])
        matrix = CorrelationEngine().build_matrix(grid.columns())
        with pytest.raises(KeyError):
            matrix.get('a', 'z')
