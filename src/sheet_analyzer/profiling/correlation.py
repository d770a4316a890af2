"""
Correlation Engine Module

Pairwise Pearson correlation across numeric columns. Rows where either cell
does not parse as a number are left out of that pair (pairwise complete).
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from ..grid import Column
from .models import CorrelationMatrix
from ..utils.logger import get_logger

logger = get_logger('correlation')


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson coefficient by the sum-of-products formula.

    Returns 0 when there are no pairs or either side has zero variance.

    Args:
        x: First series
        y: Second series, same length as x

    Returns:
        Coefficient in [-1, 1]
    """
    if len(x) != len(y):
        raise ValueError(f"Series lengths differ: {len(x)} != {len(y)}")

    n = len(x)
    if n == 0:
        return 0.0

    # r is scale invariant; unit-scaled series keep the sums of squares finite
    xs = _unit_scaled(x)
    ys = _unit_scaled(y)

    sum_x = np.sum(xs)
    sum_y = np.sum(ys)
    sum_xy = np.dot(xs, ys)
    sum_xx = np.dot(xs, xs)
    sum_yy = np.dot(ys, ys)

    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)

    # Rounding can leave a tiny negative product for constant series
    if spread <= 0:
        return 0.0

    r = float(numerator / np.sqrt(spread))
    return max(-1.0, min(1.0, r))


def _unit_scaled(values: Sequence[float]) -> np.ndarray:
    data = np.asarray(values, dtype=float)
    peak = np.max(np.abs(data))
    if peak == 0:
        return data
    return data / peak


def paired_values(a: Column, b: Column) -> Tuple[List[float], List[float]]:
    """Values of two columns from the rows where both parse as numbers."""
    xs, ys = [], []
    for cell_a, cell_b in zip(a.cells, b.cells):
        x = cell_a.as_number()
        y = cell_b.as_number()
        if x is None or y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def has_variance(values: Sequence[float]) -> bool:
    return len(values) > 0 and min(values) != max(values)


class CorrelationEngine:
    """Builds correlation matrices over numeric columns."""

    def __init__(self, max_columns: int = 5):
        """
        Args:
            max_columns: Only the first N numeric columns are correlated
        """
        if max_columns < 1:
            raise ValueError(f"max_columns must be positive, got {max_columns}")
        self.max_columns = max_columns

    def build_matrix(self, columns: Sequence[Column]) -> Optional[CorrelationMatrix]:
        """
        Correlation matrix of the first ``max_columns`` columns.

        Args:
            columns: Numeric columns in sheet order

        Returns:
            CorrelationMatrix, or None when fewer than two columns are given
        """
        selected = list(columns)[:self.max_columns]
        if len(selected) < 2:
            return None

        size = len(selected)
        values = [[0.0] * size for _ in range(size)]

        for i in range(size):
            values[i][i] = 1.0 if has_variance(selected[i].numbers()) else 0.0
            for j in range(i + 1, size):
                xs, ys = paired_values(selected[i], selected[j])
                r = pearson(xs, ys)
                values[i][j] = r
                values[j][i] = r

        logger.debug(f"Built {size}x{size} correlation matrix")
        return CorrelationMatrix(columns=[c.name for c in selected], values=values)
