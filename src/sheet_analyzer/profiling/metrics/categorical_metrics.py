"""Calculate statistical metrics for text columns."""

from collections import Counter
from typing import List, Sequence, Tuple

from ...grid import Cell
from ..models import CategoricalStats
from ...utils.logger import get_logger

logger = get_logger('categorical_metrics')


class CategoricalMetricsCalculator:
    """Frequency-based statistics over stringified cell values."""

    def __init__(self, most_common_limit: int = 5):
        """
        Args:
            most_common_limit: Number of (value, count) pairs kept in most_common
        """
        self.most_common_limit = most_common_limit

    @staticmethod
    def frequencies(cells: Sequence[Cell]) -> Counter:
        """
        Count stringified non-missing values.

        The number 5 and the text "5" count as the same value. Insertion
        order is first-seen order.
        """
        counter = Counter()
        for cell in cells:
            if not cell.is_missing:
                counter[cell.as_text()] += 1
        return counter

    @staticmethod
    def top_values(counter: Counter, limit: int) -> List[Tuple[str, int]]:
        """
        Most frequent values, count descending.

        Ties keep first-seen order (Counter.most_common is stable).
        """
        return [(value, int(count)) for value, count in counter.most_common(limit)]

    def calculate_metrics(self, column_name: str, cells: Sequence[Cell]) -> CategoricalStats:
        """
        Calculate categorical metrics for a column.

        Args:
            column_name: Column being analyzed (for logging)
            cells: Column cells; missing cells are skipped

        Returns:
            CategoricalStats
        """
        logger.debug(f"Calculating categorical metrics for {column_name}")

        counter = self.frequencies(cells)
        total = sum(counter.values())

        avg_length = None
        if total > 0:
            avg_length = sum(len(value) * count for value, count in counter.items()) / total

        stats = CategoricalStats(
            most_common=self.top_values(counter, self.most_common_limit),
            frequencies=dict(counter),
            avg_length=avg_length
        )

        logger.debug(f"Calculated categorical metrics for {column_name} (cardinality: {len(counter)})")
        return stats
