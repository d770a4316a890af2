"""Sheet-level data quality summary."""

from typing import List, Sequence

from ..grid import Grid, Cell
from .models import ColumnStat, DataQuality


EXCELLENT = 'excellent'
GOOD = 'good'
POOR = 'poor'


def quality_class(percentage: float) -> str:
    """Bucket a 0-100 score."""
    if percentage >= 90:
        return EXCELLENT
    if percentage >= 70:
        return GOOD
    return POOR


def duplicate_class(duplicate_count: int, row_count: int) -> str:
    if duplicate_count == 0:
        return EXCELLENT
    if duplicate_count < row_count * 0.05:
        return GOOD
    return POOR


def _is_named(raw_name) -> bool:
    cell = Cell.from_raw(raw_name)
    return not cell.is_missing and cell.as_text().strip() != ''


class QualitySummarizer:
    """Completeness, duplication and missing-value summary for a grid."""

    def summarize(
        self,
        grid: Grid,
        column_stats: Sequence[ColumnStat],
        duplicate_rows: List[int]
    ) -> DataQuality:
        """
        Args:
            grid: Analyzed grid
            column_stats: Stats already computed for each column
            duplicate_rows: Output of the duplicate detector

        Returns:
            DataQuality
        """
        total_cells = grid.width * grid.row_count
        filled_cells = sum(stat.non_empty for stat in column_stats)
        completeness = (filled_cells / total_cells * 100) if total_cells > 0 else 0.0

        row_count = grid.row_count
        duplicate_count = len(duplicate_rows)
        duplicate_percent = (duplicate_count / row_count * 100) if row_count > 0 else 0.0

        if column_stats:
            avg_missing = sum(stat.missing_percent for stat in column_stats) / len(column_stats)
        else:
            avg_missing = 0.0

        return DataQuality(
            total_cells=total_cells,
            filled_cells=filled_cells,
            completeness=round(completeness, 1),
            completeness_class=quality_class(completeness),
            duplicate_count=duplicate_count,
            duplicate_percent=round(duplicate_percent, 1),
            duplicate_class=duplicate_class(duplicate_count, row_count),
            avg_missing_percent=round(avg_missing, 1),
            missing_class=quality_class(100 - avg_missing),
            named_columns=sum(1 for name in grid.header if _is_named(name)),
            quality_score=round(100 - avg_missing, 1)
        )
