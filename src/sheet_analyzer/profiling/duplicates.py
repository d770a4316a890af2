"""Exact duplicate row detection."""

from typing import List, Sequence

from ..grid import Cell, Grid
from ..utils.logger import get_logger

logger = get_logger('duplicates')

ROW_KEY_DELIMITER = '|'


def row_key(cells: Sequence[Cell], delimiter: str = ROW_KEY_DELIMITER) -> str:
    """
    Composite key for a row.

    Cells are stringified (missing cells become "") and joined with the
    delimiter. A cell that itself contains the delimiter can make two
    different rows share a key; no escaping is done.
    """
    return delimiter.join(cell.as_text() for cell in cells)


class DuplicateDetector:
    """Finds rows that repeat an earlier row exactly."""

    def __init__(self, delimiter: str = ROW_KEY_DELIMITER):
        self.delimiter = delimiter

    def find_duplicates(self, rows: Sequence[Sequence[Cell]]) -> List[int]:
        """
        Indices of rows whose key was already seen.

        The first occurrence of a repeated row is not reported.

        Args:
            rows: Data rows (header excluded)

        Returns:
            Ordered 0-based row indices
        """
        seen = set()
        duplicates = []

        for index, row in enumerate(rows):
            key = row_key(row, self.delimiter)
            if key in seen:
                duplicates.append(index)
            else:
                seen.add(key)

        return duplicates

    def find_in_grid(self, grid: Grid) -> List[int]:
        """Duplicate rows of a grid, short rows padded to the header width."""
        rows = [grid.padded_row(i) for i in range(grid.row_count)]
        duplicates = self.find_duplicates(rows)
        logger.debug(f"Found {len(duplicates)} duplicate rows out of {grid.row_count}")
        return duplicates
