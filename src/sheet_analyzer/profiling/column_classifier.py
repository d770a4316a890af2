"""
Column Type Classifier Module

Decides whether a column is numeric or textual from its non-missing cells.
The decision is global per column: a numeric column may still hold a few
unparsable cells, which the numeric summarizer skips.
"""

from enum import Enum
from typing import Any, List, Sequence

from ..grid import Cell


class ColumnType(Enum):
    """Column data type classifications."""
    NUMERIC = "Numeric"
    TEXT = "Text"


class ColumnClassifier:
    """Classifies columns by the share of values that parse as numbers."""

    DEFAULT_THRESHOLD = 0.8

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        """
        Args:
            threshold: Share of numeric values a column must exceed (strictly)
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Numeric threshold must be between 0 and 1, got {threshold}")
        self.threshold = threshold

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """
        Check if a value can be interpreted as numeric.

        Args:
            value: Raw value or Cell

        Returns:
            True if value parses as a finite number
        """
        return Cell.from_raw(value).as_number() is not None

    def classify_column(self, values: Sequence[Any]) -> ColumnType:
        """
        Classify a column based on its values.

        Missing values are ignored. A column with no remaining values is TEXT.

        Args:
            values: Raw values or cells of the column

        Returns:
            ColumnType
        """
        cells: List[Cell] = [Cell.from_raw(v) for v in values]
        non_missing = [c for c in cells if not c.is_missing]

        if not non_missing:
            return ColumnType.TEXT

        numeric_matches = sum(1 for c in non_missing if c.as_number() is not None)

        if numeric_matches > self.threshold * len(non_missing):
            return ColumnType.NUMERIC

        return ColumnType.TEXT
