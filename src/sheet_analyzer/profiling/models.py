"""
Analysis Report Models

Plain data containers produced by the analyzer. Every container converts to
JSON-serializable dictionaries with ``to_dict``.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple, Any

from .column_classifier import ColumnType


@dataclass
class NumericalStats:
    """Statistics for numeric columns. None means unavailable."""
    count: int
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    std_dev: Optional[float] = None
    q1: Optional[float] = None
    sum: Optional[float] = None
    skewness: Optional[float] = None
    kurtosis: Optional[float] = None

    @property
    def available(self) -> bool:
        return self.count > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CategoricalStats:
    """Statistics for text columns."""
    most_common: List[Tuple[str, int]]
    frequencies: Dict[str, int]
    avg_length: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'most_common': [[value, count] for value, count in self.most_common],
            'frequencies': dict(self.frequencies),
            'avg_length': self.avg_length,
        }


@dataclass
class ColumnStat:
    """Per-column summary."""
    name: str
    type: ColumnType
    total: int
    non_empty: int
    missing: int
    missing_percent: float
    unique_count: int
    numeric: Optional[NumericalStats] = None
    categorical: Optional[CategoricalStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': self.type.value,
            'total': self.total,
            'non_empty': self.non_empty,
            'missing': self.missing,
            'missing_percent': self.missing_percent,
            'unique_count': self.unique_count,
            'numeric': self.numeric.to_dict() if self.numeric else None,
            'categorical': self.categorical.to_dict() if self.categorical else None,
        }


@dataclass
class HistogramBin:
    """One equal-width interval of a histogram."""
    range_start: float
    range_end: float
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ColumnHistogram:
    column: str
    bins: List[HistogramBin]

    def to_dict(self) -> Dict[str, Any]:
        return {'column': self.column, 'bins': [b.to_dict() for b in self.bins]}


@dataclass
class CategoryCounts:
    """Top values of a text column, for bar charts."""
    column: str
    values: List[Tuple[str, int]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'column': self.column,
            'values': [[value, count] for value, count in self.values],
        }


@dataclass
class CorrelationMatrix:
    """Square, symmetric matrix of Pearson coefficients."""
    columns: List[str]
    values: List[List[float]]

    def get(self, column_a: str, column_b: str) -> float:
        """
        Coefficient for a pair of columns.

        Raises:
            KeyError: If either column is not part of the matrix
        """
        try:
            i = self.columns.index(column_a)
            j = self.columns.index(column_b)
        except ValueError:
            raise KeyError(f"Column not in correlation matrix: {column_a!r}, {column_b!r}")
        return self.values[i][j]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'columns': list(self.columns),
            'values': [list(row) for row in self.values],
        }


@dataclass
class ChartData:
    histograms: List[ColumnHistogram] = field(default_factory=list)
    top_values: List[CategoryCounts] = field(default_factory=list)
    correlation: Optional[CorrelationMatrix] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'histograms': [h.to_dict() for h in self.histograms],
            'top_values': [t.to_dict() for t in self.top_values],
            'correlation': self.correlation.to_dict() if self.correlation else None,
        }


@dataclass
class DataQuality:
    """Sheet-level completeness and duplication summary."""
    total_cells: int
    filled_cells: int
    completeness: float
    completeness_class: str
    duplicate_count: int
    duplicate_percent: float
    duplicate_class: str
    avg_missing_percent: float
    missing_class: str
    named_columns: int
    quality_score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AnalysisReport:
    """Everything computed for one grid."""
    row_count: int
    column_count: int
    columns: List[ColumnStat]
    duplicate_rows: List[int]
    charts: ChartData
    quality: DataQuality

    @property
    def numeric_columns(self) -> List[ColumnStat]:
        return [c for c in self.columns if c.type is ColumnType.NUMERIC]

    @property
    def text_columns(self) -> List[ColumnStat]:
        return [c for c in self.columns if c.type is ColumnType.TEXT]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'row_count': self.row_count,
            'column_count': self.column_count,
            'columns': [c.to_dict() for c in self.columns],
            'duplicate_rows': list(self.duplicate_rows),
            'charts': self.charts.to_dict(),
            'quality': self.quality.to_dict(),
        }
