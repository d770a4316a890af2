"""Main sheet profiling engine."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..grid import Column, Grid
from .column_classifier import ColumnClassifier, ColumnType
from .correlation import CorrelationEngine
from .duplicates import DuplicateDetector
from .histogram import HistogramBuilder, FIXED
from .metrics.categorical_metrics import CategoricalMetricsCalculator
from .metrics.numerical_metrics import NumericalMetricsCalculator
from .models import (
    AnalysisReport,
    CategoryCounts,
    ChartData,
    ColumnHistogram,
    ColumnStat,
)
from .quality import QualitySummarizer
from ..utils.logger import get_logger

logger = get_logger('profiler')


@dataclass(frozen=True)
class AnalysisConfig:
    """Policy knobs for the analyzer."""
    numeric_threshold: float = 0.8
    most_common_limit: int = 5
    histogram_bins: int = 10
    histogram_strategy: str = FIXED
    histogram_columns: int = 4
    top_values_limit: int = 10
    top_values_columns: int = 2
    correlation_columns: int = 5

    @classmethod
    def from_dict(cls, analysis: Optional[Dict[str, Any]]) -> 'AnalysisConfig':
        """
        Build from the ``analysis`` section of the YAML config.

        Args:
            analysis: Section dictionary (missing keys take defaults)

        Returns:
            AnalysisConfig
        """
        analysis = analysis or {}
        histogram = analysis.get('histogram') or {}
        top_values = analysis.get('top_values') or {}
        correlation = analysis.get('correlation') or {}
        defaults = cls()

        return cls(
            numeric_threshold=float(analysis.get('numeric_threshold', defaults.numeric_threshold)),
            most_common_limit=int(analysis.get('most_common_limit', defaults.most_common_limit)),
            histogram_bins=int(histogram.get('bins', defaults.histogram_bins)),
            histogram_strategy=str(histogram.get('strategy', defaults.histogram_strategy)),
            histogram_columns=int(histogram.get('max_columns', defaults.histogram_columns)),
            top_values_limit=int(top_values.get('limit', defaults.top_values_limit)),
            top_values_columns=int(top_values.get('max_columns', defaults.top_values_columns)),
            correlation_columns=int(correlation.get('max_columns', defaults.correlation_columns))
        )


class SheetProfiler:
    """Turns a grid into an AnalysisReport. Holds configuration only."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize sheet profiler.

        Args:
            config: Analysis policy; defaults apply when omitted
        """
        self.config = config or AnalysisConfig()

        self.classifier = ColumnClassifier(self.config.numeric_threshold)
        self.numerical_calc = NumericalMetricsCalculator()
        self.categorical_calc = CategoricalMetricsCalculator(self.config.most_common_limit)
        self.duplicate_detector = DuplicateDetector()
        self.histogram_builder = HistogramBuilder(
            bins=self.config.histogram_bins,
            strategy=self.config.histogram_strategy
        )
        self.correlation_engine = CorrelationEngine(self.config.correlation_columns)
        self.quality_summarizer = QualitySummarizer()

    def profile(self, grid: Grid) -> AnalysisReport:
        """
        Analyze every column of a grid.

        Args:
            grid: Parsed sheet (header + data rows)

        Returns:
            AnalysisReport
        """
        logger.info(f"Analyzing grid with {grid.width} columns and {grid.row_count} rows")

        columns = grid.columns()
        column_stats = []
        numeric_columns: List[Column] = []
        text_columns: List[Column] = []

        for column in columns:
            stat = self.profile_column(column)
            column_stats.append(stat)

            if stat.non_empty == 0:
                continue
            if stat.type is ColumnType.NUMERIC:
                numeric_columns.append(column)
            else:
                text_columns.append(column)

        duplicate_rows = self.duplicate_detector.find_in_grid(grid)
        charts = self._build_charts(numeric_columns, text_columns)
        quality = self.quality_summarizer.summarize(grid, column_stats, duplicate_rows)

        logger.info(
            f"Analysis complete: {len(numeric_columns)} numeric, {len(text_columns)} text, "
            f"{len(duplicate_rows)} duplicate rows"
        )

        return AnalysisReport(
            row_count=grid.row_count,
            column_count=grid.width,
            columns=column_stats,
            duplicate_rows=duplicate_rows,
            charts=charts,
            quality=quality
        )

    def profile_column(self, column: Column) -> ColumnStat:
        """
        Classify a column and compute its type-specific statistics.

        Args:
            column: Column extracted from the grid

        Returns:
            ColumnStat
        """
        total = len(column.cells)
        non_missing = column.non_missing()
        non_empty = len(non_missing)
        missing = total - non_empty
        missing_percent = round(missing / total * 100, 1) if total > 0 else 0.0

        column_type = self.classifier.classify_column(non_missing)
        frequencies = self.categorical_calc.frequencies(non_missing)

        stat = ColumnStat(
            name=column.name,
            type=column_type,
            total=total,
            non_empty=non_empty,
            missing=missing,
            missing_percent=missing_percent,
            unique_count=len(frequencies)
        )

        if column_type is ColumnType.NUMERIC:
            stat.numeric = self.numerical_calc.calculate_metrics(column.name, column.numbers())
        else:
            stat.categorical = self.categorical_calc.calculate_metrics(column.name, non_missing)

        logger.debug(f"Column {column.name}: {column_type.value}, {non_empty}/{total} non-empty")
        return stat

    def _build_charts(self, numeric_columns: List[Column], text_columns: List[Column]) -> ChartData:
        charts = ChartData()

        for column in numeric_columns[:self.config.histogram_columns]:
            bins = self.histogram_builder.build(column.numbers())
            if bins:
                charts.histograms.append(ColumnHistogram(column=column.name, bins=bins))

        for column in text_columns[:self.config.top_values_columns]:
            counter = self.categorical_calc.frequencies(column.cells)
            charts.top_values.append(CategoryCounts(
                column=column.name,
                values=self.categorical_calc.top_values(counter, self.config.top_values_limit)
            ))

        charts.correlation = self.correlation_engine.build_matrix(numeric_columns)
        return charts


def analyze(grid: Grid, config: Optional[AnalysisConfig] = None) -> AnalysisReport:
    """
    Analyze a grid with a fresh profiler.

    Args:
        grid: Parsed sheet (header + data rows)
        config: Analysis policy; defaults apply when omitted

    Returns:
        AnalysisReport
    """
    return SheetProfiler(config).profile(grid)
