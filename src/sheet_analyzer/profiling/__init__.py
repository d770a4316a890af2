"""Column analysis engine."""

from .column_classifier import ColumnClassifier, ColumnType
from .correlation import CorrelationEngine, pearson
from .duplicates import DuplicateDetector
from .histogram import HistogramBuilder
from .models import (
    AnalysisReport,
    CategoricalStats,
    ColumnStat,
    CorrelationMatrix,
    DataQuality,
    HistogramBin,
    NumericalStats
)
from .profiler import AnalysisConfig, SheetProfiler, analyze

__all__ = [
    'ColumnClassifier',
    'ColumnType',
    'CorrelationEngine',
    'pearson',
    'DuplicateDetector',
    'HistogramBuilder',
    'AnalysisReport',
    'CategoricalStats',
    'ColumnStat',
    'CorrelationMatrix',
    'DataQuality',
    'HistogramBin',
    'NumericalStats',
    'AnalysisConfig',
    'SheetProfiler',
    'analyze'
]
