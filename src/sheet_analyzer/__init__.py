"""
Sheet Analyzer - Spreadsheet Column Analysis

Classifies spreadsheet columns, computes descriptive statistics, finds
duplicate rows and derives chart-ready aggregates (histograms, frequency
tables, correlation matrix).
"""

__version__ = '1.0.0'
__author__ = 'Your Team'

from .grid import Cell, CellKind, Column, Grid, RowPreview
from .profiling import AnalysisConfig, AnalysisReport, ColumnType, SheetProfiler, analyze
from .loaders import GridLoader, LoaderError
from .reporting import ReportGenerator, CSVGenerator
from .utils import ConfigLoader, setup_logging

__all__ = [
    'Cell',
    'CellKind',
    'Column',
    'Grid',
    'RowPreview',
    'AnalysisConfig',
    'AnalysisReport',
    'ColumnType',
    'SheetProfiler',
    'analyze',
    'GridLoader',
    'LoaderError',
    'ReportGenerator',
    'CSVGenerator',
    'ConfigLoader',
    'setup_logging',
]
