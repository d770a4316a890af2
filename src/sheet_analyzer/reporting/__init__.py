"""Reporting modules."""

from .report_generator import ReportGenerator
from .csv_generator import CSVGenerator
from .excel_generator import ExcelGenerator

__all__ = ['ReportGenerator', 'CSVGenerator', 'ExcelGenerator']
