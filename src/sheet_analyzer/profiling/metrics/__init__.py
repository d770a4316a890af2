"""Metrics calculators for different column types."""

from .numerical_metrics import NumericalMetricsCalculator
from .categorical_metrics import CategoricalMetricsCalculator

__all__ = [
    'NumericalMetricsCalculator',
    'CategoricalMetricsCalculator'
]
