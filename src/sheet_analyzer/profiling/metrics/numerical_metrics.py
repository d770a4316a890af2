"""Calculate statistical metrics for numerical columns."""

import math
import numpy as np
from scipy import stats
from typing import Sequence

from ..models import NumericalStats
from ...utils.logger import get_logger

logger = get_logger('numerical_metrics')


class NumericalMetricsCalculator:
    """Calculate descriptive statistics for numeric columns."""

    def calculate_metrics(self, column_name: str, values: Sequence[float]) -> NumericalStats:
        """
        Calculate all numerical metrics for a column.

        Args:
            column_name: Column being analyzed (for logging)
            values: Parsed numeric values; unparsable cells already removed

        Returns:
            NumericalStats, with every statistic None when values is empty
        """
        logger.debug(f"Calculating numerical metrics for {column_name}")

        if len(values) == 0:
            return NumericalStats(count=0)

        data = np.sort(np.asarray(values, dtype=float))
        count = len(data)

        mean = float(np.mean(data))
        # ddof=0: population standard deviation
        std_dev = float(np.std(data))

        mid = count // 2
        if count % 2:
            median = float(data[mid])
        else:
            median = float((data[mid - 1] + data[mid]) / 2)

        # Nearest-rank lower bound, no interpolation
        q1 = float(data[math.floor(count * 0.25)])

        skewness = None
        kurtosis = None

        if count >= 3 and std_dev > 0:
            try:
                skewness = float(stats.skew(data))
                kurtosis = float(stats.kurtosis(data))
            except (ValueError, FloatingPointError) as e:
                logger.warning(f"Error calculating skewness/kurtosis for {column_name}: {e}")

        return NumericalStats(
            count=count,
            min=float(data[0]),
            max=float(data[-1]),
            mean=mean,
            median=median,
            std_dev=std_dev,
            q1=q1,
            sum=float(np.sum(data)),
            skewness=skewness,
            kurtosis=kurtosis
        )
