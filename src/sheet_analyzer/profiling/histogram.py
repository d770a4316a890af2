"""
Histogram Builder Module

Bins numeric values into equal-width intervals covering [min, max].
"""

import math
from typing import List, Sequence

from .models import HistogramBin


FIXED = 'fixed'
SQRT = 'sqrt'
STRATEGIES = (FIXED, SQRT)


class HistogramBuilder:
    """Builds equal-width histograms."""

    def __init__(self, bins: int = 10, strategy: str = FIXED, max_bins: int = 20):
        """
        Args:
            bins: Bin count for the fixed strategy
            strategy: 'fixed' uses ``bins``; 'sqrt' uses min(max_bins, ceil(sqrt(N)))
            max_bins: Upper bound for the sqrt strategy
        """
        if bins < 1:
            raise ValueError(f"Histogram needs at least one bin, got {bins}")
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown histogram strategy {strategy!r}, expected one of {STRATEGIES}")
        self.bins = bins
        self.strategy = strategy
        self.max_bins = max_bins

    def bin_count(self, value_count: int) -> int:
        if self.strategy == SQRT:
            return max(1, min(self.max_bins, math.ceil(math.sqrt(value_count))))
        return self.bins

    def build(self, values: Sequence[float]) -> List[HistogramBin]:
        """
        Bin values.

        Args:
            values: Parsed numeric values

        Returns:
            Ordered bins without gaps or overlaps; empty if values is empty
        """
        if len(values) == 0:
            return []

        bin_count = self.bin_count(len(values))
        low = min(values)
        high = max(values)
        width = (high - low) / bin_count
        halved = not math.isfinite(width)

        if halved:
            # high - low overflows a double; work on halved operands
            half_span = high / 2 - low / 2
            step = half_span / bin_count
            edges = [
                min(high, 2 * (low / 2 + i * step))
                for i in range(bin_count + 1)
            ]
        else:
            edges = [low + i * width for i in range(bin_count + 1)]

        bins = [
            HistogramBin(range_start=edges[i], range_end=edges[i + 1])
            for i in range(bin_count)
        ]

        for value in values:
            if width == 0:
                index = 0
            elif halved:
                index = math.floor((value / 2 - low / 2) / half_span * bin_count)
            else:
                index = math.floor((value - low) / width)
            # Clamp: max can land past the last edge through rounding
            bins[min(bin_count - 1, index)].count += 1

        return bins
