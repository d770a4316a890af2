"""
CSV Report Generator Module

Writes column statistics as CSV, and re-exports a Grid as CSV.
"""

import csv
import io
from pathlib import Path
from typing import Any, Dict, TextIO, Union

from ..grid import Grid
from ..profiling.models import AnalysisReport, ColumnStat
from ..utils.logger import get_logger

logger = get_logger('csv_generator')

STATS_FIELDS = [
    'column', 'type', 'total', 'non_empty', 'missing', 'missing_percent', 'unique_count',
    'min', 'max', 'mean', 'median', 'std_dev', 'q1', 'most_common'
]


class CSVGenerator:
    """Generate CSV files from analysis results and grids."""

    @staticmethod
    def generate_column_stats_csv(report: AnalysisReport, output_path: Union[str, Path]) -> None:
        """
        Write one row per column with its statistics.

        Args:
            report: Analysis result
            output_path: Path to output CSV file
        """
        rows = [CSVGenerator._flatten_stats(stat) for stat in report.columns]

        with open(output_path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=STATS_FIELDS)
            writer.writeheader()
            writer.writerows(rows)

        logger.info(f"Column statistics CSV written: {output_path}")

    @staticmethod
    def _flatten_stats(stat: ColumnStat) -> Dict[str, Any]:
        """
        Flatten a ColumnStat to a CSV row; fields of the other type stay empty.

        Args:
            stat: Column statistics

        Returns:
            Dictionary keyed by STATS_FIELDS
        """
        flat = {
            'column': stat.name,
            'type': stat.type.value,
            'total': stat.total,
            'non_empty': stat.non_empty,
            'missing': stat.missing,
            'missing_percent': stat.missing_percent,
            'unique_count': stat.unique_count,
            'min': None,
            'max': None,
            'mean': None,
            'median': None,
            'std_dev': None,
            'q1': None,
            'most_common': None
        }

        if stat.numeric is not None:
            numeric = stat.numeric
            flat['min'] = numeric.min
            flat['max'] = numeric.max
            flat['mean'] = round(numeric.mean, 4) if numeric.mean is not None else None
            flat['median'] = round(numeric.median, 4) if numeric.median is not None else None
            flat['std_dev'] = round(numeric.std_dev, 4) if numeric.std_dev is not None else None
            flat['q1'] = numeric.q1

        elif stat.categorical is not None:
            flat['most_common'] = '; '.join(
                f"{value}: {count}" for value, count in stat.categorical.most_common
            )

        return flat

    @staticmethod
    def write_grid(grid: Grid, stream: TextIO) -> None:
        """Write header and data rows to an open text stream, missing cells empty."""
        writer = csv.writer(stream, lineterminator='\n')
        writer.writerows(grid.to_rows())

    @staticmethod
    def grid_to_csv(grid: Grid) -> str:
        """Header and data rows as CSV text."""
        buffer = io.StringIO()
        CSVGenerator.write_grid(grid, buffer)
        return buffer.getvalue()

    @staticmethod
    def export_grid(grid: Grid, output_path: Union[str, Path]) -> Path:
        """
        Re-export a grid as a CSV file.

        Args:
            grid: Grid to export
            output_path: Destination file

        Returns:
            Path written
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', newline='', encoding='utf-8') as f:
            CSVGenerator.write_grid(grid, f)

        logger.info(f"Grid exported to CSV: {path}")
        return path
