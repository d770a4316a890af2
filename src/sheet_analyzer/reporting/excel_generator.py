"""
Excel Report Generator Module

Generates an Excel workbook with column statistics, histogram and
correlation sheets.
"""

from pathlib import Path
from typing import Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from ..profiling.models import AnalysisReport
from ..utils.logger import get_logger

logger = get_logger('excel_generator')

HEADER_FILL = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF", size=11)
BORDER = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin')
)
QUALITY_FILLS = {
    'excellent': PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid"),
    'good': PatternFill(start_color="FFEB9C", end_color="FFEB9C", fill_type="solid"),
    'poor': PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid"),
}


class ExcelGenerator:
    """Generator for Excel analysis reports."""

    def generate_analysis_report(
        self,
        report: AnalysisReport,
        output_path: Union[str, Path],
        title: str = "Sheet Analysis"
    ) -> None:
        """
        Generate Excel report.

        Args:
            report: Analysis result
            output_path: Path to save the Excel file
            title: Title written on the summary sheet
        """
        logger.info(f"Generating Excel report: {output_path}")

        wb = Workbook()
        wb.remove(wb.active)

        self._add_summary_sheet(wb, report, title)
        self._add_columns_sheet(wb, report)

        if report.charts.histograms:
            self._add_histogram_sheet(wb, report)

        if report.charts.correlation is not None:
            self._add_correlation_sheet(wb, report)

        wb.save(output_path)
        logger.info(f"Excel report saved: {output_path}")

    @staticmethod
    def _write_header(ws, row: int, headers) -> None:
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=row, column=col_idx, value=header)
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            cell.border = BORDER
            cell.alignment = Alignment(horizontal='center', vertical='center')

    def _add_summary_sheet(self, wb: Workbook, report: AnalysisReport, title: str) -> None:
        ws = wb.create_sheet("Summary", 0)
        quality = report.quality

        ws['A1'] = title
        ws['A1'].font = Font(bold=True, size=14)
        ws.merge_cells('A1:C1')

        self._write_header(ws, 3, ['Metric', 'Value', 'Rating'])
        rows = [
            ('Data rows', report.row_count, None),
            ('Columns', report.column_count, None),
            ('Numeric columns', len(report.numeric_columns), None),
            ('Text columns', len(report.text_columns), None),
            ('Completeness %', quality.completeness, quality.completeness_class),
            ('Duplicate rows', quality.duplicate_count, quality.duplicate_class),
            ('Avg missing %', quality.avg_missing_percent, quality.missing_class),
            ('Quality score %', quality.quality_score, None),
        ]

        for label, value, rating in rows:
            ws.append([label, value, rating])
            current_row = ws.max_row
            for col_idx in range(1, 4):
                ws.cell(row=current_row, column=col_idx).border = BORDER
            if rating:
                ws.cell(row=current_row, column=3).fill = QUALITY_FILLS[rating]

        ws.column_dimensions['A'].width = 24
        ws.column_dimensions['B'].width = 14
        ws.column_dimensions['C'].width = 12

    def _add_columns_sheet(self, wb: Workbook, report: AnalysisReport) -> None:
        ws = wb.create_sheet("Columns")
        headers = ['Column', 'Type', 'Total', 'Non-empty', 'Missing', 'Missing %', 'Unique',
                   'Min', 'Max', 'Mean', 'Median', 'Std Dev', 'Q1', 'Most Common']
        self._write_header(ws, 1, headers)

        for stat in report.columns:
            numeric = stat.numeric
            most_common = None
            if stat.categorical is not None:
                most_common = ', '.join(f"{v} ({c})" for v, c in stat.categorical.most_common)

            ws.append([
                stat.name,
                stat.type.value,
                stat.total,
                stat.non_empty,
                stat.missing,
                stat.missing_percent,
                stat.unique_count,
                numeric.min if numeric else None,
                numeric.max if numeric else None,
                numeric.mean if numeric else None,
                numeric.median if numeric else None,
                numeric.std_dev if numeric else None,
                numeric.q1 if numeric else None,
                most_common
            ])

        ws.column_dimensions['A'].width = 30
        ws.column_dimensions['N'].width = 50
        ws.freeze_panes = ws['A2']

    def _add_histogram_sheet(self, wb: Workbook, report: AnalysisReport) -> None:
        ws = wb.create_sheet("Histograms")
        self._write_header(ws, 1, ['Column', 'Range Start', 'Range End', 'Count'])

        for histogram in report.charts.histograms:
            for b in histogram.bins:
                ws.append([histogram.column, b.range_start, b.range_end, b.count])

        ws.column_dimensions['A'].width = 30

    def _add_correlation_sheet(self, wb: Workbook, report: AnalysisReport) -> None:
        ws = wb.create_sheet("Correlation")
        matrix = report.charts.correlation
        self._write_header(ws, 1, [''] + matrix.columns)

        for name, row in zip(matrix.columns, matrix.values):
            ws.append([name] + [round(v, 4) for v in row])

        ws.column_dimensions['A'].width = 30
