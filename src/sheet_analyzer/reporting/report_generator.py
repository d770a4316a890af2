"""Report generation for analysis results."""

import json
import os
import re
from datetime import datetime
from typing import Dict, List, Optional

from jinja2 import Environment

from ..grid import RowPreview
from ..profiling.models import AnalysisReport
from .csv_generator import CSVGenerator
from .excel_generator import ExcelGenerator
from ..utils.logger import get_logger


logger = get_logger('report_generator')

SUPPORTED_FORMATS = ('json', 'html', 'csv', 'xlsx')

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Sheet Analysis - {{ source_name }}</title>
    <style>
        body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; background-color: #f5f5f5; }
        .container { max-width: 1400px; margin: 0 auto; background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        h1 { color: #333; border-bottom: 3px solid #667eea; padding-bottom: 10px; }
        .summary-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(150px, 1fr)); gap: 15px; margin: 20px 0; }
        .summary-card { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; border-radius: 8px; text-align: center; }
        .summary-card.excellent { background: linear-gradient(135deg, #28a745 0%, #20c997 100%); }
        .summary-card.good { background: linear-gradient(135deg, #ffc107 0%, #ff8c00 100%); }
        .summary-card.poor { background: linear-gradient(135deg, #dc3545 0%, #c82333 100%); }
        .summary-number { font-size: 32px; font-weight: bold; margin: 10px 0; }
        .summary-label { font-size: 14px; opacity: 0.9; }
        table { width: 100%; border-collapse: collapse; margin: 20px 0; }
        th { background: #366092; color: white; padding: 10px; text-align: left; }
        td { padding: 8px 10px; border-bottom: 1px solid #dee2e6; }
        .numeric { color: #667eea; font-weight: bold; }
        .text { color: #f39c12; font-weight: bold; }
        .bar { background: #667eea; height: 14px; }
        .more-rows { text-align: center; font-style: italic; color: #6c757d; }
    </style>
</head>
<body>
<div class="container">
    <h1>Sheet Analysis: {{ source_name }}</h1>
    <p>Generated at {{ generated_at }}</p>

    <div class="summary-grid">
        <div class="summary-card"><div class="summary-number">{{ report.row_count }}</div><div class="summary-label">Data Rows</div></div>
        <div class="summary-card"><div class="summary-number">{{ report.column_count }}</div><div class="summary-label">Columns</div></div>
        <div class="summary-card {{ report.quality.completeness_class }}"><div class="summary-number">{{ report.quality.completeness }}%</div><div class="summary-label">Completeness</div></div>
        <div class="summary-card {{ report.quality.duplicate_class }}"><div class="summary-number">{{ report.quality.duplicate_count }}</div><div class="summary-label">Duplicate Rows</div></div>
        <div class="summary-card {{ report.quality.missing_class }}"><div class="summary-number">{{ report.quality.avg_missing_percent }}%</div><div class="summary-label">Avg Missing</div></div>
    </div>

    {% if preview %}
    <h2>Data Preview</h2>
    <table>
        <tr>{% for name in preview.header %}<th>{{ name }}</th>{% endfor %}</tr>
        {% for row in preview.rows %}
        <tr>{% for value in row %}<td>{{ value }}</td>{% endfor %}</tr>
        {% endfor %}
        {% if preview.note %}
        <tr><td class="more-rows" colspan="{{ preview.header | length }}">{{ preview.note }}</td></tr>
        {% endif %}
    </table>
    {% endif %}

    <h2>Columns</h2>
    <table>
        <tr><th>Column</th><th>Type</th><th>Non-empty</th><th>Missing</th><th>Unique</th><th>Details</th></tr>
        {% for col in report.columns %}
        <tr>
            <td>{{ col.name }}</td>
            <td class="{{ col.type.value | lower }}">{{ col.type.value }}</td>
            <td>{{ col.non_empty }} / {{ col.total }}</td>
            <td>{{ col.missing }} ({{ col.missing_percent }}%)</td>
            <td>{{ col.unique_count }}</td>
            <td>
            {% if col.numeric and col.numeric.available %}
                min {{ fmt(col.numeric.min) }}, max {{ fmt(col.numeric.max) }},
                mean {{ fmt(col.numeric.mean) }}, median {{ fmt(col.numeric.median) }},
                std {{ fmt(col.numeric.std_dev) }}, Q1 {{ fmt(col.numeric.q1) }}
            {% elif col.categorical and col.categorical.most_common %}
                {% for value, count in col.categorical.most_common %}{{ value }}: {{ count }}{% if not loop.last %}, {% endif %}{% endfor %}
            {% else %}
                N/A
            {% endif %}
            </td>
        </tr>
        {% endfor %}
    </table>

    {% for histogram in report.charts.histograms %}
    <h2>Distribution: {{ histogram.column }}</h2>
    <table>
        <tr><th>Range</th><th>Count</th><th></th></tr>
        {% set peak = histogram.bins | map(attribute='count') | max %}
        {% for b in histogram.bins %}
        <tr>
            <td>{{ fmt(b.range_start) }} - {{ fmt(b.range_end) }}</td>
            <td>{{ b.count }}</td>
            <td><div class="bar" style="width: {{ (b.count / peak * 100) if peak else 0 }}%"></div></td>
        </tr>
        {% endfor %}
    </table>
    {% endfor %}

    {% for top in report.charts.top_values %}
    <h2>Top Values: {{ top.column }}</h2>
    <table>
        <tr><th>Value</th><th>Count</th></tr>
        {% for value, count in top.values %}
        <tr><td>{{ value }}</td><td>{{ count }}</td></tr>
        {% endfor %}
    </table>
    {% endfor %}

    {% if report.charts.correlation %}
    <h2>Correlation Matrix</h2>
    <table>
        <tr><th></th>{% for name in report.charts.correlation.columns %}<th>{{ name }}</th>{% endfor %}</tr>
        {% for row in report.charts.correlation.values %}
        <tr>
            <th>{{ report.charts.correlation.columns[loop.index0] }}</th>
            {% for value in row %}<td>{{ '%.3f' | format(value) }}</td>{% endfor %}
        </tr>
        {% endfor %}
    </table>
    {% endif %}
</div>
</body>
</html>
"""


def _format_number(value) -> str:
    if value is None:
        return 'N/A'
    return f"{value:.2f}"


class ReportGenerator:
    """Generates reports in multiple formats (JSON, HTML, CSV, XLSX)."""

    def __init__(self, output_dir: str = './reports'):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to save reports
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        self._env = Environment(autoescape=True)
        self._env.globals['fmt'] = _format_number
        logger.info(f"Report generator initialized. Output dir: {output_dir}")

    def generate_report(
        self,
        report: AnalysisReport,
        source_name: str,
        formats: List[str] = None,
        preview: Optional[RowPreview] = None
    ) -> Dict[str, str]:
        """
        Generate reports in specified formats.

        Args:
            report: Analysis result
            source_name: Name of the analyzed file/sheet, used in titles and filenames
            formats: List of formats to generate ['json', 'html', 'csv', 'xlsx']
            preview: Leading rows of the analyzed grid, shown in the HTML report

        Returns:
            Dictionary mapping format to file path
        """
        if formats is None:
            formats = ['json', 'html']

        unknown = [fmt for fmt in formats if fmt not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"Unsupported report formats: {', '.join(unknown)}")

        report_files = {}

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        safe_name = re.sub(r'[^A-Za-z0-9_-]+', '_', source_name).strip('_') or 'sheet'
        filename_prefix = f"analysis_{safe_name}_{timestamp}"

        logger.info(f"Generating reports in formats: {formats}")

        if 'json' in formats:
            report_files['json'] = self._generate_json(report, source_name, filename_prefix)

        if 'html' in formats:
            report_files['html'] = self._generate_html_report(report, source_name, filename_prefix, preview)

        if 'csv' in formats:
            csv_path = os.path.join(self.output_dir, f"{filename_prefix}_columns.csv")
            CSVGenerator.generate_column_stats_csv(report, csv_path)
            report_files['csv'] = csv_path

        if 'xlsx' in formats:
            xlsx_path = os.path.join(self.output_dir, f"{filename_prefix}.xlsx")
            ExcelGenerator().generate_analysis_report(report, xlsx_path, title=f"Sheet Analysis - {source_name}")
            report_files['xlsx'] = xlsx_path

        logger.info(f"Reports generated successfully: {list(report_files.keys())}")
        return report_files

    def _generate_json(self, report: AnalysisReport, source_name: str, filename_prefix: str) -> str:
        """Generate JSON report."""
        filepath = os.path.join(self.output_dir, f"{filename_prefix}.json")
        payload = {'source': source_name, **report.to_dict()}

        with open(filepath, 'w') as f:
            json.dump(payload, f, indent=2, default=str)

        logger.info(f"JSON report generated: {filepath}")
        return filepath

    def _generate_html_report(
        self,
        report: AnalysisReport,
        source_name: str,
        filename_prefix: str,
        preview: Optional[RowPreview] = None
    ) -> str:
        """Generate HTML report file."""
        filepath = os.path.join(self.output_dir, f"{filename_prefix}.html")

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.render_html(report, source_name, preview))

        logger.info(f"HTML report generated: {filepath}")
        return filepath

    def render_html(self, report: AnalysisReport, source_name: str, preview: Optional[RowPreview] = None) -> str:
        """Render the HTML report as a string."""
        template = self._env.from_string(HTML_TEMPLATE)
        return template.render(
            report=report,
            source_name=source_name,
            preview=preview,
            generated_at=datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        )
