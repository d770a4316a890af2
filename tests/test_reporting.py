"""Tests for report generation and CSV export."""

import csv
import json
from pathlib import Path

import pytest
from openpyxl import load_workbook

from sheet_analyzer.grid import Grid
from sheet_analyzer.profiling import analyze
from sheet_analyzer.reporting import CSVGenerator, ReportGenerator


@pytest.fixture
def report(sales_grid):
    return analyze(sales_grid)


def test_json_report(tmp_path, report):
    files = ReportGenerator(str(tmp_path)).generate_report(report, 'sales', formats=['json'])
    payload = json.loads(Path(files['json']).read_text())
    assert payload['source'] == 'sales'
    assert payload['duplicate_rows'] == [4]
    assert [c['name'] for c in payload['columns']][:2] == ['region', 'units']


def test_html_report_escapes_values(tmp_path):
    grid = Grid.from_rows([['<b>name</b>'], ['<script>x</script>'], ['y']])
    generator = ReportGenerator(str(tmp_path))
    html = generator.render_html(analyze(grid), 'odd sheet')
    assert '&lt;script&gt;' in html
    assert '<script>x' not in html


def test_html_report_sections(tmp_path, report):
    files = ReportGenerator(str(tmp_path)).generate_report(report, 'sales', formats=['html'])
    html = Path(files['html']).read_text(encoding='utf-8')
    assert 'Distribution: units' in html
    assert 'Top Values: region' in html
    assert 'Correlation Matrix' in html


def test_csv_column_stats(tmp_path, report):
    files = ReportGenerator(str(tmp_path)).generate_report(report, 'sales', formats=['csv'])
    with open(files['csv'], newline='') as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    units = next(r for r in rows if r['column'] == 'units')
    assert units['type'] == 'Numeric'
    assert units['mean'] == '22.0'
    region = next(r for r in rows if r['column'] == 'region')
    assert region['most_common'].startswith('North: 3')


def test_xlsx_report(tmp_path, report):
    files = ReportGenerator(str(tmp_path)).generate_report(report, 'sales', formats=['xlsx'])
    wb = load_workbook(files['xlsx'])
    assert wb.sheetnames == ['Summary', 'Columns', 'Histograms', 'Correlation']
    assert wb['Columns']['A2'].value == 'region'


def test_unsupported_format(tmp_path, report):
    with pytest.raises(ValueError):
        ReportGenerator(str(tmp_path)).generate_report(report, 'sales', formats=['pdf'])


def test_filename_is_sanitized(tmp_path, report):
    files = ReportGenerator(str(tmp_path)).generate_report(report, 'my sheet/2024', formats=['json'])
    assert Path(files['json']).name.startswith('analysis_my_sheet_2024_')


class TestGridExport:

    def test_quoting(self):
        grid = Grid.from_rows([['a', 'b'], ['x,y', 'say "hi"'], [1, None]])
        assert CSVGenerator.grid_to_csv(grid) == 'a,b\n"x,y","say ""hi"""\n1,\n'

    def test_line_breaks_stay_inside_cells(self, tmp_path):
        grid = Grid.from_rows([['a', 'b'], ['x\ry', 'z'], ['two\nlines', 'w'], ['p', 'q']])
        path = CSVGenerator.export_grid(grid, tmp_path / 'breaks.csv')

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        assert rows == [['a', 'b'], ['x\ry', 'z'], ['two\nlines', 'w'], ['p', 'q']]

    def test_export_reads_back_as_grid(self, sales_grid, tmp_path):
        path = CSVGenerator.export_grid(sales_grid, tmp_path / 'sales.csv')

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        expected = [
            ['' if value is None else str(value) for value in row]
            for row in sales_grid.to_rows()
        ]
        assert rows == expected

    def test_export_file(self, tmp_path):
        grid = Grid.from_rows([['a'], [1], [2]])
        path = CSVGenerator.export_grid(grid, tmp_path / 'out' / 'sheet.csv')
        assert path.read_text(encoding='utf-8') == 'a\n1\n2\n'


class TestHtmlPreview:

    def test_preview_table_with_remaining_note(self, tmp_path):
        grid = Grid.from_rows([['n', 'label']] + [[i, f"row{i}"] for i in range(105)])
        files = ReportGenerator(str(tmp_path)).generate_report(
            analyze(grid), 'long', formats=['html'], preview=grid.preview()
        )
        html = Path(files['html']).read_text(encoding='utf-8')
        assert 'Data Preview' in html
        assert '<td>row99</td>' in html
        assert '<td>row100</td>' not in html
        assert '... and 5 more rows' in html

    def test_preview_is_escaped(self, tmp_path):
        grid = Grid.from_rows([['a'], ['<i>x</i>']])
        html = ReportGenerator(str(tmp_path)).render_html(analyze(grid), 'sheet', grid.preview())
        assert '<td>&lt;i&gt;x&lt;/i&gt;</td>' in html

    def test_no_preview_section_without_rows(self, tmp_path, report):
        html = ReportGenerator(str(tmp_path)).render_html(report, 'sales')
        assert 'Data Preview' not in html
