"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from sheet_analyzer.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / 'scores.csv'
    path.write_text('name,score,age\nann,1,30\nbob,2,40\nann,1,30\n')
    return path


def test_analyze_writes_reports(runner, csv_file, tmp_path):
    out_dir = tmp_path / 'reports'
    result = runner.invoke(cli, ['analyze', str(csv_file), '-o', str(out_dir), '-f', 'json', '-f', 'csv'])
    assert result.exit_code == 0, result.output
    assert 'Reports generated' in result.output
    assert len(list(out_dir.glob('*.json'))) == 1
    assert len(list(out_dir.glob('*_columns.csv'))) == 1


def test_analyze_bad_file(runner, tmp_path):
    path = tmp_path / 'notes.txt'
    path.write_text('hello')
    result = runner.invoke(cli, ['analyze', str(path), '-o', str(tmp_path)])
    assert result.exit_code == 1
    assert 'Error' in result.output


def test_sheets(runner, csv_file):
    result = runner.invoke(cli, ['sheets', str(csv_file)])
    assert result.exit_code == 0
    assert result.output.strip() == 'scores'


def test_export_csv(runner, csv_file, tmp_path):
    target = tmp_path / 'copy.csv'
    result = runner.invoke(cli, ['export-csv', str(csv_file), '-o', str(target)])
    assert result.exit_code == 0, result.output
    assert Path(target).read_text().splitlines()[0] == 'name,score,age'


def test_analyze_preview(runner, tmp_path):
    path = tmp_path / 'long.csv'
    path.write_text('n\n' + ''.join(f"{i}\n" for i in range(103)))
    out_dir = tmp_path / 'reports'
    result = runner.invoke(cli, ['analyze', str(path), '-o', str(out_dir), '-f', 'html', '--preview'])
    assert result.exit_code == 0, result.output
    assert 'Data Preview' in result.output
    assert '... and 3 more rows' in result.output
    html = next(out_dir.glob('*.html')).read_text(encoding='utf-8')
    assert '... and 3 more rows' in html
