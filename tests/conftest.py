"""Shared fixtures for sheet analyzer tests."""

import pytest

from sheet_analyzer.grid import Grid


ENV_KEYS = [
    'SHEET_ANALYZER_HISTOGRAM_BINS',
    'SHEET_ANALYZER_HISTOGRAM_STRATEGY',
    'SHEET_ANALYZER_CORRELATION_MAX_COLUMNS',
    'SHEET_ANALYZER_NUMERIC_THRESHOLD',
    'SHEET_ANALYZER_MAX_FILE_SIZE_MB',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep analyzer overrides from the developer's shell out of tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sales_grid():
    """Mixed sheet: numeric, text, a mostly-numeric column and a duplicate row."""
    return Grid.from_rows([
        ['region', 'units', 'price', 'code', ''],
        ['North', 10, '2.5', '1', 'x'],
        ['South', 20, '5.0', '2', None],
        ['North', 30, '7.5', 'abc', 'y'],
        ['East', 40, '10', '4', None],
        ['North', 10, '2.5', '1', 'x'],
        ['West', '', 'n/a', '5'],
    ])


@pytest.fixture
def empty_grid():
    return Grid.from_rows([])


@pytest.fixture
def header_only_grid():
    return Grid.from_rows([['a', 'b', 'c']])
