"""Tests for YAML/env configuration loading."""

import pytest

from sheet_analyzer.utils.config_loader import ConfigLoader


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(
        'analysis:\n'
        '  histogram:\n'
        '    bins: 15\n'
        'reporting:\n'
        '  formats: [csv]\n'
    )
    return path


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / '.env'
    path.write_text('')
    return path


def test_yaml_values_merge_with_defaults(config_file, env_file):
    loader = ConfigLoader(config_path=str(config_file), env_path=str(env_file))
    assert loader.get('analysis.histogram.bins') == 15
    assert loader.get('analysis.histogram.strategy') == 'fixed'
    assert loader.get('analysis.correlation.max_columns') == 5
    assert loader.get('reporting.formats') == ['csv']


def test_env_overrides(config_file, env_file, monkeypatch):
    monkeypatch.setenv('SHEET_ANALYZER_HISTOGRAM_BINS', '12')
    monkeypatch.setenv('SHEET_ANALYZER_HISTOGRAM_STRATEGY', 'SQRT')
    monkeypatch.setenv('SHEET_ANALYZER_MAX_FILE_SIZE_MB', '2.5')
    loader = ConfigLoader(config_path=str(config_file), env_path=str(env_file))
    assert loader.get('analysis.histogram.bins') == 12
    assert loader.get('analysis.histogram.strategy') == 'sqrt'
    assert loader.get('loader.max_file_size_mb') == 2.5


def test_dotenv_file_is_loaded(config_file, tmp_path, monkeypatch):
    env_path = tmp_path / 'custom.env'
    env_path.write_text('SHEET_ANALYZER_CORRELATION_MAX_COLUMNS=3\n')
    # Register the key with monkeypatch so the value load_dotenv sets is undone
    monkeypatch.setenv('SHEET_ANALYZER_CORRELATION_MAX_COLUMNS', '0')
    monkeypatch.delenv('SHEET_ANALYZER_CORRELATION_MAX_COLUMNS')

    loader = ConfigLoader(config_path=str(config_file), env_path=str(env_path))
    assert loader.get('analysis.correlation.max_columns') == 3


def test_get_default(config_file, env_file):
    loader = ConfigLoader(config_path=str(config_file), env_path=str(env_file))
    assert loader.get('analysis.unknown.key', 'fallback') == 'fallback'


def test_missing_explicit_config(tmp_path, env_file):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(config_path=str(tmp_path / 'nope.yaml'), env_path=str(env_file))
