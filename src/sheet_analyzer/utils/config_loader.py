"""Configuration loader for YAML and environment variables."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv


DEFAULT_CONFIG: Dict[str, Any] = {
    'analysis': {
        'numeric_threshold': 0.8,
        'most_common_limit': 5,
        'histogram': {
            'bins': 10,
            'strategy': 'fixed',
            'max_columns': 4,
        },
        'top_values': {
            'limit': 10,
            'max_columns': 2,
        },
        'correlation': {
            'max_columns': 5,
        },
    },
    'loader': {
        'max_file_size_mb': 10,
    },
    'reporting': {
        'output_dir': './reports',
        'formats': ['json', 'html'],
        'preview_rows': 100,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads and manages configuration from YAML and environment variables."""

    def __init__(self, config_path: Optional[str] = None, env_path: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML config file (default: config/config.yaml)
            env_path: Path to .env file (default: .env in project root)
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        if config_path is None:
            config_path = self._find_config_file()
        elif not Path(config_path).exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        user_config = self._load_yaml(config_path) if config_path else {}
        self.config = _deep_merge(DEFAULT_CONFIG, user_config)
        self._merge_env_overrides()

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in project structure, None if there is none."""
        possible_paths = [
            Path(__file__).parent.parent.parent.parent / 'config' / 'config.yaml',
            Path('config/config.yaml'),
        ]

        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}

    def _merge_env_overrides(self):
        """Override config values with environment variables if present."""
        analysis = self.config.setdefault('analysis', {})

        if os.getenv('SHEET_ANALYZER_HISTOGRAM_BINS'):
            analysis.setdefault('histogram', {})['bins'] = int(os.getenv('SHEET_ANALYZER_HISTOGRAM_BINS'))

        if os.getenv('SHEET_ANALYZER_HISTOGRAM_STRATEGY'):
            analysis.setdefault('histogram', {})['strategy'] = os.getenv('SHEET_ANALYZER_HISTOGRAM_STRATEGY').lower()

        if os.getenv('SHEET_ANALYZER_CORRELATION_MAX_COLUMNS'):
            analysis.setdefault('correlation', {})['max_columns'] = int(os.getenv('SHEET_ANALYZER_CORRELATION_MAX_COLUMNS'))

        if os.getenv('SHEET_ANALYZER_NUMERIC_THRESHOLD'):
            analysis['numeric_threshold'] = float(os.getenv('SHEET_ANALYZER_NUMERIC_THRESHOLD'))

        if os.getenv('SHEET_ANALYZER_MAX_FILE_SIZE_MB'):
            self.config.setdefault('loader', {})['max_file_size_mb'] = float(os.getenv('SHEET_ANALYZER_MAX_FILE_SIZE_MB'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Example: config.get('analysis.histogram.bins')
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value

    def get_analysis_config(self) -> Dict[str, Any]:
        """Get the analysis section."""
        return self.config.get('analysis', {})

    def get_all(self) -> Dict[str, Any]:
        """Get entire configuration dictionary."""
        return self.config
