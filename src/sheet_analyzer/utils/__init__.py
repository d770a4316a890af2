"""Utility modules for the sheet analyzer."""

from .config_loader import ConfigLoader
from .logger import setup_logging, get_logger

__all__ = ['ConfigLoader', 'setup_logging', 'get_logger']
