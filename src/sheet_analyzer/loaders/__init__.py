"""Loaders that turn spreadsheet files into Grids."""

from .grid_loader import (
    GridLoader,
    LoaderError,
    UnsupportedFileError,
    FileTooLargeError,
    EmptySheetError,
    SheetNotFoundError
)

__all__ = [
    'GridLoader',
    'LoaderError',
    'UnsupportedFileError',
    'FileTooLargeError',
    'EmptySheetError',
    'SheetNotFoundError'
]
