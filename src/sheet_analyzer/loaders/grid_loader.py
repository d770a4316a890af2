"""
Grid Loader Module

Reads spreadsheet files into Grids with pandas. File decoding is delegated
entirely to pandas (openpyxl for .xlsx, xlrd for .xls); this module only
validates the file and hands the cell values over untouched.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

import numpy as np
import pandas as pd

from ..grid import Grid
from ..utils.logger import get_logger

logger = get_logger('grid_loader')

EXCEL_EXTENSIONS = ('.xlsx', '.xls')
CSV_EXTENSIONS = ('.csv',)
SUPPORTED_EXTENSIONS = EXCEL_EXTENSIONS + CSV_EXTENSIONS


class LoaderError(Exception):
    """Base class for errors raised while loading a sheet."""


class UnsupportedFileError(LoaderError):
    """File extension is not supported or the file cannot be decoded."""


class FileTooLargeError(LoaderError):
    """File exceeds the configured size limit."""


class EmptySheetError(LoaderError):
    """Selected sheet holds no rows."""


class SheetNotFoundError(LoaderError):
    """Requested sheet does not exist in the workbook."""


def _plain_value(value: Any) -> Any:
    """Convert numpy scalars and pandas timestamps to plain Python values."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
        if isinstance(value, float) and np.isnan(value):
            return None
        return value
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    if value is pd.NaT:
        return None
    return value


class GridLoader:
    """Loads Excel and CSV files into Grids."""

    def __init__(self, max_file_size_mb: float = 10):
        """
        Initialize grid loader.

        Args:
            max_file_size_mb: Files above this size are rejected
        """
        self.max_file_size_mb = max_file_size_mb

    def validate_file(self, path: Union[str, Path]) -> Path:
        """
        Check that a file exists, has a supported extension and fits the size limit.

        Args:
            path: File to check

        Returns:
            Resolved Path

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFileError: If the extension is not supported
            FileTooLargeError: If the file is too large
        """
        file_path = Path(path)

        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileError(
                f"Please provide a valid spreadsheet file ({', '.join(SUPPORTED_EXTENSIONS)}), "
                f"got {file_path.name}"
            )

        size_mb = file_path.stat().st_size / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise FileTooLargeError(
                f"File size {size_mb:.2f} MB exceeds the {self.max_file_size_mb} MB limit"
            )

        return file_path

    def list_sheets(self, path: Union[str, Path]) -> List[str]:
        """
        Sheet names of a workbook. CSV files have a single sheet named after the file.

        Args:
            path: Spreadsheet file

        Returns:
            Sheet names in workbook order
        """
        file_path = self.validate_file(path)

        if file_path.suffix.lower() in CSV_EXTENSIONS:
            return [file_path.stem]

        try:
            with pd.ExcelFile(file_path) as workbook:
                sheet_names = [str(name) for name in workbook.sheet_names]
        except (ValueError, OSError, ImportError) as e:
            raise UnsupportedFileError(f"Could not read workbook {file_path.name}: {e}") from e

        if not sheet_names:
            raise UnsupportedFileError(f"No valid sheets found in {file_path.name}")

        return sheet_names

    def load(self, path: Union[str, Path], sheet: Optional[str] = None) -> Grid:
        """
        Load one sheet into a Grid.

        Args:
            path: Spreadsheet file
            sheet: Sheet name (default: first sheet)

        Returns:
            Grid with the first row as header

        Raises:
            LoaderError: If the file cannot be turned into a Grid
        """
        file_path = self.validate_file(path)
        logger.info(f"Loading {file_path.name}" + (f" (sheet: {sheet})" if sheet else ""))

        if file_path.suffix.lower() in CSV_EXTENSIONS:
            df = self._read_csv(file_path)
        else:
            df = self._read_excel(file_path, sheet)

        rows = [
            [_plain_value(value) for value in record]
            for record in df.itertuples(index=False, name=None)
        ]
        if not rows:
            raise EmptySheetError(f"The selected sheet in {file_path.name} is empty")

        # The header keeps the full sheet width so every used column gets a name
        grid = Grid(rows[0], [self._trim_row(row) for row in rows[1:]])
        logger.info(f"Loaded {grid.row_count:,} rows x {grid.width} columns from {file_path.name}")
        return grid

    @staticmethod
    def _trim_row(row: List[Any]) -> List[Any]:
        """Drop trailing empty cells, as a sheet reader reports short rows."""
        end = len(row)
        while end > 0 and (row[end - 1] is None or row[end - 1] == ''):
            end -= 1
        return row[:end]

    def _read_csv(self, file_path: Path) -> pd.DataFrame:
        try:
            # Keep every value as text; empty strings become missing cells in the Grid
            return pd.read_csv(file_path, header=None, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise EmptySheetError(f"The selected sheet in {file_path.name} is empty") from e
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise UnsupportedFileError(f"Could not parse {file_path.name}: {e}") from e

    def _read_excel(self, file_path: Path, sheet: Optional[str]) -> pd.DataFrame:
        sheet_names = self.list_sheets(file_path)
        sheet_name = sheet if sheet is not None else sheet_names[0]

        if sheet_name not in sheet_names:
            raise SheetNotFoundError(
                f"Sheet {sheet_name!r} not found in {file_path.name}; available: {', '.join(sheet_names)}"
            )

        try:
            return pd.read_excel(file_path, sheet_name=sheet_name, header=None, dtype=object)
        except (ValueError, OSError, ImportError) as e:
            raise UnsupportedFileError(f"Could not read sheet {sheet_name!r} of {file_path.name}: {e}") from e
