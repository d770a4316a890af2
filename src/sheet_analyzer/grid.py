"""
Grid Model Module

Immutable representation of a parsed sheet: a header row plus data rows of
tagged cell values. All coercion rules (missing detection, numeric parsing,
stringification) live here as explicit conversion functions.
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple


class CellKind(Enum):
    """Tag for the kinds of value a cell can hold."""
    NUMBER = "NUMBER"
    TEXT = "TEXT"
    MISSING = "MISSING"


def parse_number(text: str) -> Optional[float]:
    """
    Parse text as a finite float.

    Args:
        text: Raw text to parse

    Returns:
        Parsed value, or None if the text is not a finite number
    """
    # float() accepts digit grouping ("1_000"), spreadsheets do not
    if '_' in text:
        return None

    try:
        value = float(text)
    except (ValueError, TypeError):
        return None

    if not math.isfinite(value):
        return None

    return value


def format_number(value: float) -> str:
    """Stringify a number so that 5 and 5.0 both read as "5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Cell:
    """A single tagged cell value."""
    kind: CellKind
    value: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> 'Cell':
        """
        Convert a raw parser value into a tagged cell.

        None, the empty string and NaN are missing. Booleans become text
        ("true"/"false"), ints and floats become numbers, everything else is
        stringified.

        Args:
            raw: Value as produced by the external parser

        Returns:
            Cell instance
        """
        if isinstance(raw, Cell):
            return raw

        if raw is None or (isinstance(raw, str) and raw == ''):
            return MISSING

        if isinstance(raw, bool):
            return cls(CellKind.TEXT, 'true' if raw else 'false')

        if isinstance(raw, numbers.Real):
            if math.isnan(raw):
                return MISSING
            return cls(CellKind.NUMBER, raw)

        return cls(CellKind.TEXT, str(raw))

    @property
    def is_missing(self) -> bool:
        return self.kind is CellKind.MISSING

    def as_number(self) -> Optional[float]:
        """Numeric value of the cell, or None if it does not parse."""
        if self.kind is CellKind.NUMBER:
            value = float(self.value)
            # inf from a numeric cell is excluded like an unparsable string
            return value if math.isfinite(value) else None
        if self.kind is CellKind.TEXT:
            return parse_number(self.value)
        return None

    def as_text(self) -> str:
        """String form used for frequency tables and row keys."""
        if self.kind is CellKind.NUMBER:
            return format_number(self.value)
        if self.kind is CellKind.TEXT:
            return self.value
        return ''


MISSING = Cell(CellKind.MISSING)


@dataclass(frozen=True)
class Column:
    """One vertical slice of a grid."""
    index: int
    name: str
    cells: Tuple[Cell, ...]

    def non_missing(self) -> List[Cell]:
        return [cell for cell in self.cells if not cell.is_missing]

    def numbers(self) -> List[float]:
        """Values that parse as numbers, in row order."""
        values = []
        for cell in self.cells:
            number = cell.as_number()
            if number is not None:
                values.append(number)
        return values


def column_name(raw_name: Any, index: int) -> str:
    """Header name for a column, synthesized as "Column N" when empty."""
    cell = Cell.from_raw(raw_name)
    if cell.is_missing:
        return f"Column {index + 1}"
    return cell.as_text()


PREVIEW_ROWS = 100


@dataclass(frozen=True)
class RowPreview:
    """Leading rows of a grid as display text."""
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    remaining: int

    @property
    def note(self) -> Optional[str]:
        if self.remaining <= 0:
            return None
        return f"... and {self.remaining} more rows"


class Grid:
    """Header row plus data rows of tagged cells. Never mutated after construction."""

    def __init__(self, header: Sequence[Any], rows: Sequence[Sequence[Any]]):
        self._header = tuple(header)
        self._rows = tuple(
            tuple(Cell.from_raw(value) for value in row)
            for row in rows
        )

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Any]]) -> 'Grid':
        """
        Build a grid from a list of rows where row 0 is the header.

        Args:
            data: Rows as produced by a parser (header first)

        Returns:
            Grid instance (empty if data is empty)
        """
        if not data:
            return cls([], [])
        return cls(data[0], data[1:])

    @property
    def header(self) -> Tuple[Any, ...]:
        return self._header

    @property
    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self._rows

    @property
    def width(self) -> int:
        return len(self._header)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def cell(self, row_index: int, col_index: int) -> Cell:
        """Cell at a position, MISSING past the end of a short row."""
        row = self._rows[row_index]
        if col_index < len(row):
            return row[col_index]
        return MISSING

    def column(self, index: int) -> Column:
        cells = tuple(self.cell(r, index) for r in range(len(self._rows)))
        return Column(index=index, name=column_name(self._header[index], index), cells=cells)

    def columns(self) -> List[Column]:
        return [self.column(i) for i in range(self.width)]

    def padded_row(self, row_index: int) -> Tuple[Cell, ...]:
        """Row extended with MISSING cells up to the header width."""
        row = self._rows[row_index]
        if len(row) >= self.width:
            return row
        return row + (MISSING,) * (self.width - len(row))

    def preview(self, limit: int = PREVIEW_ROWS) -> RowPreview:
        """
        First ``limit`` data rows as text, padded to the header width.

        Args:
            limit: Maximum number of data rows to include

        Returns:
            RowPreview with the count of rows left out
        """
        if limit < 0:
            raise ValueError(f"Preview limit must not be negative, got {limit}")

        shown = min(limit, self.row_count)
        rows = tuple(
            tuple(cell.as_text() for cell in self.padded_row(r)[:self.width])
            for r in range(shown)
        )
        header = tuple(column_name(name, i) for i, name in enumerate(self._header))
        return RowPreview(header=header, rows=rows, remaining=self.row_count - shown)

    def to_rows(self) -> List[List[Any]]:
        """Header plus data rows as plain values (None for missing cells)."""
        data = [list(self._header)]
        for row in self._rows:
            data.append([None if cell.is_missing else cell.value for cell in row])
        return data

    def __repr__(self):
        return f"Grid(columns={self.width}, rows={self.row_count})"
