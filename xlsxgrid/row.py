"""Rows of a sheet and the cells they hold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Protocol

CM_TO_PS = 28.3464567


class Cell:
    """A single cell: its column number, value and presentation details."""

    def __init__(self, row: "Row | None" = None, num: int = 0) -> None:
        self.row = row
        self.num = num
        self._value = ""
        self._rich_text: list | None = None
        self.formula = ""
        self.num_fmt = ""
        self.date1904 = False
        self.hidden = False
        self.h_merge = 0
        self.v_merge = 0
        self.cell_type: Any = None
        self.hyperlink: Any = None
        self.data_validation: Any = None
        self._modified = False

    @property
    def value(self) -> str:
        """The cell's text value."""
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = value
        self._modified = True

    @property
    def rich_text(self) -> list | None:
        """The cell's rich text runs, if any."""
        return self._rich_text

    @rich_text.setter
    def rich_text(self, runs: list | None) -> None:
        self._rich_text = runs
        self._modified = True

    def modified(self) -> bool:
        """Whether the cell has been given content since it was created."""
        return self._modified

    def __repr__(self) -> str:
        return f"Cell(num={self.num}, value={self._value!r})"


@dataclass
class RowSheet:
    """The parts of a sheet that its rows read and update."""

    name: str
    max_col: int = 0
    max_row: int = 0
    outline_level_row: int = 0
    current_row: "Row | None" = None


class CellStoreRow(Protocol):
    """The storage behind a row's cells."""

    def add_cell(self) -> Cell: ...

    def push_cell(self, cell: Cell) -> None: ...

    def get_cell(self, col_idx: int) -> Cell: ...

    def cells(self, skip_empty_cells: bool = False) -> Iterator[Cell]: ...

    def max_col(self) -> int: ...

    def cell_count(self) -> int: ...


class Row:
    """A row of a sheet; its cells live in a cell store row."""

    def __init__(self, sheet: RowSheet | None = None, cell_store_row: CellStoreRow | None = None) -> None:
        self.hidden = False
        self.sheet = sheet
        self._height = 0.0
        self._outline_level = 0
        self.is_custom = False
        self.custom_height = False
        self.num = 0
        self.cell_store_row = cell_store_row

    def coordinate(self) -> int:
        """The zero-based row number."""
        return self.num

    def height(self) -> float:
        """The height of the row in PostScript points."""
        return self._height

    def _set_height(self, height: float) -> None:
        self._height = height
        self.custom_height = True

    def set_height(self, height: float) -> None:
        """Set the height of the row in PostScript points."""
        self._set_height(height)
        self.is_custom = True

    def set_height_cm(self, height: float) -> None:
        """Set the height of the row in centimetres."""
        self._set_height(height * CM_TO_PS)
        self.is_custom = True

    def outline_level(self) -> int:
        """The outline level used for collapsing rows."""
        return self._outline_level

    def set_outline_level(self, level: int) -> None:
        """Set the outline level, raising the sheet's level if needed."""
        self._outline_level = level
        if self.sheet is not None and level > self.sheet.outline_level_row:
            self.sheet.outline_level_row = level
        self.is_custom = True

    def add_cell(self) -> Cell:
        """Add a new cell at the end of the row."""
        self.is_custom = True
        cell = self.cell_store_row.add_cell()
        if cell.num > self.sheet.max_col - 1:
            self.sheet.max_col = cell.num + 1
        return cell

    def push_cell(self, cell: Cell) -> None:
        """Place an existing cell in the row at its column."""
        self.is_custom = True
        self.cell_store_row.push_cell(cell)

    def get_cell(self, col_idx: int) -> Cell:
        """Return the cell at a column, creating it if missing."""
        return self.cell_store_row.get_cell(col_idx)

    def key(self) -> str:
        """The store key of the row."""
        return f"{self.sheet.name}:{self.num:06d}"

    def cell_key(self, col_idx: int) -> str:
        """The store key of a cell of this row."""
        return f"{self.sheet.name}:{self.num:06d}:{col_idx:06d}"

    def cells(self, skip_empty_cells: bool = False) -> Iterator[Cell]:
        """Yield the row's cells, optionally skipping empty ones."""
        yield from self.cell_store_row.cells(skip_empty_cells)

    def for_each_cell(self, visitor: Callable[[Cell], Any], skip_empty_cells: bool = False) -> None:
        """Call ``visitor`` on every cell; an exception from it stops the walk."""
        for cell in self.cells(skip_empty_cells):
            visitor(cell)