"""A cell store that keeps all rows and cells in memory."""

from __future__ import annotations

from typing import Iterator

from .row import Cell, Row, RowSheet


class RowNotFoundError(LookupError):
    """Raised when a store has no row under a key."""

    def __init__(self, key: str, reason: str = "No such row") -> None:
        super().__init__(f"{reason}: {key}")
        self.key = key
        self.reason = reason


class MemoryRow:
    """The cells of one row, held in a list indexed by column."""

    def __init__(self, sheet: RowSheet) -> None:
        self.row = Row(sheet, self)
        self._max_col = -1
        self._cells: list[Cell | None] = []
        sheet.current_row = self.row

    def add_cell(self) -> Cell:
        """Add a cell after the rightmost column."""
        cell = Cell(self.row, self._max_col + 1)
        self.push_cell(cell)
        return cell

    def push_cell(self, cell: Cell) -> None:
        """Store a cell at its column; the list is resized to end at it."""
        self._resize(cell.num + 1)
        self._cells[cell.num] = cell

    def _resize(self, new_size: int) -> None:
        if new_size > self._max_col + 1:
            self._max_col = new_size - 1
        kept = self._cells[:new_size]
        self._cells = kept + [None] * (new_size - len(kept))

    def get_cell(self, col_idx: int) -> Cell:
        """Return the cell at a column, creating it if missing."""
        if col_idx >= len(self._cells):
            cell = Cell(self.row, col_idx)
            self._resize(col_idx + 1)
            self._cells[col_idx] = cell
            return cell
        cell = self._cells[col_idx]
        if cell is None:
            cell = Cell(self.row, col_idx)
            self._cells[col_idx] = cell
        return cell

    def cells(self, skip_empty_cells: bool = False) -> Iterator[Cell]:
        """Yield the cells, filling gaps up to the sheet's width unless skipping."""
        for col_idx, cell in enumerate(list(self._cells)):
            if cell is None:
                if skip_empty_cells:
                    continue
                cell = self.get_cell(col_idx)
            if skip_empty_cells and not cell.modified():
                continue
            cell.row = self.row
            yield cell
        if not skip_empty_cells:
            for col_idx in range(len(self._cells), self.row.sheet.max_col):
                yield self.get_cell(col_idx)

    def max_col(self) -> int:
        """The index of the rightmost column of the row."""
        return self._max_col

    def cell_count(self) -> int:
        """The number of cells in the row."""
        return self._max_col + 1


class MemoryCellStore:
    """Rows kept in a dictionary by key."""

    def __init__(self) -> None:
        self._rows: dict[str, Row] = {}

    def read_row(self, key: str) -> Row:
        """Return the row stored under ``key``."""
        try:
            return self._rows[key]
        except KeyError:
            raise RowNotFoundError(key, "No such row") from None

    def write_row(self, row: Row | None) -> None:
        """Store a row under its key."""
        if row is not None:
            self._rows[row.key()] = row

    def move_row(self, row: Row, index: int) -> None:
        """Move a stored row to a new position; refuses to overwrite."""
        old_key = row.key()
        row.num = index
        new_key = row.key()
        if new_key in self._rows:
            raise ValueError(
                f"Target index for row ({index}) would overwrite a row already exists"
            )
        self._rows[new_key] = row
        del self._rows[old_key]

    def remove_row(self, key: str) -> None:
        """Remove a row; following rows are not moved."""
        row = self._rows.pop(key, None)
        if row is not None:
            row.sheet.current_row = None

    def make_row(self, sheet: RowSheet) -> Row:
        """Return a new empty row of ``sheet``."""
        return MemoryRow(sheet).row

    def make_row_with_len(self, sheet: RowSheet, length: int) -> Row:
        """Return a new row of ``sheet`` with ``length`` empty columns."""
        memory_row = MemoryRow(sheet)
        memory_row._max_col = length - 1
        memory_row._resize(length)
        return memory_row.row

    def close(self) -> None:
        """Release the store, dropping the references to its rows."""
        self._rows.clear()

    def __enter__(self) -> "MemoryCellStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def row_key_from_cell_key(key: str) -> str:
    """Return the row part of a cell key."""
    parts = key.split(":")
    return parts[0] + ":" + parts[1]