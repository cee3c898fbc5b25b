import pytest

from xlsxgrid.memory import (
    MemoryCellStore,
    MemoryRow,
    RowNotFoundError,
    row_key_from_cell_key,
)
from xlsxgrid.row import Cell, RowSheet


@pytest.fixture
def sheet():
    return RowSheet(name="Test")


def test_row_not_found():
    with MemoryCellStore() as store:
        with pytest.raises(RowNotFoundError) as info:
            store.read_row("I don't exist")
    assert info.value.key == "I don't exist"


def test_write_and_read_row(sheet):
    store = MemoryCellStore()
    row = store.make_row(sheet)
    cell = row.add_cell()
    cell.value = "value"
    cell.formula = "formula"
    cell.num_fmt = "numFmt"
    cell.hidden = True
    cell.h_merge = 49
    cell.v_merge = 50
    store.write_row(row)

    row2 = store.read_row(row.key())
    assert row2.num == row.num
    assert row2.cell_store_row.cell_count() == 1
    cell2 = row2.get_cell(0)
    assert cell2.value == "value"
    assert cell2.formula == "formula"
    assert cell2.num_fmt == "numFmt"
    assert cell2.hidden is True
    assert (cell2.h_merge, cell2.v_merge) == (49, 50)


def test_make_row_sets_current_row(sheet):
    store = MemoryCellStore()
    row = store.make_row(sheet)
    assert sheet.current_row is row
    assert row.cell_store_row.max_col() == -1


def test_move_row(sheet):
    store = MemoryCellStore()
    row = store.make_row(sheet)
    store.write_row(row)
    store.move_row(row, 3)
    assert store.read_row("Test:000003") is row
    with pytest.raises(RowNotFoundError):
        store.read_row("Test:000000")


def test_move_row_refuses_overwrite(sheet):
    store = MemoryCellStore()
    first = store.make_row(sheet)
    store.write_row(first)
    second = store.make_row(sheet)
    second.num = 1
    store.write_row(second)
    with pytest.raises(ValueError):
        store.move_row(second, 0)


def test_remove_row(sheet):
    store = MemoryCellStore()
    row = store.make_row(sheet)
    store.write_row(row)
    store.remove_row(row.key())
    assert sheet.current_row is None
    with pytest.raises(RowNotFoundError):
        store.read_row(row.key())


def test_make_row_with_len_and_trailing_cells(sheet):
    store = MemoryCellStore()
    row = store.make_row_with_len(sheet, 4)
    assert row.cell_store_row.cell_count() == 4
    cell = Cell(row, 0)
    cell.value = "1"
    row.push_cell(cell)
    assert row.cell_store_row.cell_count() == 4
    assert row.get_cell(0).value == "1"
    assert row.get_cell(1).value == ""
    assert row.get_cell(3).value == ""


def test_get_cell_grows_row(sheet):
    memory_row = MemoryRow(sheet)
    cell = memory_row.get_cell(5)
    assert cell.num == 5
    assert memory_row.max_col() == 5
    assert memory_row.cell_count() == 6
    assert memory_row.get_cell(5) is cell


def test_memory_row_cells_fill_to_sheet_width(sheet):
    sheet.max_col = 3
    memory_row = MemoryRow(sheet)
    memory_row.add_cell().value = "a"
    nums = [c.num for c in memory_row.cells()]
    assert nums == [0, 1, 2]
    assert [c.value for c in memory_row.cells(skip_empty_cells=True)] == ["a"]


def test_row_key_from_cell_key():
    assert row_key_from_cell_key("Sheet1:000001:000002") == "Sheet1:000001"