import pytest

from xlsxgrid.memory import MemoryCellStore
from xlsxgrid.row import CM_TO_PS, Cell, RowSheet


@pytest.fixture
def sheet():
    return RowSheet(name="MySheet")


@pytest.fixture
def store():
    return MemoryCellStore()


def test_add_cell(sheet, store):
    row = store.make_row(sheet)
    cell = row.add_cell()
    assert cell.num == 0
    assert row.sheet.max_col == 1
    assert row.cell_store_row.cell_count() == 1
    assert row.is_custom is True


def test_get_cell(sheet, store):
    row = store.make_row(sheet)
    cell = row.add_cell()
    cell.value = "foo"
    cell1 = row.add_cell()
    cell1.value = "bar"
    assert row.get_cell(0).value == "foo"
    assert row.get_cell(1).value == "bar"
    assert sheet.max_col == 2


def _build_empty_cells_row(sheet, store):
    sheet.max_col = 4
    row = store.make_row_with_len(sheet, 4)
    for col, text in ((1, "B1"), (2, "C1"), (3, "D1")):
        cell = Cell(row, col)
        cell.value = text
        row.push_cell(cell)
    return row


def test_for_each_cell_no_options(sheet, store):
    row = _build_empty_cells_row(sheet, store)
    values = []
    row.for_each_cell(lambda c: values.append(c.value))
    assert values == ["", "B1", "C1", "D1"]


def test_for_each_cell_skip_empty(sheet, store):
    row = _build_empty_cells_row(sheet, store)
    values = []
    row.for_each_cell(lambda c: values.append(c.value), skip_empty_cells=True)
    assert values == ["B1", "C1", "D1"]


def test_for_each_cell_stops_on_error(sheet, store):
    row = _build_empty_cells_row(sheet, store)
    seen = []

    def visitor(cell):
        seen.append(cell.num)
        if cell.num == 1:
            raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        row.for_each_cell(visitor)
    assert seen == [0, 1]


def test_set_height(sheet, store):
    row = store.make_row(sheet)
    assert row.height() == 0.0
    assert row.custom_height is False
    assert row.is_custom is False

    row.set_height(30.0)
    assert row.height() == 30.0
    assert row.custom_height is True
    assert row.is_custom is True

    row.set_height_cm(30.0)
    assert row.height() == 30.0 * CM_TO_PS
    assert row.custom_height is True


def test_outline_level_raises_sheet_level(sheet, store):
    row = store.make_row(sheet)
    row.set_outline_level(3)
    assert row.outline_level() == 3
    assert sheet.outline_level_row == 3
    row.set_outline_level(1)
    assert sheet.outline_level_row == 3


def test_keys(sheet, store):
    row = store.make_row(sheet)
    row.num = 12
    assert row.coordinate() == 12
    assert row.key() == "MySheet:000012"
    assert row.cell_key(5) == "MySheet:000012:000005"


def test_cell_modified_tracks_value():
    cell = Cell(None, 0)
    assert cell.modified() is False
    cell.value = "x"
    assert cell.modified() is True