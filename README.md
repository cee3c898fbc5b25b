# xlsxgrid

Pure-Python building blocks for working with the parts of an XLSX
spreadsheet. It uses only the standard library.

## What is inside

- `xlsxgrid.refs` converts between cell names and zero-based coordinates,
  for example `"C3"` and `(2, 2)`. It also converts column letters, splits
  spans such as `"1:3"` (`get_range_from_string`), and reads dimension
  references such as `"A1:B2"` (`get_max_min_from_dimension_ref`). When a
  sheet has no dimension, `calculate_max_min` works out the bounds from the
  cell references. Bad input raises `CellReferenceError`, which is a
  `ValueError`.
- `xlsxgrid.formulas` returns the formula of a cell (`formula_for_cell`).
  It expands shared formulas for the cell they are used in. Relative
  references are shifted, while `$` parts and text inside string literals
  are left alone. `shift_cell` moves a single reference.
- `xlsxgrid.richtext` holds rich text runs (`RichTextRun`, `RichTextFont`,
  `RichTextColor`) and the enums for font family, charset, vertical
  alignment and underline. It converts runs to and from their XML form
  (`XmlRun`, `RunProperties`) and to and from `ElementTree` elements.
- `xlsxgrid.reftable` handles shared strings. `parse_sst` reads
  `sharedStrings.xml` and `sst_to_xml` writes it. `RefTable` stores strings
  by index. It removes duplicate plain and rich strings only when created
  with `is_write=True`.
- `xlsxgrid.rels` builds workbook relationships from worksheet entries
  (`make_workbook_rels`). The shared strings, theme and styles entries
  follow the worksheets. It writes relationships (`workbook_rels_to_xml`)
  and maps relationship ids to worksheet names (`parse_workbook_rels`).
  `truncate_sheet_xml` keeps only the first rows of a worksheet's XML.
- `xlsxgrid.row` provides `Row`, `Cell` and `RowSheet`. `RowSheet` holds
  the sheet details a row reads and updates: its name, its width and its
  outline level.
- `xlsxgrid.memory` provides `MemoryCellStore`, which keeps rows in memory
  under keys such as `"Sheet1:000000"`. Reading a missing row raises
  `RowNotFoundError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Cell references:

```python
from xlsxgrid.refs import get_coords_from_cell_id, get_cell_id_from_coords, col_index_to_letters

get_coords_from_cell_id("B3")      # (1, 2)
get_cell_id_from_coords(2, 2)      # "C3"
col_index_to_letters(1022)         # "AMI"
```

Shared formulas:

```python
from xlsxgrid.formulas import FormulaSpec, formula_for_cell, shift_cell

shared = {}
formula_for_cell("A2", FormulaSpec(content="2*A1", t="shared", ref="A2:C2", si=0), shared)  # "2*A1"
formula_for_cell("B2", FormulaSpec(t="shared", si=0), shared)                             # "2*B1"

shift_cell("A1", 1, 1)             # "B2"
shift_cell("$A1", 1, 1)            # "$A2"
```

Shared strings:

```python
from xlsxgrid.reftable import RefTable, sst_to_xml

table = RefTable(is_write=True)
table.add_string("Foo")            # 0
table.add_string("Foo")            # 0 again
table.resolve(0)                   # ("Foo", None)
xml_text = sst_to_xml(table.to_sst())
```

Rich text:

```python
from xlsxgrid.richtext import RichTextRun, new_rich_text_color_from_argb, rich_text_to_plain_text

new_rich_text_color_from_argb(127, 128, 129, 130).core_color.rgb   # "7F808182"
rich_text_to_plain_text([RichTextRun(text="Bold"), RichTextRun(text="Italic")])  # "BoldItalic"
```

Rows in memory:

```python
from xlsxgrid.memory import MemoryCellStore
from xlsxgrid.row import RowSheet

sheet = RowSheet(name="Sheet1")
with MemoryCellStore() as store:
    row = store.make_row(sheet)
    row.add_cell().value = "foo"   # sheet.max_col is now 1
    store.write_row(row)
    store.read_row("Sheet1:000000").get_cell(0).value   # "foo"
```

## What it does not do

xlsxgrid works on the separate pieces of a workbook, and several things
are left to the caller:

- It does not open or save `.xlsx` archives.
- It has no workbook or sheet object beyond `RowSheet`.
- It does not read styles, themes, column definitions, hyperlinks or
  merged cells.
- It has no command-line tool.