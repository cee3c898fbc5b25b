"""Conversions between spreadsheet cell references and zero-based coordinates."""

from __future__ import annotations

from typing import Iterable

FIXED_REF_CHAR = "$"
RANGE_CHAR = ":"


class CellReferenceError(ValueError):
    """Raised when a cell reference, range or dimension cannot be parsed."""


def col_letters_to_index(letters: str) -> int:
    """Convert column letters such as ``"AA"`` to a zero-based column index."""
    total = 0
    multiplier = 1
    for position, char in enumerate(reversed(letters)):
        value = 0 if position == 0 else 1
        if "A" <= char <= "Z":
            value += ord(char) - ord("A")
        elif "a" <= char <= "z":
            value += ord(char) - ord("a")
        total += value * multiplier
        multiplier *= 26
    return total


def col_index_to_letters(n: int) -> str:
    """Convert a zero-based column index to its column letters."""
    letters = []
    n += 1
    while n > 0:
        n -= 1
        letters.append(chr(ord("A") + n % 26))
        n //= 26
    return "".join(reversed(letters))


def row_index_to_string(row: int) -> str:
    """Convert a zero-based row index to its one-based string form."""
    return str(row + 1)


def letters_only(text: str) -> str:
    """Keep only the ASCII letters of ``text``, upper-cased."""
    return "".join(
        char if "A" <= char <= "Z" else char.upper()
        for char in text
        if "A" <= char <= "Z" or "a" <= char <= "z"
    )


def digits_only(text: str) -> str:
    """Keep only the ASCII digits of ``text``."""
    return "".join(char for char in text if "0" <= char <= "9")


def get_coords_from_cell_id(cell_id: str) -> tuple[int, int]:
    """Return the zero-based ``(x, y)`` of a reference such as ``"B3"``."""
    digits = digits_only(cell_id)
    try:
        row = int(digits)
    except ValueError as exc:
        raise CellReferenceError(
            f"GetCoordsFromCellIdString({cell_id!r}): invalid row number {digits!r}"
        ) from exc
    return col_letters_to_index(letters_only(cell_id)), row - 1


def get_cell_id_from_coords(x: int, y: int) -> str:
    """Return the reference naming the zero-based coordinates ``(x, y)``."""
    return get_cell_id_from_coords_with_fixed(x, y, False, False)


def get_cell_id_from_coords_with_fixed(x: int, y: int, x_fixed: bool, y_fixed: bool) -> str:
    """Return the reference for ``(x, y)``, marking either part as absolute."""
    column = col_index_to_letters(x)
    row = row_index_to_string(y)
    if x_fixed:
        column = FIXED_REF_CHAR + column
    if y_fixed:
        row = FIXED_REF_CHAR + row
    return column + row


def get_range_from_string(range_string: str) -> tuple[int, int]:
    """Split a span such as ``"1:3"`` into its lower and upper bounds."""
    parts = range_string.split(RANGE_CHAR, 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise CellReferenceError(f"Invalid range {range_string!r}")
    try:
        lower = int(parts[0])
    except ValueError as exc:
        raise CellReferenceError(
            f"Invalid range (not integer in lower bound) {range_string}"
        ) from exc
    try:
        upper = int(parts[1])
    except ValueError as exc:
        raise CellReferenceError(
            f"Invalid range (not integer in upper bound) {range_string}"
        ) from exc
    return lower, upper


def get_max_min_from_dimension_ref(ref: str) -> tuple[int, int, int, int]:
    """Return ``(minx, miny, maxx, maxy)`` from a dimension such as ``"A1:B2"``."""
    parts = ref.split(RANGE_CHAR)
    if len(parts) < 2:
        raise CellReferenceError(f"getMaxMinFromDimensionRef: invalid dimension {ref!r}")
    try:
        minx, miny = get_coords_from_cell_id(parts[0])
        maxx, maxy = get_coords_from_cell_id(parts[1])
    except CellReferenceError as exc:
        raise CellReferenceError(f"getMaxMinFromDimensionRef: {exc}") from exc
    return minx, miny, maxx, maxy


def calculate_max_min(cell_refs: Iterable[str]) -> tuple[int, int, int, int]:
    """Work out ``(minx, miny, maxx, maxy)`` from the references of all cells."""
    minx = miny = None
    maxx = maxy = 0
    for ref in cell_refs:
        try:
            x, y = get_coords_from_cell_id(ref)
        except CellReferenceError as exc:
            raise CellReferenceError(f"calculateMaxMinFromWorksheet: {exc}") from exc
        minx = x if minx is None else min(minx, x)
        miny = y if miny is None else min(miny, y)
        maxx = max(maxx, x)
        maxy = max(maxy, y)
    return (minx or 0), (miny or 0), maxx, maxy