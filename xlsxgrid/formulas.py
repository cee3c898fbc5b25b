"""Formulas of cells, including the expansion of shared formulas."""

from __future__ import annotations

from dataclasses import dataclass

from .refs import (
    CellReferenceError,
    FIXED_REF_CHAR,
    digits_only,
    get_cell_id_from_coords,
    get_coords_from_cell_id,
    letters_only,
)

_TRIM_CHARS = " \t\n\r"


@dataclass
class FormulaSpec:
    """The ``f`` element of a cell: its text, type, range and shared index."""

    content: str = ""
    t: str = ""
    ref: str = ""
    si: int = 0


@dataclass
class SharedFormula:
    """A shared formula and the coordinates of the cell that defines it."""

    x: int = 0
    y: int = 0
    formula: str = ""


def shift_cell(cell_id: str, dx: int, dy: int) -> str:
    """Shift a cell reference by ``dx`` columns and ``dy`` rows, keeping ``$`` parts fixed."""
    try:
        fx, fy = get_coords_from_cell_id(cell_id)
    except CellReferenceError:
        fx, fy = -1, -1

    fixed_col = cell_id.find(FIXED_REF_CHAR) == 0
    fixed_row = cell_id.rfind(FIXED_REF_CHAR) > 0

    if not fixed_col:
        fx += dx
    if not fixed_row:
        fy += dy

    shifted = get_cell_id_from_coords(fx, fy)
    if not fixed_col and not fixed_row:
        return shifted

    parts = []
    if fixed_col:
        parts.append(FIXED_REF_CHAR)
    parts.append(letters_only(shifted))
    if fixed_row:
        parts.append(FIXED_REF_CHAR)
    parts.append(digits_only(shifted))
    return "".join(parts)


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _shift_formula(original: str, dx: int, dy: int) -> str:
    pieces = []
    length = len(original)
    start = 0
    end = 0
    in_literal = False
    while end < length:
        char = original[end]
        if char == '"':
            in_literal = not in_literal
        if not in_literal and (_is_upper(char) or char == FIXED_REF_CHAR):
            pieces.append(original[start:end])
            start = end
            end += 1
            found_number = False
            while end < length:
                inner = original[end]
                if _is_digit(inner) or inner == FIXED_REF_CHAR:
                    found_number = True
                elif _is_upper(inner):
                    if found_number:
                        break
                else:
                    break
                end += 1
            if found_number:
                pieces.append(shift_cell(original[start:end], dx, dy))
                start = end
        end += 1
    if start < length:
        pieces.append(original[start:])
    return "".join(pieces)


def formula_for_cell(
    cell_ref: str,
    formula: FormulaSpec | None,
    shared_formulas: dict[int, SharedFormula],
) -> str:
    """Return the formula of a cell, expanding shared formulas relative to the cell.

    A shared formula that carries a range is recorded in ``shared_formulas``
    under its shared index; later cells with that index get it shifted.
    """
    if formula is None:
        return ""
    if formula.t != "shared":
        return formula.content.strip(_TRIM_CHARS)

    try:
        x, y = get_coords_from_cell_id(cell_ref)
    except CellReferenceError:
        return formula.content.strip(_TRIM_CHARS)

    if formula.ref:
        shared_formulas[formula.si] = SharedFormula(x, y, formula.content)
        return formula.content.strip(_TRIM_CHARS)

    shared = shared_formulas.get(formula.si, SharedFormula())
    result = _shift_formula(shared.formula, x - shared.x, y - shared.y)
    return result.strip(_TRIM_CHARS)