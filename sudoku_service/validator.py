"""Row, column and box constraint checks."""

from __future__ import annotations

from typing import Iterable

from .grid import EMPTY, SIZE, Board, iter_units


def is_unit_valid(cells: Iterable[int]) -> bool:
    """Return True when the unit holds each of 1-9 at most once and nothing else.

    Empty cells (0) fail the check, so the result is only True for a fully
    populated unit.
    """
    seen: set[int] = set()
    for value in cells:
        if value < 1 or value > SIZE or value in seen:
            return False
        seen.add(value)
    return True


def is_sudoku_solved(board: Board) -> bool:
    """Return True iff all 27 units of a complete board are valid.

    Completeness is not tested separately: an empty cell makes its row fail
    ``is_unit_valid``.
    """
    return all(is_unit_valid(unit) for unit in iter_units(board))


def is_consistent(board: Board) -> bool:
    """Check a partially filled board: values in range and no repeated digit per unit."""
    for row in board:
        for value in row:
            if value < EMPTY or value > SIZE:
                return False
    for unit in iter_units(board):
        placed = [value for value in unit if value != EMPTY]
        if len(placed) != len(set(placed)):
            return False
    return True
