"""Grid helpers shared by the validator, the solver and the request boundary."""

from __future__ import annotations

from itertools import chain
from typing import Iterator, List, Optional, Sequence, Tuple

Board = List[List[int]]

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = frozenset("0123456789")
PLACEHOLDERS = frozenset("._-")
BAND_RULE = "------+-------+------"


class GridShapeError(ValueError):
    """Raised when input does not describe a 9x9 grid."""


def check_shape(rows: Sequence[Sequence[object]]) -> None:
    """Reject anything that is not exactly 9 rows of 9 cells."""
    if len(rows) != SIZE:
        raise GridShapeError("The grid must have exactly 9 rows")
    for row in rows:
        if len(row) != SIZE:
            raise GridShapeError("Each row of the grid must have exactly 9 columns")


def copy_grid(board: Board) -> Board:
    return [list(row) for row in board]


def find_empty(board: Board) -> Optional[Tuple[int, int]]:
    """First empty cell in row-major order, or None when the board is full."""
    for index in range(SIZE * SIZE):
        row, col = divmod(index, SIZE)
        if board[row][col] == EMPTY:
            return row, col
    return None


def box_origin(row: int, col: int) -> Tuple[int, int]:
    return (row // BOX) * BOX, (col // BOX) * BOX


def row_cells(board: Board, row: int) -> List[int]:
    return list(board[row])


def column_cells(board: Board, col: int) -> List[int]:
    return [board[r][col] for r in range(SIZE)]


def box_cells(board: Board, row: int, col: int) -> List[int]:
    start_row, start_col = box_origin(row, col)
    return [
        board[r][c]
        for r in range(start_row, start_row + BOX)
        for c in range(start_col, start_col + BOX)
    ]


def iter_units(board: Board) -> Iterator[List[int]]:
    """Yield the 27 units: rows, then columns, then boxes."""
    for row in range(SIZE):
        yield row_cells(board, row)
    for col in range(SIZE):
        yield column_cells(board, col)
    for start_row in range(0, SIZE, BOX):
        for start_col in range(0, SIZE, BOX):
            yield box_cells(board, start_row, start_col)


def parse_puzzle(puzzle: Sequence[str]) -> Board:
    """Convert a flat iterable of characters into a 9x9 board.

    ASCII digits are cells, ``.``, ``_`` and ``-`` are empty cells and
    everything else is layout. Other Unicode digits such as ``²`` count as
    layout too.
    """
    cells = [
        int(ch) if ch in DIGITS else EMPTY
        for ch in puzzle
        if ch in DIGITS or ch in PLACEHOLDERS
    ]
    if len(cells) != SIZE * SIZE:
        raise GridShapeError("Sudoku puzzle must yield 81 cells")
    return [cells[start : start + SIZE] for start in range(0, SIZE * SIZE, SIZE)]


def serialize_board(board: Board) -> str:
    """Return board as a single string for easy comparison."""
    return "".join(map(str, chain.from_iterable(board)))


def pretty_board(board: Board) -> str:
    lines = []
    for r, row in enumerate(board):
        if r and r % BOX == 0:
            lines.append(BAND_RULE)
        cells = [str(value) if value else "." for value in row]
        stacks = [" ".join(cells[c : c + BOX]) for c in range(0, SIZE, BOX)]
        lines.append(" | ".join(stacks))
    return "\n".join(lines)
