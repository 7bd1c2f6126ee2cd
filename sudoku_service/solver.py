"""Backtracking Sudoku solver working in place on a board."""

from __future__ import annotations

from .grid import BOX, EMPTY, SIZE, Board, box_origin, find_empty
from .validator import is_consistent


def is_candidate(board: Board, row: int, col: int, digit: int) -> bool:
    """Return True if digit is absent from the row, column and box of (row, col)."""
    for x in range(SIZE):
        if x != col and board[row][x] == digit:
            return False
    for x in range(SIZE):
        if x != row and board[x][col] == digit:
            return False
    start_row, start_col = box_origin(row, col)
    for r in range(start_row, start_row + BOX):
        for c in range(start_col, start_col + BOX):
            if (r, c) != (row, col) and board[r][c] == digit:
                return False
    return True


def _backtrack(board: Board) -> bool:
    empty = find_empty(board)
    if not empty:
        return True
    row, col = empty
    for candidate in range(1, SIZE + 1):
        if not is_candidate(board, row, col, candidate):
            continue
        board[row][col] = candidate
        if _backtrack(board):
            return True
        board[row][col] = EMPTY
    return False


def solve_sudoku(board: Board) -> bool:
    """Solve the puzzle in-place using backtracking.

    Candidates are tried in ascending order, so the same input always yields
    the same solution. Returns False, leaving the board as it was, when the
    givens already conflict or no completion exists. A complete but invalid
    board is therefore unsolvable rather than returned as-is.
    """
    if not is_consistent(board):
        return False
    return _backtrack(board)
