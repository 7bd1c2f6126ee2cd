"""Sudoku validation and backtracking solver with an HTTP front end."""

from .grid import Board, GridShapeError, parse_puzzle, pretty_board, serialize_board
from .handler import InvalidGridError, SolveReport, coerce_grid, evaluate_grid
from .solver import solve_sudoku
from .validator import is_consistent, is_sudoku_solved, is_unit_valid

__all__ = [
    "Board",
    "GridShapeError",
    "InvalidGridError",
    "SolveReport",
    "coerce_grid",
    "evaluate_grid",
    "is_consistent",
    "is_sudoku_solved",
    "is_unit_valid",
    "parse_puzzle",
    "pretty_board",
    "serialize_board",
    "solve_sudoku",
]
