"""Turns an incoming grid into a validation/solve report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .grid import EMPTY, SIZE, Board, check_shape, copy_grid
from .solver import solve_sudoku
from .validator import is_sudoku_solved

log = logging.getLogger(__name__)

MESSAGE = "Sudoku validation completed"
STATUS_SOLVED = "Sudoku solved"
STATUS_SOLUTION_GENERATED = "Sudoku not solved, solution generated"
STATUS_UNSOLVABLE = "Sudoku not solved, no valid solution"


class InvalidGridError(ValueError):
    """The request did not carry a usable 9x9 grid."""


@dataclass
class SolveReport:
    """Outcome returned to the client."""

    solved: bool
    status: str
    solution: Optional[Board] = None
    message: str = MESSAGE

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "message": self.message,
            "solved": self.solved,
            "status": self.status,
        }
        if self.solution is not None:
            payload["solution"] = self.solution
        return payload


def coerce_grid(payload: object) -> Board:
    """Extract and check the ``sudoku`` matrix of a decoded request body."""
    if not isinstance(payload, Mapping) or "sudoku" not in payload:
        raise InvalidGridError("Request body must be an object with a 'sudoku' field")
    rows = payload["sudoku"]
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise InvalidGridError("'sudoku' must be a list of rows")
    try:
        check_shape(rows)
    except ValueError as exc:
        raise InvalidGridError(str(exc)) from exc
    for row in rows:
        for value in row:
            # bool is an int subclass; true/false are not cell values
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGridError("Grid cells must be integers")
            if value < EMPTY or value > SIZE:
                raise InvalidGridError("Grid cells must be between 0 and 9")
    return copy_grid(rows)


def evaluate_grid(board: Board) -> SolveReport:
    """Report whether board is solved, otherwise try to solve a copy of it."""
    if is_sudoku_solved(board):
        log.debug("grid already solved")
        return SolveReport(solved=True, status=STATUS_SOLVED)

    solution = copy_grid(board)
    if solve_sudoku(solution):
        log.debug("solution generated")
        return SolveReport(
            solved=False,
            status=STATUS_SOLUTION_GENERATED,
            solution=solution,
        )
    log.debug("grid has no valid solution")
    return SolveReport(solved=False, status=STATUS_UNSOLVABLE)
