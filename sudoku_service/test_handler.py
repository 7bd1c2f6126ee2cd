import pytest

from . import handler
from .conftest import SOLUTION
from .grid import copy_grid, serialize_board


def test_coerce_grid_returns_copy(puzzle_board):
    payload = {"sudoku": puzzle_board}
    board = handler.coerce_grid(payload)
    assert board == puzzle_board
    board[0][2] = 4
    assert puzzle_board[0][2] == 0


@pytest.mark.parametrize(
    "payload, message",
    [
        ([], "'sudoku' field"),
        ({"grid": []}, "'sudoku' field"),
        ({"sudoku": "530070000"}, "list of rows"),
        ({"sudoku": [[0] * 9 for _ in range(5)]}, "exactly 9 rows"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 10]}, "exactly 9 columns"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 8 + ["1"]]}, "integers"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 8 + [True]]}, "integers"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 8 + [1.5]]}, "integers"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 8 + [10]]}, "between 0 and 9"),
        ({"sudoku": [[0] * 9 for _ in range(8)] + [[0] * 8 + [-1]]}, "between 0 and 9"),
    ],
)
def test_coerce_grid_rejects_malformed_input(payload, message):
    with pytest.raises(handler.InvalidGridError, match=message):
        handler.coerce_grid(payload)


def test_evaluate_solved_grid(solved_board):
    report = handler.evaluate_grid(solved_board)
    assert report.solved
    assert report.status == handler.STATUS_SOLVED
    assert report.to_dict() == {
        "message": handler.MESSAGE,
        "solved": True,
        "status": handler.STATUS_SOLVED,
    }


def test_evaluate_generates_solution_without_touching_input(puzzle_board):
    before = copy_grid(puzzle_board)
    report = handler.evaluate_grid(puzzle_board)
    assert not report.solved
    assert report.status == handler.STATUS_SOLUTION_GENERATED
    assert serialize_board(report.solution) == SOLUTION
    assert report.to_dict()["solution"] == report.solution
    assert puzzle_board == before


def test_evaluate_unsolvable_grid(solved_board):
    board = copy_grid(solved_board)
    board[0][0], board[0][1] = board[0][1], board[0][0]
    report = handler.evaluate_grid(board)
    assert not report.solved
    assert report.status == handler.STATUS_UNSOLVABLE
    assert report.solution is None
    assert "solution" not in report.to_dict()
