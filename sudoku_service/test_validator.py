import random

from . import validator
from .grid import copy_grid


def test_unit_permutations_are_valid():
    rng = random.Random(7)
    digits = list(range(1, 10))
    for _ in range(50):
        rng.shuffle(digits)
        assert validator.is_unit_valid(digits)


def test_unit_with_repeat_is_invalid():
    assert not validator.is_unit_valid([1, 2, 3, 4, 5, 6, 7, 8, 8])


def test_unit_with_out_of_range_value_is_invalid():
    assert not validator.is_unit_valid([0, 2, 3, 4, 5, 6, 7, 8, 9])
    assert not validator.is_unit_valid([10, 2, 3, 4, 5, 6, 7, 8, 9])
    assert not validator.is_unit_valid([-1, 2, 3, 4, 5, 6, 7, 8, 9])


def test_solved_board_is_recognised(solved_board):
    assert validator.is_sudoku_solved(solved_board)


def test_any_empty_cell_means_unsolved(solved_board):
    for row in range(9):
        for col in range(9):
            board = copy_grid(solved_board)
            board[row][col] = 0
            assert not validator.is_sudoku_solved(board)


def test_swapped_cells_are_not_solved(solved_board):
    board = copy_grid(solved_board)
    board[0][0], board[0][1] = board[0][1], board[0][0]
    assert not validator.is_sudoku_solved(board)


def test_is_sudoku_solved_does_not_modify_board(puzzle_board):
    before = copy_grid(puzzle_board)
    validator.is_sudoku_solved(puzzle_board)
    assert puzzle_board == before


def test_consistent_partial_board(puzzle_board, solved_board):
    assert validator.is_consistent(puzzle_board)
    assert validator.is_consistent(solved_board)
    assert validator.is_consistent([[0] * 9 for _ in range(9)])


def test_inconsistent_boards(puzzle_board):
    board = copy_grid(puzzle_board)
    board[0][2] = 5
    assert not validator.is_consistent(board)

    board = copy_grid(puzzle_board)
    board[8][0] = 10
    assert not validator.is_consistent(board)

    board = copy_grid(puzzle_board)
    board[8][0] = -3
    assert not validator.is_consistent(board)
