import pytest

from .grid import parse_puzzle

PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


@pytest.fixture
def puzzle_board():
    return parse_puzzle(PUZZLE)


@pytest.fixture
def solved_board():
    return parse_puzzle(SOLUTION)
