import pytest

from agent2048.board import Board


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def up_only_board():
    """Top row empty, remaining rows full with no equal neighbours: only UP moves."""
    return Board([
        0, 0, 0, 0,
        1, 2, 3, 4,
        5, 6, 7, 8,
        9, 10, 11, 12,
    ])


@pytest.fixture
def vertical_pair_board():
    """Full board whose only merge is the 2-2 pair in the first column."""
    return Board([
        1, 2, 3, 4,
        1, 5, 6, 7,
        8, 9, 10, 11,
        12, 13, 14, 15,
    ])
