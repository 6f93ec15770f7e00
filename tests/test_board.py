import random

import pytest

from agent2048.board import Board, ILLEGAL, UP, RIGHT, DOWN, LEFT, DIRECTIONS


def row(*cells):
    return Board(list(cells) + [0] * (16 - len(cells)))


def test_empty_board_has_no_legal_slide(empty_board):
    for direction in DIRECTIONS:
        assert empty_board.copy().slide(direction) == ILLEGAL


def test_slide_left_merges_pair():
    board = row(1, 1, 0, 0)
    assert board.slide(LEFT) == 4
    assert board.cells()[:4] == [2, 0, 0, 0]


def test_slide_right_merges_pair():
    board = row(1, 1, 0, 0)
    assert board.slide(RIGHT) == 4
    assert board.cells()[:4] == [0, 0, 0, 2]


def test_slide_merges_each_tile_once():
    board = row(1, 1, 1, 1)
    assert board.slide(LEFT) == 8
    assert board.cells()[:4] == [2, 2, 0, 0]

    board = row(1, 1, 2, 0)
    assert board.slide(LEFT) == 4
    assert board.cells()[:4] == [2, 2, 0, 0]


def test_slide_up_and_down_work_on_columns():
    cells = [0] * 16
    cells[4] = 3
    cells[12] = 3
    board = Board(cells)
    assert board.copy().slide(UP) == 16
    up = board.copy()
    up.slide(UP)
    assert up[0] == 4 and up[4] == 0 and up[12] == 0

    down = board.copy()
    assert down.slide(DOWN) == 16
    assert down[12] == 4 and down[4] == 0


def test_move_without_merge_is_legal_with_zero_reward():
    board = row(0, 0, 0, 1)
    assert board.slide(LEFT) == 0
    assert board[0] == 1


def test_illegal_slide_leaves_board_unchanged():
    board = row(1, 0, 0, 0)
    before = board.copy()
    assert board.slide(LEFT) == ILLEGAL
    assert board.slide(UP) == ILLEGAL
    assert board == before


def test_copy_is_independent():
    board = row(1, 1)
    twin = board.copy()
    twin.slide(LEFT)
    assert board.cells()[:2] == [1, 1]
    assert twin.cells()[:2] == [2, 0]


def test_rotate_left_is_counter_clockwise():
    board = Board(range(16))
    board.rotate_left()
    assert board.cells()[:4] == [3, 7, 11, 15]
    assert board.cells()[12:] == [0, 4, 8, 12]


@pytest.mark.parametrize("seed", range(10))
def test_four_rotations_restore_board(seed):
    rng = random.Random(seed)
    board = Board([rng.randrange(12) for _ in range(16)])
    original = board.copy()
    for _ in range(4):
        board.rotate_left()
    assert board == original


def test_cell_access_is_row_major():
    board = Board(range(16))
    assert board[0] == 0
    assert board[5] == 5
    board[5] = 9
    assert board.grid()[1, 1] == 9


def test_map_to_fibonacci_is_monotonic():
    assert [Board.map_to_fibonacci(i) for i in range(8)] == [0, 1, 2, 3, 5, 8, 13, 21]
    values = [Board.map_to_fibonacci(i) for i in range(20)]
    assert values == sorted(values)


def test_helpers(up_only_board):
    assert up_only_board.empty_cells() == [0, 1, 2, 3]
    assert up_only_board.max_tile() == 12
    assert Board().max_tile() == 0
    assert "4096" in up_only_board.render_ascii()


def test_board_requires_sixteen_cells():
    with pytest.raises(AssertionError):
        Board([1, 2, 3])
