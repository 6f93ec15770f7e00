"""Static evaluation of boards at the bottom of the tree search."""

from typing import List, Sequence, Tuple

from agent2048.board import Board

# Cells read along each pattern; rotations reapply it to every edge
TUPLE_PATTERNS: List[Tuple[int, ...]] = [(0, 1, 2, 3)]

SPACE_WEIGHT = 5


def tuple_score(pattern: Sequence[int], board: Board) -> int:
    """
    Fibonacci-weighted score of the cells along `pattern`.

    Only strictly monotonic runs count: an adjacent equal pair, or a run that
    changes direction, scores 0.

    Args:
        pattern: Board indices, read in order
        board: Board to read from

    Returns:
        int: Sum of `map_to_fibonacci` over the pattern after its first cell,
        or 0 if the run is not strictly monotonic
    """
    is_decreasing = is_increasing = True
    score = 0
    for prev, cur in zip(pattern, pattern[1:]):
        score += board.map_to_fibonacci(board[cur])
        if board[cur] == board[prev]:
            return 0
        elif board[cur] > board[prev]:
            is_decreasing = False
        else:
            is_increasing = False
    return score if is_decreasing or is_increasing else 0


def space_score(board: Board) -> int:
    return len(board.empty_cells()) * SPACE_WEIGHT


def evaluate_board(board: Board, patterns: Sequence[Sequence[int]] = TUPLE_PATTERNS) -> int:
    """
    Monotonic pattern score over all four rotations plus the empty-cell bonus.
    The board is rotated in place and ends in its original orientation.
    """
    score = 0
    for pattern in patterns:
        for _ in range(4):
            score += tuple_score(pattern, board)
            board.rotate_left()
    score += space_score(board)
    return score
