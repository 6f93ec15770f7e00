"""Fixed-depth lookahead over the player's own slides."""

from agent2048.board import Board, DIRECTIONS, ILLEGAL
from agent2048.evaluate import evaluate_board


def tree_search(board: Board, depth: int = 1) -> int:
    """
    Best `reward + tree_search(after, depth - 1)` over the four slides, with
    `evaluate_board` at the leaves.

    Tile placement by the environment is not modelled, so the result is an
    optimistic single-agent estimate. Illegal slides contribute 0 and the
    maximum starts at 0.
    """
    if depth <= 0:
        return evaluate_board(board)

    best_score = 0
    for direction in DIRECTIONS:
        after = board.copy()
        reward = after.slide(direction)
        score = 0
        if reward != ILLEGAL:
            score = reward + tree_search(after, depth - 1)
        best_score = max(best_score, score)
    return best_score
