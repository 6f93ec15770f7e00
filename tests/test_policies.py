import random

import pytest

from agent2048.action import NoOp, Slide
from agent2048.board import Board, ILLEGAL, UP, RIGHT, DOWN
from agent2048.config import PlayType
from agent2048.policies import GreedyPolicy, HeuristicPolicy, RandomPolicy, make_policy
from agent2048.search import tree_search


def all_policies(seed=0):
    return [RandomPolicy(random.Random(seed)), GreedyPolicy(), HeuristicPolicy()]


def random_board(rng):
    return Board([0 if rng.random() < 0.3 else rng.randrange(1, 9) for _ in range(16)])


@pytest.mark.parametrize("seed", range(20))
def test_selected_slide_is_legal(seed):
    rng = random.Random(seed)
    board = random_board(rng)
    for policy in all_policies(seed):
        action = policy.select(board)
        if isinstance(action, NoOp):
            assert all(board.copy().slide(d) == ILLEGAL for d in range(4))
        else:
            assert isinstance(action, Slide)
            assert board.copy().slide(action.direction) != ILLEGAL


def test_empty_board_yields_noop(empty_board):
    for policy in all_policies():
        assert isinstance(policy.select(empty_board), NoOp)


def test_stuck_full_board_yields_noop():
    board = Board(range(1, 17))
    for policy in all_policies():
        assert isinstance(policy.select(board), NoOp)


def test_single_legal_direction_is_chosen_by_every_policy(up_only_board):
    for seed in range(5):
        for policy in all_policies(seed):
            assert policy.select(up_only_board) == Slide(UP)


def test_policies_do_not_mutate_board(vertical_pair_board):
    original = vertical_pair_board.copy()
    for policy in all_policies():
        policy.select(vertical_pair_board)
    assert vertical_pair_board == original


def test_greedy_positive_tie_keeps_lowest_direction(vertical_pair_board):
    assert vertical_pair_board.copy().slide(UP) == 4
    assert vertical_pair_board.copy().slide(DOWN) == 4
    assert GreedyPolicy().select(vertical_pair_board) == Slide(UP)


def test_greedy_prefers_larger_reward():
    board = Board([
        1, 1, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
        0, 0, 2, 2,
    ])
    # left/right merge both pairs, up/down merge nothing
    assert GreedyPolicy().select(board) == Slide(RIGHT)


def test_zero_reward_tie_goes_to_later_direction():
    # A lone corner tile can only move right or down, neither merges.
    board = Board([1] + [0] * 15)
    assert GreedyPolicy().select(board) == Slide(DOWN)


def test_heuristic_positive_tie_keeps_lowest_direction():
    # right and down both score 0 + 75
    board = Board([1] + [0] * 15)
    assert HeuristicPolicy().select(board) == Slide(RIGHT)


def test_heuristic_scores_reward_plus_lookahead():
    board = Board([
        2, 1, 1, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
    ])
    scores = {}
    for direction in range(4):
        after = board.copy()
        reward = after.slide(direction)
        if reward != ILLEGAL:
            scores[direction] = reward + tree_search(after, 1)

    action = HeuristicPolicy(depth=1).select(board)
    assert scores[action.direction] == max(scores.values())


def test_random_policy_is_reproducible_with_seed():
    boards = [random_board(random.Random(s)) for s in range(10)]
    first = RandomPolicy(random.Random(42))
    second = RandomPolicy(random.Random(42))
    assert [first.select(b) for b in boards] == [second.select(b) for b in boards]


def test_make_policy_dispatches_on_play_type():
    assert isinstance(make_policy(PlayType.RANDOM), RandomPolicy)
    assert isinstance(make_policy(PlayType.GREEDY), GreedyPolicy)
    heuristic = make_policy(PlayType.HEURISTIC, depth=3)
    assert isinstance(heuristic, HeuristicPolicy)
    assert heuristic.depth == 3
