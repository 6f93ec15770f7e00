"""
Action selection for the player agent.

Each policy is an independent class exposing `select(board) -> Action`;
`make_policy` picks one from a `PlayType`.
"""

import logging
import random
from typing import List, Optional, Union

from agent2048.action import Action, NoOp, Slide
from agent2048.board import Board, DIRECTIONS, ILLEGAL
from agent2048.config import DEFAULT_SEARCH_DEPTH, PlayType
from agent2048.search import tree_search

logger = logging.getLogger(__name__)


def _improves(candidate: int, best: int) -> bool:
    # Running maximum starts at 0: positive ties keep the earlier direction,
    # zero ties at the floor go to the later one.
    return candidate > best or candidate == best == 0


class RandomPolicy:
    """Play the first legal slide in a freshly shuffled direction order."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.opcodes: List[int] = list(DIRECTIONS)

    def select(self, board: Board) -> Action:
        self.rng.shuffle(self.opcodes)
        for op in self.opcodes:
            if board.copy().slide(op) != ILLEGAL:
                return Slide(op)
        return NoOp()


class GreedyPolicy:
    """Play the slide with the largest immediate reward."""

    def select(self, board: Board) -> Action:
        max_reward, best_op = 0, None
        for op in DIRECTIONS:
            reward = board.copy().slide(op)
            if reward != ILLEGAL and _improves(reward, max_reward):
                max_reward, best_op = reward, op
        return Slide(best_op) if best_op is not None else NoOp()


class HeuristicPolicy:
    """Play the slide maximizing immediate reward plus the tree search value."""

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH):
        self.depth = depth

    def select(self, board: Board) -> Action:
        max_score, best_op = 0, None
        for op in DIRECTIONS:
            after = board.copy()
            reward = after.slide(op)
            if reward == ILLEGAL:
                continue
            score = reward + tree_search(after, self.depth)
            logger.debug("direction %d: reward=%d score=%d", op, reward, score)
            if _improves(score, max_score):
                max_score, best_op = score, op
        return Slide(best_op) if best_op is not None else NoOp()


Policy = Union[RandomPolicy, GreedyPolicy, HeuristicPolicy]


def make_policy(play_type: PlayType, rng: Optional[random.Random] = None,
                depth: int = DEFAULT_SEARCH_DEPTH) -> Policy:
    """Build the policy for `play_type` (random, greedy, heuristic)"""
    if play_type == PlayType.RANDOM:
        return RandomPolicy(rng)
    elif play_type == PlayType.GREEDY:
        return GreedyPolicy()
    elif play_type == PlayType.HEURISTIC:
        return HeuristicPolicy(depth)
    else:
        raise ValueError(f"Unknown play type: {play_type}")
