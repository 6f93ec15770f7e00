"""
Player and environment agents.

Both implement the same capability set (`Agent`) without sharing a base
class: take_action, open/close_episode, notify, check_for_win, property,
name and role.
"""

import logging
import random
from typing import List, Protocol

from agent2048.action import Action, NoOp, Place
from agent2048.board import Board
from agent2048.config import AgentConfig
from agent2048.policies import Policy, make_policy

logger = logging.getLogger(__name__)


class Agent(Protocol):
    config: AgentConfig

    def open_episode(self, flag: str = "") -> None: ...
    def close_episode(self, flag: str = "") -> None: ...
    def take_action(self, board: Board) -> Action: ...
    def check_for_win(self, board: Board) -> bool: ...
    def notify(self, msg: str) -> None: ...
    def property(self, key: str) -> str: ...
    def name(self) -> str: ...
    def role(self) -> str: ...


class Player:
    """
    Slide-playing agent.

    The play type (`play=random|greedy|heuristic`, default random) is fixed at
    construction and every `take_action` goes to that one policy. `seed`
    seeds the agent's private random source and `depth` sets the lookahead of
    the heuristic policy.
    """

    def __init__(self, args: str = ""):
        self.config = AgentConfig("name=dummy role=player " + args)
        self.rng = random.Random(self.config.seed)
        self.policy: Policy = make_policy(self.config.play_type, rng=self.rng,
                                          depth=self.config.search_depth)
        logger.info("Player %s uses %s play", self.name(), self.config.play_type.value)

    def open_episode(self, flag: str = "") -> None:
        logger.debug("%s open episode %s", self.name(), flag)

    def close_episode(self, flag: str = "") -> None:
        logger.debug("%s close episode %s", self.name(), flag)

    def take_action(self, board: Board) -> Action:
        return self.policy.select(board)

    def check_for_win(self, board: Board) -> bool:
        return False

    def notify(self, msg: str) -> None:
        self.config.notify(msg)

    def property(self, key: str) -> str:
        return self.config.property(key)

    def name(self) -> str:
        return self.config.name()

    def role(self) -> str:
        return self.config.role()


class RandomEnvironment:
    """
    Tile-placing agent: drops a 2 (90%) or a 4 (10%) into a random empty cell.
    """

    def __init__(self, args: str = ""):
        self.config = AgentConfig("name=random role=environment " + args)
        self.rng = random.Random(self.config.seed)
        self.space: List[int] = list(range(Board.CELLS))

    def open_episode(self, flag: str = "") -> None:
        logger.debug("%s open episode %s", self.name(), flag)

    def close_episode(self, flag: str = "") -> None:
        logger.debug("%s close episode %s", self.name(), flag)

    def take_action(self, board: Board) -> Action:
        self.rng.shuffle(self.space)
        for pos in self.space:
            if board[pos] != 0:
                continue
            tile = 1 if self.rng.randrange(10) else 2
            return Place(pos, tile)
        return NoOp()

    def check_for_win(self, board: Board) -> bool:
        return False

    def notify(self, msg: str) -> None:
        self.config.notify(msg)

    def property(self, key: str) -> str:
        return self.config.property(key)

    def name(self) -> str:
        return self.config.name()

    def role(self) -> str:
        return self.config.role()
