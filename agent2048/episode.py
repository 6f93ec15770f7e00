"""Run a single game between a player and an environment agent."""

import logging
from typing import NamedTuple, Optional

from agent2048.action import Slide
from agent2048.agents import Agent
from agent2048.board import Board, ILLEGAL

logger = logging.getLogger(__name__)

# The environment acts alone for this many turns to seed the board
INITIAL_PLACEMENTS = 2


class EpisodeResult(NamedTuple):
    score: int
    max_tile: int  # exponent
    moves: int
    winner: str


def play_episode(player: Agent, environment: Agent, max_moves: Optional[int] = None,
                 render: bool = False) -> EpisodeResult:
    """
    Alternate environment and player turns on a fresh board.

    The episode ends when an agent produces an action the board rejects (its
    opponent wins), when an agent reports a win, or after `max_moves` slides.

    Args:
        player: Agent producing slides
        environment: Agent producing tile placements
        max_moves: Optional cap on the number of slides
        render: Print the board after every slide

    Returns:
        EpisodeResult: total slide reward, largest exponent, slide count and
        the winner's name ("" if the move cap ended the game)
    """
    board = Board()
    player.open_episode("~:" + environment.name())
    environment.open_episode(player.name() + ":~")

    score = 0
    moves = 0
    step = 0
    winner = ""
    while True:
        if step >= INITIAL_PLACEMENTS and step % 2 == 0:
            who, other = player, environment
        else:
            who, other = environment, player

        action = who.take_action(board)
        reward = action.apply(board)
        if reward == ILLEGAL:
            logger.debug("%s has no legal move (%s)", who.name(), action)
            winner = other.name()
            break

        step += 1
        if isinstance(action, Slide):
            score += reward
            moves += 1
            logger.debug("move %d: %s +%d score=%d", moves, action, reward, score)
            if render:
                print(f"\nMove {moves}: {action}, +{reward}, score={score}")
                print(board.render_ascii())

        if who.check_for_win(board):
            winner = who.name()
            break
        if max_moves is not None and moves >= max_moves:
            logger.debug("move cap %d reached", max_moves)
            break

    player.close_episode(winner)
    environment.close_episode(winner)

    result = EpisodeResult(score, board.max_tile(), moves, winner)
    logger.info(f"Episode finished. Score: {result.score}, Max Tile: {1 << result.max_tile}, "
                f"Moves: {result.moves}")
    return result
