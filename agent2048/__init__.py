# Decision-making agents for the 2048 tile-merging puzzle
from .board import Board, ILLEGAL, DIRECTIONS, UP, RIGHT, DOWN, LEFT
from .action import Action, Slide, Place, NoOp
from .config import AgentConfig, PlayType, ConfigError, MissingPropertyError
from .evaluate import evaluate_board, tuple_score, space_score
from .search import tree_search
from .policies import RandomPolicy, GreedyPolicy, HeuristicPolicy, make_policy
from .agents import Agent, Player, RandomEnvironment
from .episode import EpisodeResult, play_episode
from .stats import play_games, analyze_results, print_statistics, save_statistics

__all__ = [
    "Board",
    "ILLEGAL",
    "DIRECTIONS",
    "UP",
    "RIGHT",
    "DOWN",
    "LEFT",

    "Action",
    "Slide",
    "Place",
    "NoOp",

    "AgentConfig",
    "PlayType",
    "ConfigError",
    "MissingPropertyError",

    "evaluate_board",
    "tuple_score",
    "space_score",
    "tree_search",

    "RandomPolicy",
    "GreedyPolicy",
    "HeuristicPolicy",
    "make_policy",

    "Agent",
    "Player",
    "RandomEnvironment",

    "EpisodeResult",
    "play_episode",

    "play_games",
    "analyze_results",
    "print_statistics",
    "save_statistics",
]
