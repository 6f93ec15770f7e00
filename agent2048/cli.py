#!/usr/bin/env python3
"""
Play a batch of 2048 games between a configurable player and the random
environment, then print tile statistics.

Example usage:
    agent2048-play --total 100 --play "play=heuristic seed=7" --evil "seed=11" --save-stats
"""

import argparse
import logging
from typing import List, Optional

from agent2048.agents import Player, RandomEnvironment
from agent2048.config import ConfigError
from agent2048.episode import play_episode
from agent2048.stats import analyze_results, play_games, print_statistics, save_statistics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play 2048 games with a random, greedy or heuristic player")
    parser.add_argument("--total", type=int, default=100, help="Number of games to play")
    parser.add_argument("--play", type=str, default="", help='Player arguments, e.g. "play=greedy seed=1"')
    parser.add_argument("--evil", type=str, default="", help='Environment arguments, e.g. "seed=2"')
    parser.add_argument("--win-tile", type=int, default=2048, help="Tile value considered a win")
    parser.add_argument("--max-moves", type=int, default=None, help="Stop each game after this many slides")
    parser.add_argument("--save-stats", action="store_true", help="Save statistics to a JSON file")
    parser.add_argument("--output-dir", type=str, default="stats", help="Directory to save statistics")
    parser.add_argument("--render", action="store_true", help="Render a sample game first")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.total <= 0:
        parser.error("--total must be positive")

    try:
        player = Player(args.play)
        environment = RandomEnvironment(args.evil)
    except ConfigError as e:
        parser.error(str(e))

    if args.render:
        print("Playing a sample game with rendering...")
        play_episode(player, environment, max_moves=args.max_moves, render=True)

    results = play_games(player, environment, num_games=args.total, max_moves=args.max_moves)
    stats = analyze_results(results, win_threshold=args.win_tile)
    print_statistics(stats)

    if args.save_stats:
        save_statistics(stats, args.output_dir, {
            'play': args.play,
            'evil': args.evil,
            'max_moves': args.max_moves,
        })


if __name__ == "__main__":
    main()
