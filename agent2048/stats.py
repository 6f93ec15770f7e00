"""
Play batches of episodes and summarize max tiles, scores and win rates.
"""

import os
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from tabulate import tabulate
from tqdm import tqdm

from agent2048.agents import Agent
from agent2048.episode import EpisodeResult, play_episode

logger = logging.getLogger(__name__)


def play_games(player: Agent, environment: Agent, num_games: int = 100,
               max_moves: Optional[int] = None) -> List[EpisodeResult]:
    """Play `num_games` episodes and collect their results"""
    results = []

    logger.info(f"Playing {num_games} games: {player.name()} vs {environment.name()}")
    for _ in tqdm(range(num_games)):
        results.append(play_episode(player, environment, max_moves=max_moves))

    return results


def analyze_results(results: List[EpisodeResult], win_threshold: int = 2048) -> Dict[str, Any]:
    """Tile reach rates, averages and win rate over a batch of episodes"""
    if not results:
        raise ValueError("Cannot analyze an empty batch of games")

    max_tiles = [1 << result.max_tile for result in results]

    # Tiles 2^2 (4) up to 2048, or higher if some game went past it
    max_power = max(11, max(max_tiles).bit_length() - 1, win_threshold.bit_length() - 1)
    tile_stats = {}
    for power in range(2, max_power + 1):
        tile_value = 2 ** power
        count = sum(1 for tile in max_tiles if tile >= tile_value)
        tile_stats[tile_value] = (count, count / len(results) * 100)

    wins = sum(1 for tile in max_tiles if tile >= win_threshold)

    return {
        'tile_stats': tile_stats,
        'avg_score': sum(result.score for result in results) / len(results),
        'max_score': max(result.score for result in results),
        'avg_moves': sum(result.moves for result in results) / len(results),
        'num_games': len(results),
        'win_rate': wins / len(results) * 100,
        'win_threshold': win_threshold,
    }


def format_tile_table(stats: Dict[str, Any]) -> str:
    table_data = []
    for tile_value, (count, percentage) in sorted(stats['tile_stats'].items()):
        table_data.append([
            f"{tile_value}",
            f"{count}/{stats['num_games']}",
            f"{percentage:.1f}%"
        ])
    return tabulate(table_data, headers=["Tile", "Count", "Percentage"], tablefmt="grid")


def print_statistics(stats: Dict[str, Any]) -> None:
    print(f"\nStatistics for {stats['num_games']} games:")
    print(f"Average score: {stats['avg_score']:.1f}")
    print(f"Top score: {stats['max_score']}")
    print(f"Average moves: {stats['avg_moves']:.1f}")

    print("\nMax Tile Achievement Rates:")
    print(format_tile_table(stats))
    print(f"\nWin Rate (>={stats['win_threshold']} tile): {stats['win_rate']:.1f}%")


def save_statistics(stats: Dict[str, Any], output_dir: str, config: Dict[str, Any]) -> str:
    """Write `stats` plus the run configuration to a timestamped JSON file"""
    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"stats_{stats['num_games']}games_{timestamp}.json"
    filepath = os.path.join(output_dir, filename)

    json_stats = {
        'num_games': stats['num_games'],
        'avg_score': stats['avg_score'],
        'max_score': stats['max_score'],
        'avg_moves': stats['avg_moves'],
        'win_rate': stats['win_rate'],
        'win_threshold': stats['win_threshold'],
        'tile_stats': {
            str(tile_value): {'count': count, 'percentage': percentage}
            for tile_value, (count, percentage) in stats['tile_stats'].items()
        },
        'config': dict(config, date=timestamp),
    }

    with open(filepath, 'w') as f:
        json.dump(json_stats, f, indent=2)

    logger.info(f"Statistics saved to {filepath}")
    return filepath
