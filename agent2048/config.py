"""Agent configuration parsed from `key=value` argument strings."""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DEPTH = 1


class ConfigError(ValueError):
    """Raised when an agent argument string holds an invalid setting."""


class MissingPropertyError(KeyError):
    """Raised when a metadata key was never configured."""


class PlayType(Enum):
    RANDOM = "random"
    GREEDY = "greedy"
    HEURISTIC = "heuristic"


def parse_meta(args: str) -> Dict[str, str]:
    """
    Split whitespace separated `key=value` tokens into a mapping.

    Later tokens override earlier ones. A token without `=` maps to itself,
    so a bare `greedy` becomes `{"greedy": "greedy"}`.
    """
    meta: Dict[str, str] = {}
    for pair in args.split():
        key, sep, value = pair.partition("=")
        meta[key] = value if sep else pair
    return meta


def _parse_int(meta: Dict[str, str], key: str) -> Optional[int]:
    if key not in meta:
        return None
    try:
        return int(meta[key])
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {meta[key]!r}") from None


def _parse_play_type(meta: Dict[str, str]) -> PlayType:
    if "play" in meta:
        try:
            return PlayType(meta["play"])
        except ValueError:
            choices = ", ".join(p.value for p in PlayType)
            raise ConfigError(f"Unknown play type {meta['play']!r} (expected one of {choices})") from None

    bare = [p for p in PlayType if meta.get(p.value) == p.value]
    if len(bare) > 1:
        raise ConfigError(f"Conflicting play types: {', '.join(p.value for p in bare)}")
    return bare[0] if bare else PlayType.RANDOM


class AgentConfig:
    """
    Typed view over an agent's metadata.

    `seed`, `play_type` and `search_depth` are parsed and validated once;
    everything else stays available as raw strings through `property()`.
    """

    seed: Optional[int]
    play_type: PlayType
    search_depth: int

    def __init__(self, args: str = ""):
        self._meta = parse_meta(args)

        self.seed = _parse_int(self._meta, "seed")
        self.play_type = _parse_play_type(self._meta)

        depth = _parse_int(self._meta, "depth")
        if depth is None:
            depth = DEFAULT_SEARCH_DEPTH
        if depth < 0:
            raise ConfigError(f"depth must be non-negative, got {depth}")
        self.search_depth = depth

    def name(self) -> str:
        return self.property("name")

    def role(self) -> str:
        return self.property("role")

    def property(self, key: str) -> str:
        try:
            return self._meta[key]
        except KeyError:
            raise MissingPropertyError(key) from None

    def notify(self, msg: str) -> None:
        """Update a single metadata entry from a `key=value` message."""
        key, _, value = msg.partition("=")
        self._meta[key] = value
        logger.debug("metadata %s updated to %r", key, value)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._meta)

    def __repr__(self) -> str:
        return f"AgentConfig({' '.join(f'{k}={v}' for k, v in self._meta.items())})"
