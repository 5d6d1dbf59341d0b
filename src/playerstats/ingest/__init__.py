"""Input adapters that normalize raw player data."""

from .players import load_players, parse_players

__all__ = [
    "load_players",
    "parse_players",
]
