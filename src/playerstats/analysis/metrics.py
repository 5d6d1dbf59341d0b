"""Per-player metric functions."""

from __future__ import annotations

import math
from typing import Any, Mapping, Union

from playerstats.config import DEFAULT_TOTAL_WEEKS
from playerstats.errors import ValidationError
from playerstats.models import PlayerRecord

PlayerLike = Union[PlayerRecord, Mapping[str, Any]]

_ATTRIBUTES = {"hoursPlayed": "hours_played"}


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _numeric_field(player: PlayerLike, key: str) -> float:
    if player is None:
        raise ValidationError("player data is missing")
    if isinstance(player, Mapping):
        value = player.get(key)
    else:
        value = getattr(player, _ATTRIBUTES.get(key, key), None)
    if not _is_finite_number(value) or value < 0:
        raise ValidationError(f"player field {key!r} must be a non-negative number, got {value!r}")
    return value


def _finite_result(value: float, label: str) -> float:
    if not math.isfinite(value):
        raise ValidationError(f"{label} is out of range: {value!r}")
    return value


def calculate_win_rate(player: PlayerLike) -> float:
    """Return the percentage of matches won, or 0 when no match was played."""

    matches = _numeric_field(player, "matches")
    wins = _numeric_field(player, "wins")
    if matches == 0:
        return 0.0
    return _finite_result(wins / matches * 100, "win rate")


def calculate_average_hours(player: PlayerLike, total_weeks: float = DEFAULT_TOTAL_WEEKS) -> float:
    """Return hours played per week over ``total_weeks``.

    >>> calculate_average_hours({"hoursPlayed": 120}, 8)
    15.0
    """

    if not _is_finite_number(total_weeks) or total_weeks <= 0:
        raise ValidationError(f"total_weeks must be a positive number, got {total_weeks!r}")
    hours = _numeric_field(player, "hoursPlayed")
    return _finite_result(hours / total_weeks, "average hours")
