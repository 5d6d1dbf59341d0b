"""Player metrics, aggregation and report assembly."""

from .metrics import calculate_average_hours, calculate_win_rate
from .service import (
    analyze_player_stats,
    assemble_report,
    compute_global_report,
    find_top_player,
    generate_report,
)

__all__ = [
    "calculate_win_rate",
    "calculate_average_hours",
    "analyze_player_stats",
    "compute_global_report",
    "find_top_player",
    "assemble_report",
    "generate_report",
]
