"""Aggregation, report assembly and the end-to-end report pipeline."""

from __future__ import annotations

import logging
import math
from statistics import fmean
from typing import List, Sequence

from playerstats.config import DEFAULT_TOTAL_WEEKS, ReportSettings
from playerstats.errors import EmptyInputError, ValidationError
from playerstats.ingest import load_players
from playerstats.models import GlobalReport, PlayerRecord, PlayerStat, Report
from playerstats.persistence import save_report

from .metrics import calculate_average_hours, calculate_win_rate


logger = logging.getLogger(__name__)


def _player_stat(player: PlayerRecord, total_weeks: float) -> PlayerStat:
    return PlayerStat(
        id=player.id,
        name=player.name,
        win_rate=calculate_win_rate(player),
        avg_hours=calculate_average_hours(player, total_weeks),
    )


def analyze_player_stats(
    players: Sequence[PlayerRecord],
    total_weeks: float = DEFAULT_TOTAL_WEEKS,
) -> List[PlayerStat]:
    """Compute one stat per player, in input order.

    The first invalid record aborts the whole computation.
    """

    return [_player_stat(player, total_weeks) for player in players]


def find_top_player(stats: Sequence[PlayerStat]) -> PlayerStat:
    """Return the stat with the highest win rate; earlier entries win ties."""

    if not stats:
        raise EmptyInputError("cannot pick a top player from zero stats")
    best = stats[0]
    for current in stats[1:]:
        if current.win_rate > best.win_rate:
            best = current
    return best


def _mean(values: Sequence[float], label: str) -> float:
    try:
        result = fmean(values)
    except OverflowError as exc:
        raise ValidationError(f"{label} is out of range") from exc
    if not math.isfinite(result):
        raise ValidationError(f"{label} is out of range: {result!r}")
    return result


def compute_global_report(stats: Sequence[PlayerStat]) -> GlobalReport:
    """Average win rate and hours across all stats, plus the most active player."""

    if not stats:
        raise EmptyInputError("cannot compute global statistics from zero stats")
    most_active = stats[0]
    for current in stats[1:]:
        if current.avg_hours > most_active.avg_hours:
            most_active = current
    return GlobalReport(
        average_win_rate=_mean([stat.win_rate for stat in stats], "average win rate"),
        average_hours=_mean([stat.avg_hours for stat in stats], "average hours"),
        most_active_player=most_active.name,
    )


def assemble_report(
    stats: Sequence[PlayerStat],
    top: PlayerStat,
    global_report: GlobalReport,
) -> Report:
    """Bundle per-player stats, the top player and global statistics."""

    return Report(stats=list(stats), top_player=top, global_=global_report)


async def generate_report(settings: ReportSettings | None = None) -> Report:
    """Load players, build the report and persist it.

    Stages run strictly in sequence; a failure in any stage propagates before
    the report file is touched.
    """

    settings = settings or ReportSettings()
    players = await load_players(settings.players_path)
    stats = analyze_player_stats(players, settings.total_weeks)
    logger.info(
        "Computed stats for %s players over %s weeks", len(stats), settings.total_weeks
    )
    top = find_top_player(stats)
    global_report = compute_global_report(stats)
    report = assemble_report(stats, top, global_report)
    await save_report(report, settings.report_path)
    logger.info("Top player %s (%.1f%%)", top.name, top.win_rate)
    return report
