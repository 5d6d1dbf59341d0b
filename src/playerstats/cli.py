"""Command-line interface for generating the player statistics report."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import anyio

from playerstats.analysis import generate_report
from playerstats.config import CLI_TOTAL_WEEKS, DEFAULT_PLAYERS_PATH, DEFAULT_REPORT_PATH, ReportSettings
from playerstats.errors import ReportError
from playerstats.models import Report


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Generate a player statistics report. With no arguments, reads "
            "./players.json, averages hours over 10 weeks and writes ./report.json; "
            "the options below only override those defaults."
        )
    )
    parser.add_argument(
        "--players",
        type=Path,
        default=DEFAULT_PLAYERS_PATH,
        help="Path to the players JSON file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_REPORT_PATH,
        help="Path to write the report JSON",
    )
    parser.add_argument(
        "--weeks",
        type=float,
        default=CLI_TOTAL_WEEKS,
        help="Number of weeks used to average hours played",
    )
    parser.add_argument("--verbose", action="store_true", help="Log pipeline progress")
    return parser.parse_args(argv)


def format_summary(report: Report) -> List[str]:
    top = report.top_player
    return [
        "Report created successfully!",
        f"Top player: {top.name} ({top.win_rate:.1f}% wins)",
        f"Average win rate: {report.global_.average_win_rate:.2f}%",
        f"Most active player: {report.global_.most_active_player}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = ReportSettings.for_cli(
        players_path=args.players,
        report_path=args.output,
        total_weeks=args.weeks,
    )
    try:
        report = anyio.run(generate_report, settings)
    except ReportError as exc:
        raise SystemExit(f"Report generation failed: {exc}") from exc

    for line in format_summary(report):
        print(line)


if __name__ == "__main__":
    main()
