"""Run configuration for the report pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Library default used when a caller does not choose a week count.
DEFAULT_TOTAL_WEEKS = 12
# Week count the command-line entry point passes explicitly.
CLI_TOTAL_WEEKS = 10

DEFAULT_PLAYERS_PATH = Path("players.json")
DEFAULT_REPORT_PATH = Path("report.json")


@dataclass(frozen=True)
class ReportSettings:
    players_path: Path = DEFAULT_PLAYERS_PATH
    report_path: Path = DEFAULT_REPORT_PATH
    total_weeks: float = DEFAULT_TOTAL_WEEKS

    @classmethod
    def for_cli(
        cls,
        *,
        players_path: Optional[Path] = None,
        report_path: Optional[Path] = None,
        total_weeks: Optional[float] = None,
    ) -> "ReportSettings":
        """Settings used by ``playerstats`` when run from the command line.

        Paths are relative to the working directory; unset values fall back to
        ``players.json``, ``report.json`` and ``CLI_TOTAL_WEEKS``.
        """

        return cls(
            players_path=players_path or DEFAULT_PLAYERS_PATH,
            report_path=report_path or DEFAULT_REPORT_PATH,
            total_weeks=CLI_TOTAL_WEEKS if total_weeks is None else total_weeks,
        )
