"""Configuration helpers for report runs."""

from .settings import (
    CLI_TOTAL_WEEKS,
    DEFAULT_PLAYERS_PATH,
    DEFAULT_REPORT_PATH,
    DEFAULT_TOTAL_WEEKS,
    ReportSettings,
)

__all__ = [
    "CLI_TOTAL_WEEKS",
    "DEFAULT_PLAYERS_PATH",
    "DEFAULT_REPORT_PATH",
    "DEFAULT_TOTAL_WEEKS",
    "ReportSettings",
]
