"""Canonical models for player input and generated reports."""

from .player import GlobalReport, PlayerRecord, PlayerStat, Report

__all__ = [
    "PlayerRecord",
    "PlayerStat",
    "GlobalReport",
    "Report",
]
