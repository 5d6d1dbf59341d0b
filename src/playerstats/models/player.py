"""Player and report models shared across ingestion, analysis and persistence."""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, model_validator
from pydantic.config import ConfigDict


class PlayerRecord(BaseModel):
    """Raw per-player input as found in ``players.json``."""

    id: Union[StrictInt, StrictStr]
    name: str
    matches: StrictInt = Field(..., ge=0)
    wins: StrictInt = Field(..., ge=0)
    hours_played: StrictFloat = Field(..., ge=0, alias="hoursPlayed")

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def _wins_within_matches(self) -> "PlayerRecord":
        if self.wins > self.matches:
            raise ValueError(f"wins ({self.wins}) exceed matches ({self.matches})")
        return self


class PlayerStat(BaseModel):
    """Derived metrics for one player."""

    id: Union[StrictInt, StrictStr]
    name: str
    win_rate: float = Field(..., ge=0.0, le=100.0, alias="winRate")
    avg_hours: float = Field(..., ge=0.0, alias="avgHours")

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


class GlobalReport(BaseModel):
    """Aggregate statistics across every player."""

    average_win_rate: float = Field(..., alias="averageWinRate")
    average_hours: float = Field(..., alias="averageHours")
    most_active_player: str = Field(..., alias="mostActivePlayer")

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


class Report(BaseModel):
    """The persisted report artifact."""

    stats: List[PlayerStat]
    top_player: PlayerStat = Field(..., alias="topPlayer")
    global_: GlobalReport = Field(..., alias="global")

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)
