from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import RglModel


class MatchTeam(RglModel):
    team_name: str = ""
    team_tag: str = ""
    team_id: int = 0
    is_home: bool = False
    # Sent as a JSON string, e.g. "3.00".
    points: float = 0.0


class MatchMap(RglModel):
    map_name: str = ""
    home_score: int = 0
    away_score: int = 0


class MatchOverview(RglModel):
    match_id: int
    season_name: str = ""
    division_name: str = ""
    division_id: int = 0
    season_id: int = 0
    match_date: datetime | None = None
    match_name: str = ""
    is_forfeit: bool = False
    region_id: int = 0
    winner: int = 0
    teams: list[MatchTeam] = Field(default_factory=list)
    maps: list[MatchMap] = Field(default_factory=list)
