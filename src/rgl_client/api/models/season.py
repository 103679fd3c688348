from __future__ import annotations

from pydantic import Field

from .base import RglModel


class SeasonOverview(RglModel):
    """High level info about a season as a whole."""

    name: str = ""
    division_sorting: dict[str, int] = Field(default_factory=dict)
    format_name: str = ""
    region_name: str = ""
    maps: list[str] = Field(default_factory=list)
    participating_teams: list[int] = Field(default_factory=list)
    matches_played_during_season: list[int] = Field(default_factory=list)
