from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import RglModel, SteamID


class TeamPlayer(RglModel):
    name: str = ""
    steam_id: SteamID
    is_leader: bool = False
    joined_at: datetime | None = None
    left_at: datetime | None = None
    # Upstream uses a snake_case key for this one field.
    created_on: datetime | None = Field(default=None, alias="created_on")
    updated_on: datetime | None = None


class TeamOverview(RglModel):
    team_id: int
    linked_teams: list[int] = Field(default_factory=list)
    season_id: int = 0
    division_id: int = 0
    division_name: str = ""
    team_leader: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tag: str = ""
    name: str = ""
    final_rank: int | None = None
    players: list[TeamPlayer] = Field(default_factory=list)
