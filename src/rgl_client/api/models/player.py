from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import RglModel, SteamID


class PlayerStatus(RglModel):
    is_verified: bool = False
    is_banned: bool = False
    is_on_probation: bool = False


class PlayerTeam(RglModel):
    id: int
    tag: str = ""
    name: str = ""
    status: str = ""
    season_id: int = 0
    division_id: int = 0
    division_name: str = ""


class PlayerTeams(RglModel):
    """Current team per format; a player may have none in any of them."""

    sixes: PlayerTeam | None = None
    highlander: PlayerTeam | None = None
    prolander: PlayerTeam | None = None


class PlayerBanInformation(RglModel):
    ends_at: datetime | None = None
    reason: str = ""


class Player(RglModel):
    steam_id: SteamID
    avatar: str = ""
    name: str = ""
    updated_at: datetime | None = None
    status: PlayerStatus = Field(default_factory=PlayerStatus)
    ban_information: PlayerBanInformation | None = None
    current_teams: PlayerTeams = Field(default_factory=PlayerTeams)


class TeamStats(RglModel):
    wins: int = 0
    wins_without: int = 0
    loses: int = 0
    loses_without: int = 0
    games_played: int = 0
    games_without: int = 0


class ProfileTeam(RglModel):
    """One team membership from a player's history."""

    format_id: int = 0
    format_name: str = ""
    region_id: int = 0
    region_name: str = ""
    season_id: int = 0
    season_name: str = ""
    started_at: datetime | None = None
    division_id: int = 0
    division_name: str = ""
    left_at: datetime | None = None
    team_name: str = ""
    team_tag: str = ""
    team_id: int
    stats: TeamStats = Field(default_factory=TeamStats)
