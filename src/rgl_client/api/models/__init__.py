from .ban import Ban
from .base import RglModel, SteamID
from .match import MatchMap, MatchOverview, MatchTeam
from .player import (
    Player,
    PlayerBanInformation,
    PlayerStatus,
    PlayerTeam,
    PlayerTeams,
    ProfileTeam,
    TeamStats,
)
from .search import SearchNameRequest, SearchPlayerResults, SearchTeamResults
from .season import SeasonOverview
from .team import TeamOverview, TeamPlayer

__all__ = [
    "Ban",
    "MatchMap",
    "MatchOverview",
    "MatchTeam",
    "Player",
    "PlayerBanInformation",
    "PlayerStatus",
    "PlayerTeam",
    "PlayerTeams",
    "ProfileTeam",
    "RglModel",
    "SearchNameRequest",
    "SearchPlayerResults",
    "SearchTeamResults",
    "SeasonOverview",
    "SteamID",
    "TeamOverview",
    "TeamPlayer",
    "TeamStats",
]
