from __future__ import annotations

from pydantic import Field

from .base import RglModel, SteamID


class SearchNameRequest(RglModel):
    name_contains: str


class SearchPlayerResults(RglModel):
    results: list[SteamID] = Field(default_factory=list)
    count: int = 0
    total_hit_count: int = 0


class SearchTeamResults(RglModel):
    results: list[str] = Field(default_factory=list)
    count: int = 0
    total_hit_count: int = 0
