from __future__ import annotations

from collections.abc import Sequence

import httpx

from rgl_client.api.base.client import RglHttpClient, paged_path
from rgl_client.api.base.context import BACKGROUND, CallContext
from rgl_client.api.base.errors import OutOfRange
from rgl_client.api.base.transport import RateLimitedTransport
from rgl_client.api.models import (
    Ban,
    MatchOverview,
    Player,
    ProfileTeam,
    SearchNameRequest,
    SearchPlayerResults,
    SearchTeamResults,
    SeasonOverview,
    SteamID,
    TeamOverview,
)
from rgl_client.core.config import Settings

MAX_QUERY_COUNT = 100


def validate_query(take: int, skip: int) -> None:
    if take > MAX_QUERY_COUNT or take < 0 or skip < 0:
        raise OutOfRange(f"take must be in [0, {MAX_QUERY_COUNT}] and skip >= 0, got take={take} skip={skip}")


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise OutOfRange(f"{name} must be positive, got {value}")


def _require_name(name: str) -> None:
    if not name:
        raise OutOfRange("search name must not be empty")


class RglClient:
    """Typed accessors for the RGL public API.

    Every method checks its arguments before any network activity and raises
    OutOfRange on failure; everything else comes from RglHttpClient.call.
    """

    def __init__(self, *, http: RglHttpClient) -> None:
        self.http = http

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_transport: httpx.BaseTransport | None = None
    ) -> RglClient:
        transport = RateLimitedTransport.create(
            burst=settings.rate_limit_burst,
            interval_s=settings.rate_limit_interval_s,
            request_timeout_s=settings.request_timeout_s,
            http_transport=http_transport,
        )
        return cls(
            http=RglHttpClient(
                transport=transport,
                base_url=settings.base_url,
                user_agent=settings.user_agent,
            )
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> RglClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def bans(self, take: int, skip: int, *, ctx: CallContext = BACKGROUND) -> list[Ban]:
        validate_query(take, skip)
        return self.http.call("GET", paged_path("/bans/paged", take, skip), receiver=list[Ban], ctx=ctx)

    def profile(self, steam_id: SteamID | int, *, ctx: CallContext = BACKGROUND) -> Player:
        _require_positive("steam_id", steam_id)
        return self.http.call("GET", f"/profile/{int(steam_id)}", receiver=Player, ctx=ctx)

    def profiles(
        self, steam_ids: Sequence[SteamID | int], *, ctx: CallContext = BACKGROUND
    ) -> list[Player]:
        """Look up to 100 profiles in one request."""
        if len(steam_ids) == 0 or len(steam_ids) > MAX_QUERY_COUNT:
            raise OutOfRange(f"expected 1 to {MAX_QUERY_COUNT} steam ids, got {len(steam_ids)}")
        for steam_id in steam_ids:
            _require_positive("steam_id", steam_id)

        # The endpoint wants the ids as strings.
        body = [str(int(steam_id)) for steam_id in steam_ids]
        return self.http.call("POST", "/profile/getmany", body=body, receiver=list[Player], ctx=ctx)

    def profile_teams(
        self, steam_id: SteamID | int, *, ctx: CallContext = BACKGROUND
    ) -> list[ProfileTeam]:
        _require_positive("steam_id", steam_id)
        return self.http.call(
            "GET", f"/profile/{int(steam_id)}/teams", receiver=list[ProfileTeam], ctx=ctx
        )

    def search_players(
        self, name: str, take: int, skip: int, *, ctx: CallContext = BACKGROUND
    ) -> SearchPlayerResults:
        _require_name(name)
        validate_query(take, skip)
        return self.http.call(
            "POST",
            paged_path("/search/players", take, skip),
            body=SearchNameRequest(name_contains=name),
            receiver=SearchPlayerResults,
            ctx=ctx,
        )

    def match(self, match_id: int, *, ctx: CallContext = BACKGROUND) -> MatchOverview:
        _require_positive("match_id", match_id)
        return self.http.call("GET", f"/matches/{match_id}", receiver=MatchOverview, ctx=ctx)

    def matches(
        self, take: int, skip: int, *, ctx: CallContext = BACKGROUND
    ) -> list[MatchOverview]:
        validate_query(take, skip)
        return self.http.call(
            "POST",
            paged_path("/matches/paged", take, skip),
            body={},
            receiver=list[MatchOverview],
            ctx=ctx,
        )

    def team(self, team_id: int, *, ctx: CallContext = BACKGROUND) -> TeamOverview:
        _require_positive("team_id", team_id)
        return self.http.call("GET", f"/teams/{team_id}", receiver=TeamOverview, ctx=ctx)

    def search_teams(
        self, name: str, take: int, skip: int, *, ctx: CallContext = BACKGROUND
    ) -> SearchTeamResults:
        _require_name(name)
        validate_query(take, skip)
        return self.http.call(
            "POST",
            paged_path("/search/teams", take, skip),
            body=SearchNameRequest(name_contains=name),
            receiver=SearchTeamResults,
            ctx=ctx,
        )

    def season(self, season_id: int, *, ctx: CallContext = BACKGROUND) -> SeasonOverview:
        _require_positive("season_id", season_id)
        return self.http.call("GET", f"/seasons/{season_id}", receiver=SeasonOverview, ctx=ctx)
