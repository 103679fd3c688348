from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from rgl_client.api.base.client import RglHttpClient
from rgl_client.api.base.errors import DecodeFailed, OutOfRange, RateLimited
from rgl_client.api.base.transport import RateLimitedTransport
from rgl_client.api.client import RglClient
from rgl_client.core.config import Settings

CAMP3R = 76561197970669109
OTHER = 76561198084134025


def _make_client(handler: Callable[[httpx.Request], httpx.Response]) -> RglClient:
    transport = RateLimitedTransport.create(
        burst=100,
        interval_s=1.0,
        http_transport=httpx.MockTransport(handler),
    )
    return RglClient(http=RglHttpClient(transport=transport))


def _no_network(calls: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    return handler


def _player(steam_id: int, name: str) -> dict[str, object]:
    return {
        "steamId": str(steam_id),
        "avatar": "https://avatars.steamstatic.com/abc_full.jpg",
        "name": name,
        "updatedAt": "2023-05-01T12:00:00Z",
        "status": {"isVerified": True, "isBanned": False, "isOnProbation": False},
        "banInformation": None,
        "currentTeams": {
            "sixes": {
                "id": 7835,
                "tag": "FROYO",
                "name": "froyotech",
                "status": "Ready",
                "seasonId": 110,
                "divisionId": 582,
                "divisionName": "Invite",
            },
            "highlander": None,
            "prolander": None,
        },
    }


def _ban(i: int) -> dict[str, object]:
    return {
        "steamId": str(76561198000000000 + i),
        "alias": f"player{i}",
        "expiresAt": "2030-01-01T00:00:00Z",
        "createdAt": "2023-01-01T00:00:00Z",
        "reason": f"Cheating ({i})",
    }


def _match(match_id: int) -> dict[str, object]:
    return {
        "matchId": match_id,
        "seasonName": "Sixes S10",
        "divisionName": "Main",
        "divisionId": 12,
        "seasonId": 50,
        "matchDate": "2021-03-01T02:00:00Z",
        "matchName": "Week 6 - cp_steel",
        "isForfeit": False,
        "regionId": 1,
        "winner": 7835,
        "teams": [
            {"teamName": "froyotech", "teamTag": "FROYO", "teamId": 7835, "isHome": True, "points": "3.00"},
            {"teamName": "Other", "teamTag": "OTH", "teamId": 7001, "isHome": False, "points": "0.00"},
        ],
        "maps": [{"mapName": "cp_steel", "homeScore": 3, "awayScore": 1}],
    }


@pytest.mark.parametrize(("take", "skip"), [(101, 0), (-1, 0), (10, -1)])
def test_paged_accessors_reject_out_of_range_without_network(take: int, skip: int) -> None:
    calls: list[httpx.Request] = []
    client = _make_client(_no_network(calls))

    with pytest.raises(OutOfRange):
        client.bans(take, skip)
    with pytest.raises(OutOfRange):
        client.matches(take, skip)
    with pytest.raises(OutOfRange):
        client.search_players("camp3r", take, skip)
    with pytest.raises(OutOfRange):
        client.search_teams("froyo", take, skip)

    assert calls == []


@pytest.mark.parametrize("take", [0, 100])
def test_paging_bounds_are_inclusive(take: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["take"] == str(take)
        return httpx.Response(200, json=[])

    assert _make_client(handler).bans(take, 0) == []


def test_bans_returns_every_record() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/v0/bans/paged"
        assert request.url.params["take"] == "10"
        assert request.url.params["skip"] == "0"
        return httpx.Response(200, json=[_ban(i) for i in range(10)])

    bans = _make_client(handler).bans(10, 0)

    assert len(bans) == 10
    assert all(ban.reason for ban in bans)
    assert bans[3].steam_id == 76561198000000003


def test_profile() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == f"/v0/profile/{CAMP3R}"
        return httpx.Response(200, json=_player(CAMP3R, "camp3r"))

    player = _make_client(handler).profile(CAMP3R)

    assert player.steam_id == CAMP3R
    assert player.status.is_verified
    assert player.ban_information is None
    assert player.current_teams.sixes is not None
    assert player.current_teams.sixes.id == 7835
    assert player.current_teams.highlander is None


def test_profile_rejects_non_positive_id() -> None:
    calls: list[httpx.Request] = []
    with pytest.raises(OutOfRange):
        _make_client(_no_network(calls)).profile(0)
    assert calls == []


def test_profiles_posts_ids_as_strings() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v0/profile/getmany"
        assert json.loads(request.content) == [str(CAMP3R), str(OTHER)]
        return httpx.Response(200, json=[_player(CAMP3R, "camp3r"), _player(OTHER, "other")])

    players = _make_client(handler).profiles([CAMP3R, OTHER])

    assert len(players) == 2
    assert [p.steam_id for p in players] == [CAMP3R, OTHER]


@pytest.mark.parametrize("count", [0, 101])
def test_profiles_rejects_bad_batch_size(count: int) -> None:
    calls: list[httpx.Request] = []
    ids = [CAMP3R + i for i in range(count)]

    with pytest.raises(OutOfRange):
        _make_client(_no_network(calls)).profiles(ids)

    assert calls == []


def test_profile_teams() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == f"/v0/profile/{CAMP3R}/teams"
        return httpx.Response(
            200,
            json=[
                {
                    "formatId": 3,
                    "formatName": "Sixes",
                    "regionId": 40,
                    "regionName": "NA Sixes",
                    "seasonId": 110,
                    "seasonName": "Sixes S10",
                    "startedAt": "2022-01-02T18:12:01Z",
                    "divisionId": 582,
                    "divisionName": "Invite",
                    "leftAt": None,
                    "teamName": "froyotech",
                    "teamTag": "FROYO",
                    "teamId": 7835,
                    "stats": {
                        "wins": 12,
                        "winsWithout": 0,
                        "loses": 2,
                        "losesWithout": 1,
                        "gamesPlayed": 14,
                        "gamesWithout": 1,
                    },
                }
            ],
        )

    teams = _make_client(handler).profile_teams(CAMP3R)

    assert len(teams) == 1
    assert teams[0].team_id == 7835
    assert teams[0].left_at is None
    assert teams[0].stats.games_played == 14


def test_search_players() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v0/search/players"
        assert request.url.params["take"] == "100"
        assert json.loads(request.content) == {"nameContains": "camp3r"}
        return httpx.Response(
            200, json={"results": [str(CAMP3R)], "count": 1, "totalHitCount": 1}
        )

    results = _make_client(handler).search_players("camp3r", 100, 0)

    assert results.results == [CAMP3R]
    assert results.total_hit_count == 1


def test_search_rejects_empty_name() -> None:
    calls: list[httpx.Request] = []
    client = _make_client(_no_network(calls))

    with pytest.raises(OutOfRange):
        client.search_players("", 10, 0)
    with pytest.raises(OutOfRange):
        client.search_teams("", 10, 0)

    assert calls == []


def test_match() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v0/matches/1100"
        return httpx.Response(200, json=_match(1100))

    match = _make_client(handler).match(1100)

    assert match.match_name == "Week 6 - cp_steel"
    assert match.teams[0].points == 3.0
    assert match.maps[0].map_name == "cp_steel"


@pytest.mark.parametrize("accessor", ["match", "team", "season"])
def test_id_accessors_reject_non_positive_ids(accessor: str) -> None:
    calls: list[httpx.Request] = []
    client = _make_client(_no_network(calls))

    with pytest.raises(OutOfRange):
        getattr(client, accessor)(0)
    with pytest.raises(OutOfRange):
        getattr(client, accessor)(-7)

    assert calls == []


def test_matches_posts_empty_object() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v0/matches/paged"
        assert json.loads(request.content) == {}
        return httpx.Response(200, json=[_match(1000 + i) for i in range(15)])

    matches = _make_client(handler).matches(15, 0)

    assert len(matches) == 15


def test_team() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v0/teams/7835"
        return httpx.Response(200, json={"teamId": 7835, "name": "froyotech", "players": []})

    team = _make_client(handler).team(7835)

    assert team.team_id == 7835
    assert team.name == "froyotech"


def test_search_teams() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v0/search/teams"
        assert json.loads(request.content) == {"nameContains": "froyo"}
        names = [f"froyo {i}" for i in range(10)]
        return httpx.Response(200, json={"results": names, "count": 10, "totalHitCount": 31})

    results = _make_client(handler).search_teams("froyo", 10, 0)

    assert len(results.results) == 10
    assert results.total_hit_count == 31


def test_season() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v0/seasons/50"
        return httpx.Response(
            200,
            json={
                "name": "Season 1",
                "divisionSorting": {"Invite": 1, "Advanced": 2},
                "formatName": "Sixes",
                "regionName": "NA Modern Maps Popup League",
                "maps": ["cp_steel", "koth_product"],
                "participatingTeams": [7835, 7001],
                "matchesPlayedDuringSeason": [1100],
            },
        )

    season = _make_client(handler).season(50)

    assert season.region_name == "NA Modern Maps Popup League"
    assert season.division_sorting["Advanced"] == 2


def test_upstream_rate_limit_reaches_caller() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429)

    with pytest.raises(RateLimited):
        _make_client(handler).team(7835)


def test_from_settings_uses_configured_rate_limit() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["User-Agent"] == "tests/1.0"
        assert str(request.url).startswith("https://rgl.example.test/v0/")
        return httpx.Response(200, json={"teamId": 7835})

    settings = Settings(
        base_url="https://rgl.example.test/v0",
        user_agent="tests/1.0",
        rate_limit_burst=50,
        rate_limit_interval_s=10.0,
    )
    with RglClient.from_settings(settings, http_transport=httpx.MockTransport(handler)) as client:
        assert client.http.transport.bucket.capacity == 50
        assert client.http.transport.bucket.refill_interval_s == 10.0
        assert client.team(7835).team_id == 7835


def test_null_fields_decode_to_empty_values() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v0/bans/paged":
            return httpx.Response(
                200,
                json=[{"steamId": str(CAMP3R), "alias": None, "reason": "Cheating", "expiresAt": None}],
            )
        if request.url.path == "/v0/matches/paged":
            return httpx.Response(
                200,
                json=[
                    {
                        "matchId": 1,
                        "winner": None,
                        "teams": [{"teamId": 1, "points": None, "teamName": None}],
                        "maps": [{"mapName": "cp_steel", "homeScore": None, "awayScore": None}],
                    }
                ],
            )
        return httpx.Response(
            200,
            json={"teamId": 7835, "divisionName": None, "tag": None, "players": None},
        )

    client = _make_client(handler)

    (ban,) = client.bans(1, 0)
    assert ban.alias == ""
    assert ban.reason == "Cheating"
    assert ban.expires_at is None

    (match,) = client.matches(1, 0)
    assert match.winner == 0
    assert match.teams[0].points == 0.0
    assert match.teams[0].team_name == ""
    assert match.maps[0].home_score == 0
    assert match.maps[0].away_score == 0

    team = client.team(7835)
    assert team.division_name == ""
    assert team.tag == ""
    assert team.players == []


def test_null_identifier_is_still_decode_failed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"teamId": None})

    with pytest.raises(DecodeFailed):
        _make_client(handler).team(7835)
