from __future__ import annotations

import typer

from rgl_client.cli.common import run_call
from rgl_client.core.config import settings
from rgl_client.core.logging import setup_logging

app = typer.Typer(no_args_is_help=True, help="Query the RGL public API.")

TAKE_HELP = "Page size, 0 to 100."
SKIP_HELP = "Number of records to skip."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    setup_logging("DEBUG" if verbose else settings.log_level, json=settings.log_json)


@app.command("bans")
def bans_cmd(
    take: int = typer.Option(10, "--take", help=TAKE_HELP),
    skip: int = typer.Option(0, "--skip", help=SKIP_HELP),
) -> None:
    """List recent bans."""
    run_call(lambda client, ctx: client.bans(take, skip, ctx=ctx))


@app.command("profile")
def profile_cmd(
    steam_id: int = typer.Argument(..., help="SteamID64 of the player."),
) -> None:
    """Fetch one player profile."""
    run_call(lambda client, ctx: client.profile(steam_id, ctx=ctx))


@app.command("profiles")
def profiles_cmd(
    steam_ids: list[int] = typer.Argument(..., help="Up to 100 SteamID64 values."),
) -> None:
    """Fetch several player profiles in one request."""
    run_call(lambda client, ctx: client.profiles(steam_ids, ctx=ctx))


@app.command("profile-teams")
def profile_teams_cmd(
    steam_id: int = typer.Argument(..., help="SteamID64 of the player."),
) -> None:
    """List every team a player has been on."""
    run_call(lambda client, ctx: client.profile_teams(steam_id, ctx=ctx))


@app.command("search-players")
def search_players_cmd(
    name: str = typer.Argument(..., help="Part of the player name."),
    take: int = typer.Option(10, "--take", help=TAKE_HELP),
    skip: int = typer.Option(0, "--skip", help=SKIP_HELP),
) -> None:
    """Search players by name."""
    run_call(lambda client, ctx: client.search_players(name, take, skip, ctx=ctx))


@app.command("match")
def match_cmd(
    match_id: int = typer.Argument(..., help="RGL match id."),
) -> None:
    """Fetch one match."""
    run_call(lambda client, ctx: client.match(match_id, ctx=ctx))


@app.command("matches")
def matches_cmd(
    take: int = typer.Option(10, "--take", help=TAKE_HELP),
    skip: int = typer.Option(0, "--skip", help=SKIP_HELP),
) -> None:
    """List matches."""
    run_call(lambda client, ctx: client.matches(take, skip, ctx=ctx))


@app.command("team")
def team_cmd(
    team_id: int = typer.Argument(..., help="RGL team id."),
) -> None:
    """Fetch one team with its roster."""
    run_call(lambda client, ctx: client.team(team_id, ctx=ctx))


@app.command("search-teams")
def search_teams_cmd(
    name: str = typer.Argument(..., help="Part of the team name."),
    take: int = typer.Option(10, "--take", help=TAKE_HELP),
    skip: int = typer.Option(0, "--skip", help=SKIP_HELP),
) -> None:
    """Search teams by name."""
    run_call(lambda client, ctx: client.search_teams(name, take, skip, ctx=ctx))


@app.command("season")
def season_cmd(
    season_id: int = typer.Argument(..., help="RGL season id."),
) -> None:
    """Fetch a season overview."""
    run_call(lambda client, ctx: client.season(season_id, ctx=ctx))
