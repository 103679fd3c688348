from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import typer
from pydantic import TypeAdapter

from rgl_client.api.base.context import BACKGROUND, CallContext
from rgl_client.api.base.errors import RglError
from rgl_client.api.client import RglClient
from rgl_client.core.config import settings


@contextmanager
def client_scope() -> Iterator[RglClient]:
    """
    Context-managed API client for CLI commands.
    Ensures the underlying HTTP connection pool is closed.
    """
    client = RglClient.from_settings(settings)
    try:
        yield client
    finally:
        client.close()


def default_context() -> CallContext:
    if settings.wait_timeout_s is None:
        return BACKGROUND
    return CallContext.with_timeout(settings.wait_timeout_s)


def echo_json(value: Any) -> None:
    typer.echo(TypeAdapter(Any).dump_json(value, indent=2, by_alias=True).decode("utf-8"))


def run_call(call: Callable[[RglClient, CallContext], Any]) -> None:
    """Run one API call, print the result as JSON, exit 1 on any client error."""
    try:
        with client_scope() as client:
            result = call(client, default_context())
    except RglError as e:
        typer.echo(f"error: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1) from e

    echo_json(result)
