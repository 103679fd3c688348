from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from .context import BACKGROUND, CallContext
from .errors import BadStatus, DecodeFailed, EncodeFailed, RateLimited, RequestFailed
from .transport import RateLimitedTransport

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.rgl.gg/v0"
DEFAULT_USER_AGENT = "rgl-client/1.0"

# Inclusive success range, 200 OK through 226 IM Used.
_SUCCESS_MIN = 200
_SUCCESS_MAX = 226


def paged_path(path: str, take: int, skip: int) -> str:
    """Append `take`/`skip` paging parameters to a relative path. Callers validate the range."""
    params = httpx.QueryParams({"take": take, "skip": skip})
    return f"{path}?{params}"


@lru_cache(maxsize=None)
def _adapter(receiver: Any) -> TypeAdapter[Any]:
    return TypeAdapter(receiver)


def _encode_body(body: Any) -> bytes:
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True).encode("utf-8")
        return _adapter(Any).dump_json(body, by_alias=True)
    except (TypeError, ValueError) as e:
        raise EncodeFailed(f"Failed to serialize request body of type {type(body).__name__}") from e


@dataclass
class RglHttpClient:
    """
    Typed call dispatcher.

    Builds requests against `base_url`, sends them through the rate-limited
    transport, classifies the status code and decodes the JSON body into the
    requested receiver type.
    """

    transport: RateLimitedTransport
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> RglHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def url_for(self, path: str) -> httpx.URL:
        return httpx.URL(self.base_url.rstrip("/") + "/" + path.lstrip("/"))

    def call(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        receiver: type[T] | Any,
        ctx: CallContext = BACKGROUND,
    ) -> T:
        """
        Perform one API call and return the body decoded as `receiver`.

        Raises EncodeFailed, WaitFailed, RequestFailed, RateLimited (429),
        BadStatus (outside 200..226) or DecodeFailed. Nothing is retried.
        """
        content = _encode_body(body) if body is not None else None

        request = self.transport.build_request(
            method,
            self.url_for(path),
            headers={
                "User-Agent": self.user_agent,
                "Content-Type": "application/json",
            },
            content=content,
        )

        response = self.transport.send(request, ctx=ctx)
        try:
            if response.status_code == 429:
                logger.warning("Upstream rate limited the request", method=method, path=path)
                raise RateLimited(response.status_code, response.reason_phrase)

            if not _SUCCESS_MIN <= response.status_code <= _SUCCESS_MAX:
                logger.info(
                    "Unexpected status code", method=method, path=path, status=response.status_code
                )
                raise BadStatus(response.status_code, response.reason_phrase)

            try:
                raw = response.read()
            except httpx.HTTPError as e:
                raise RequestFailed(f"Failed to read {method} {path} response: {e}") from e

            try:
                return _adapter(receiver).validate_json(raw)
            except ValidationError as e:
                raise DecodeFailed(f"Failed to decode {method} {path} response: {e}") from e
        finally:
            response.close()
