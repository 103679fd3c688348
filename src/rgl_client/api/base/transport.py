from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx
import structlog

from .context import BACKGROUND, CallContext
from .errors import RequestFailed, WaitFailed
from .ratelimit import TokenBucket

logger = structlog.get_logger(__name__)

DEFAULT_REQUEST_TIMEOUT_S = 15.0


class HttpExecutor(Protocol):
    """Anything that can send a prepared request. httpx.Client satisfies this."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


class RateLimitedTransport:
    """
    Gateway in front of all outbound requests.

    - Every request waits for token-bucket admission before it is sent.
    - The executor is injected, so tests can hand in a fake or an httpx.Client
      backed by httpx.MockTransport.
    - The request timeout is stamped on each request and does not include the
      admission wait.
    """

    def __init__(
        self,
        *,
        executor: HttpExecutor,
        bucket: TokenBucket,
        request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
    ) -> None:
        self.executor = executor
        self.bucket = bucket
        self.request_timeout_s = request_timeout_s

    @classmethod
    def create(
        cls,
        *,
        burst: int,
        interval_s: float,
        request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
        http_transport: httpx.BaseTransport | None = None,
    ) -> RateLimitedTransport:
        executor = httpx.Client(
            timeout=httpx.Timeout(request_timeout_s),
            transport=http_transport,
        )
        return cls(
            executor=executor,
            bucket=TokenBucket(capacity=burst, refill_interval_s=interval_s),
            request_timeout_s=request_timeout_s,
        )

    def close(self) -> None:
        close = getattr(self.executor, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> RateLimitedTransport:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def build_request(
        self,
        method: str,
        url: str | httpx.URL,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Request:
        return httpx.Request(
            method,
            url,
            headers=headers,
            content=content,
            extensions={"timeout": httpx.Timeout(self.request_timeout_s).as_dict()},
        )

    def send(self, request: httpx.Request, *, ctx: CallContext = BACKGROUND) -> httpx.Response:
        """
        Wait for admission, then hand the request to the executor.
        Raises WaitFailed if admission is interrupted (nothing is sent) and
        RequestFailed if the executor fails. The token is spent either way once
        admission succeeds.
        """
        try:
            waited = self.bucket.acquire(ctx)
        except WaitFailed as e:
            logger.warning(
                "Rate-limit admission failed", method=request.method, url=str(request.url), error=str(e)
            )
            raise

        logger.debug(
            "Sending request", method=request.method, url=str(request.url), waited_s=round(waited, 3)
        )
        try:
            return self.executor.send(request)
        except httpx.HTTPError as e:
            raise RequestFailed(f"{request.method} {request.url} failed: {e}") from e
