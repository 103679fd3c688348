from __future__ import annotations


class RglError(RuntimeError):
    """Base exception for RGL API client failures."""


class OutOfRange(RglError, ValueError):
    """An argument failed a precondition check; no request was attempted."""


class WaitFailed(RglError):
    """Rate-limit admission was cancelled or could not finish before the deadline."""


class RequestFailed(RglError):
    """Transport layer failure (timeouts, connection errors, protocol errors)."""


class EncodeFailed(RglError):
    """The request body could not be serialized to JSON."""


class DecodeFailed(RglError):
    """The response body was not valid JSON or did not match the expected shape."""


class RglStatusError(RglError):
    """The API answered with a status code outside the success range."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{status_code} {reason}".strip())


class RateLimited(RglStatusError):
    """Upstream throttled the request (HTTP 429)."""


class BadStatus(RglStatusError):
    """Any other non-2xx status."""
