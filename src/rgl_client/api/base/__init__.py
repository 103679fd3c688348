from .client import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, RglHttpClient, paged_path
from .context import CallContext
from .errors import (
    BadStatus,
    DecodeFailed,
    EncodeFailed,
    OutOfRange,
    RateLimited,
    RequestFailed,
    RglError,
    RglStatusError,
    WaitFailed,
)
from .ratelimit import TokenBucket
from .transport import HttpExecutor, RateLimitedTransport

__all__ = [
    "BadStatus",
    "CallContext",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DecodeFailed",
    "EncodeFailed",
    "HttpExecutor",
    "OutOfRange",
    "RateLimited",
    "RateLimitedTransport",
    "RequestFailed",
    "RglError",
    "RglHttpClient",
    "RglStatusError",
    "TokenBucket",
    "WaitFailed",
    "paged_path",
]
