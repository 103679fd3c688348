from rgl_client.api.base import (
    BadStatus,
    CallContext,
    DecodeFailed,
    EncodeFailed,
    OutOfRange,
    RateLimited,
    RateLimitedTransport,
    RequestFailed,
    RglError,
    RglHttpClient,
    RglStatusError,
    TokenBucket,
    WaitFailed,
)
from rgl_client.api.client import RglClient

__all__ = [
    "BadStatus",
    "CallContext",
    "DecodeFailed",
    "EncodeFailed",
    "OutOfRange",
    "RateLimited",
    "RateLimitedTransport",
    "RequestFailed",
    "RglClient",
    "RglError",
    "RglHttpClient",
    "RglStatusError",
    "TokenBucket",
    "WaitFailed",
]
