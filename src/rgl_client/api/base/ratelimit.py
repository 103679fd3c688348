from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any

import structlog

from .context import BACKGROUND, CallContext
from .errors import WaitFailed

logger = structlog.get_logger(__name__)


def _wait_for_event(event: threading.Event, seconds: float) -> bool:
    return event.wait(seconds)


@dataclass
class TokenBucket:
    """Client-side pacing in front of every outbound request.

    Holds at most `capacity` tokens and regains one every `refill_interval_s`
    seconds. Each admission reserves a token under the lock, letting the
    balance go negative, and then sleeps outside the lock until that token has
    accrued. Waiters are therefore admitted in the order they reserved.
    """

    capacity: int
    refill_interval_s: float

    _sleep: Any = field(default=time.sleep, repr=False)
    _monotonic: Any = field(default=time.monotonic, repr=False)
    # Returns True when the event was set before `seconds` ran out.
    _wait_cancel: Any = field(default=_wait_for_event, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.refill_interval_s <= 0.0:
            raise ValueError(f"refill_interval_s must be > 0, got {self.refill_interval_s}")
        self._tokens = float(self.capacity)
        self._last_refill: float | None = None
        self._lock = threading.Lock()

    @property
    def tokens(self) -> float:
        with self._lock:
            self._refill(float(self._monotonic()))
            return self._tokens

    def _refill(self, now: float) -> None:
        if self._last_refill is None:
            self._last_refill = now
            return
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self.capacity), self._tokens + elapsed / self.refill_interval_s)
        self._last_refill = now

    def _release(self) -> None:
        with self._lock:
            self._refill(float(self._monotonic()))
            self._tokens = min(float(self.capacity), self._tokens + 1.0)

    def _pause(self, seconds: float, ctx: CallContext) -> bool:
        # False means the caller was cancelled before the pause ran out.
        if ctx.cancel_event is None:
            self._sleep(seconds)
            return True
        return not self._wait_cancel(ctx.cancel_event, seconds)

    def acquire(self, ctx: CallContext = BACKGROUND) -> float:
        """Block until one token is available and take it.

        Returns the number of seconds spent waiting. Raises WaitFailed when the
        context is cancelled, or when its deadline is closer than the wait this
        admission would need; in both cases the token is given back.
        """
        if ctx.cancelled():
            raise WaitFailed("call cancelled before rate-limit admission")

        with self._lock:
            now = float(self._monotonic())
            self._refill(now)
            self._tokens -= 1.0
            delay = 0.0 if self._tokens >= 0.0 else -self._tokens * self.refill_interval_s

            remaining = ctx.remaining(now)
            if remaining is not None and (remaining <= 0.0 or delay > remaining):
                self._tokens += 1.0
                raise WaitFailed(
                    f"rate-limit admission needs {delay:.2f}s, deadline leaves {max(remaining, 0.0):.2f}s"
                )

        if delay > 0.0:
            logger.debug("Waiting for rate-limit admission", delay_s=round(delay, 3))
            if not self._pause(delay, ctx):
                self._release()
                raise WaitFailed("call cancelled while waiting for rate-limit admission")

        return delay
