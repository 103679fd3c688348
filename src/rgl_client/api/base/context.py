from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class CallContext:
    """
    Cancellation and deadline for a single API call.

    `deadline` is a monotonic timestamp (same clock as the token bucket).
    Setting `cancel_event` from another thread aborts an admission wait.
    """

    deadline: float | None = None
    cancel_event: threading.Event | None = None

    @classmethod
    def with_timeout(
        cls,
        seconds: float,
        *,
        cancel_event: threading.Event | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> CallContext:
        return cls(deadline=clock() + seconds, cancel_event=cancel_event)

    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def remaining(self, now: float) -> float | None:
        if self.deadline is None:
            return None
        return self.deadline - now


BACKGROUND = CallContext()
