"""In-memory sliding-window rate limiter.

Counters live in the process, so each worker limits independently.
"""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """At most ``calls`` requests per ``window`` seconds."""

    calls: int
    window: int


CONTACT_RATE_LIMIT = RateLimitConfig(calls=3, window=15 * 60)


class RateLimiter:
    def __init__(self, config: RateLimitConfig, timer: Callable[[], float] = time.monotonic) -> None:
        self.config = config
        self._timer = timer
        self._requests: dict[str, list[float]] = defaultdict(list)

    def _clean(self, key: str) -> None:
        cutoff = self._timer() - self.config.window
        self._requests[key] = [ts for ts in self._requests[key] if ts > cutoff]

    def check(self, key: str) -> tuple[bool, int]:
        """Return (allowed, remaining calls after this one)."""
        self._clean(key)
        count = len(self._requests[key])
        if count >= self.config.calls:
            return False, 0
        return True, self.config.calls - count - 1

    def record(self, key: str) -> None:
        self._requests[key].append(self._timer())

    def reset(self, key: Optional[str] = None) -> None:
        if key is None:
            self._requests.clear()
        else:
            self._requests.pop(key, None)


__all__ = ["CONTACT_RATE_LIMIT", "RateLimitConfig", "RateLimiter"]
