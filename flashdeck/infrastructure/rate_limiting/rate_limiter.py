"""
In-memory sliding-window rate limiter.

Each key keeps the timestamps of its recent requests. A timestamp counts
while it is strictly newer than ``now - window``, so requests age out one by
one instead of the whole window resetting at once.
"""

import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RateLimitConfig:
    """Quota of ``max_requests`` per trailing ``window_seconds``."""

    max_requests: int
    window_seconds: float

    def __post_init__(self) -> None:
        if self.max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")


class RateLimiter:
    """
    Per-key sliding-window request counter.

    Safe to share between threads: the check and the record of a request
    happen under one lock, so concurrent callers cannot both pass the last
    free slot.
    """

    def __init__(
        self, config: RateLimitConfig, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.config = config
        self._clock = clock
        self._lock = threading.Lock()
        self._requests: dict[str, deque[float]] = {}

    def _prune(self, timestamps: deque[float], now: float) -> None:
        cutoff = now - self.config.window_seconds
        while timestamps and timestamps[0] <= cutoff:
            timestamps.popleft()

    def is_rate_limited(self, key: str) -> bool:
        """
        Check the quota for ``key`` and record the request when it is allowed.

        Returns:
            True if the key already used its quota. Rejected requests are not
            recorded.
        """
        with self._lock:
            now = self._clock()
            timestamps = self._requests.setdefault(key, deque())
            self._prune(timestamps, now)

            if len(timestamps) >= self.config.max_requests:
                return True

            timestamps.append(now)
            return False

    def get_remaining_requests(self, key: str) -> int:
        """Requests ``key`` may still make in the current window. Does not record anything."""
        with self._lock:
            timestamps = self._requests.get(key)
            if not timestamps:
                return self.config.max_requests
            cutoff = self._clock() - self.config.window_seconds
            active = sum(1 for ts in timestamps if ts > cutoff)
            return max(0, self.config.max_requests - active)

    def cleanup(self) -> None:
        """Drop aged timestamps for every key and forget keys left empty."""
        with self._lock:
            now = self._clock()
            removed = 0
            for key in list(self._requests):
                timestamps = self._requests[key]
                self._prune(timestamps, now)
                if not timestamps:
                    del self._requests[key]
                    removed += 1

        if removed:
            logger.debug("rate_limiter_cleanup", removed_keys=removed)

    def reset(self) -> None:
        """Forget all recorded requests."""
        with self._lock:
            self._requests.clear()

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._requests)
