import math
import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

from src.app.services.rate_limiter import RateLimitDecision, RateLimiter


class InMemoryRateLimiter(RateLimiter):
    """
    Sliding window rate limiter keeping request timestamps in process memory.

    Every attempt is recorded, including rejected ones, so a client that
    keeps retrying while throttled stays throttled until it slows down.
    State is not shared between processes.
    """

    def __init__(
        self,
        window_seconds: float = 60,
        max_requests: int = 100,
        clock: Callable[[], float] = time.monotonic,
        sweep_interval: Optional[float] = None,
    ):
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._clock = clock
        self._sweep_interval = (
            sweep_interval if sweep_interval is not None else window_seconds
        )
        self._requests: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            window = self._requests.setdefault(key, deque())
            self._prune(window, now)

            allowed = len(window) < self.max_requests
            window.append(now)

            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)

            if allowed:
                return RateLimitDecision(
                    allowed=True, remaining=max(self.max_requests - len(window), 0)
                )

            # Admission resumes once enough of the window has expired to
            # bring the count back under the limit
            blocking = window[len(window) - self.max_requests]
            retry_after = max(math.ceil(blocking + self.window_seconds - now), 1)
            return RateLimitDecision(allowed=False, remaining=0, retry_after=retry_after)

    def reset(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._requests.clear()
            else:
                self._requests.pop(key, None)

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._requests)

    def _prune(self, window: Deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while window and window[0] <= cutoff:
            window.popleft()

    def _sweep(self, now: float) -> None:
        """Drop keys whose whole window has expired"""
        for key in list(self._requests):
            window = self._requests[key]
            self._prune(window, now)
            if not window:
                del self._requests[key]
        self._last_sweep = now
