from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RateLimitDecision:
    """Admission decision for a single request"""

    allowed: bool
    remaining: int
    retry_after: Optional[int] = None


class RateLimiter(ABC):
    """
    Abstract RateLimiter - per-client admission control.

    Implementations own their window state; the application creates one
    instance and hands it to the request pipeline.
    """

    window_seconds: float
    max_requests: int

    @abstractmethod
    def hit(self, key: str) -> RateLimitDecision:
        """Record a request for key and decide whether it is admitted"""
        pass

    @abstractmethod
    def reset(self, key: Optional[str] = None) -> None:
        """Forget recorded requests for key, or for every key"""
        pass
