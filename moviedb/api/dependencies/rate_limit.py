"""Per-client request throttling for the catalog routes.

In-memory token buckets keyed by client address, refilled
continuously at RATE_LIMIT_PER_MINUTE / 60 tokens per second.
"""

import math
import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from moviedb.settings import settings


@dataclass
class TokenBucket:
    """Request allowance of one client.

    Attributes:
        tokens: Requests currently available.
        updated_at: Monotonic time of the last refill.
    """

    tokens: float
    updated_at: float = field(default_factory=time.monotonic)


class RateLimiter:
    """Thread-safe token bucket limiter.

    Attributes:
        _capacity: Burst size, equal to the per-minute limit.
        _refill_per_second: Tokens regained per second.
        _buckets: Client key to bucket mapping.
    """

    def __init__(self, requests_per_minute: int) -> None:
        self._capacity = float(requests_per_minute)
        self._refill_per_second = requests_per_minute / 60.0
        self._buckets: dict[str, TokenBucket] = {}
        self._lock = Lock()

    def acquire(self, client: str) -> float | None:
        """Take one request token for a client.

        Args:
            client: Client key, usually the IP address.

        Returns:
            None when allowed, otherwise seconds until a token frees up.
        """
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets.setdefault(client, TokenBucket(tokens=self._capacity, updated_at=now))
            elapsed = now - bucket.updated_at
            bucket.tokens = min(self._capacity, bucket.tokens + elapsed * self._refill_per_second)
            bucket.updated_at = now

            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return None
            if self._refill_per_second <= 0:
                return 60.0
            return (1.0 - bucket.tokens) / self._refill_per_second


_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the process-wide limiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter(settings.security.rate_limit_per_minute)
    return _rate_limiter


def check_rate_limit(
    request: Request,
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> None:
    """FastAPI dependency enforcing the request rate.

    Raises:
        HTTPException: 429 with Retry-After when the bucket is empty.
    """
    retry_after = limiter.acquire(client_key(request))
    if retry_after is not None:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded. Try again later.",
            headers={"Retry-After": str(math.ceil(retry_after))},
        )


def client_key(request: Request) -> str:
    """Client address, honouring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
