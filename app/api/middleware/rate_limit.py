"""Per-client fixed window rate limiting.

A client is identified by its source address. The window for a client opens
on its first request and resets once `window_seconds` have elapsed.
"""

import logging
import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger("app.rate_limit")

UNKNOWN_CLIENT_KEY = "unknown"


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of counting one request against a client's quota.

    Attributes:
        allowed: Whether the request fits in the current window.
        limit: Requests allowed per window.
        remaining: Requests left in the current window.
        reset_after_seconds: Time until the current window resets.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: float

    def rate_limit_headers(self) -> dict[str, str]:
        """Return informational headers describing the client's quota.

        Returns:
            dict[str, str]: `X-RateLimit-*` header values.
        """

        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.rate_limit_retry_after_seconds()),
        }

    def rate_limit_retry_after_seconds(self) -> int:
        """Return whole seconds until the window resets, at least one.

        Returns:
            int: Seconds to wait before retrying.
        """

        return max(1, math.ceil(self.reset_after_seconds))


class FixedWindowRateLimiter:
    """Thread-safe request counter keyed by client."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        prune_threshold: int = 10_000,
    ):
        """Initialize rate limiter.

        Args:
            max_requests: Requests allowed per client within one window.
            window_seconds: Window length in seconds.
            clock: Monotonic time source.
            prune_threshold: Tracked client count that triggers removal of expired windows.

        Raises:
            ValueError: Raised when limits are not positive.
        """

        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be greater than 0")
        if prune_threshold < 1:
            raise ValueError("prune_threshold must be at least 1")
        self._max_requests = max_requests
        self._window_seconds = float(window_seconds)
        self._clock = clock
        self._prune_threshold = prune_threshold
        self._windows: dict[str, tuple[float, int]] = {}
        self._next_prune_at = float("-inf")
        self._lock = threading.Lock()

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    def rate_limit_hit(self, client_key: str) -> RateLimitDecision:
        """Count one request for a client and decide whether it is allowed.

        Rejected requests are counted too, so a client that keeps sending
        during a window stays limited until the window resets.

        Args:
            client_key: Client identity, usually the source address.

        Returns:
            RateLimitDecision: Quota state after counting this request.
        """

        with self._lock:
            now = self._clock()
            window = self._windows.get(client_key)
            if window is None or now - window[0] >= self._window_seconds:
                window_start, request_count = now, 0
            else:
                window_start, request_count = window
            request_count += 1
            self._windows[client_key] = (window_start, request_count)
            if len(self._windows) > self._prune_threshold and now >= self._next_prune_at:
                self._rate_limit_prune_expired(now)

        return RateLimitDecision(
            allowed=request_count <= self._max_requests,
            limit=self._max_requests,
            remaining=max(0, self._max_requests - request_count),
            reset_after_seconds=max(0.0, window_start + self._window_seconds - now),
        )

    def rate_limit_tracked_clients(self) -> int:
        """Return the number of clients with a stored window.

        Returns:
            int: Tracked client count.
        """

        with self._lock:
            return len(self._windows)

    def _rate_limit_prune_expired(self, now: float) -> None:
        # Caller holds the lock. Scans run at most once per window.
        expired_keys = [
            key for key, (window_start, _) in self._windows.items() if now - window_start >= self._window_seconds
        ]
        for key in expired_keys:
            del self._windows[key]
        self._next_prune_at = now + self._window_seconds


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over the client's quota with HTTP 429."""

    def __init__(self, app: ASGIApp, rate_limiter: FixedWindowRateLimiter):
        super().__init__(app)
        if rate_limiter is None:
            raise ValueError("rate_limiter must not be None")
        self._rate_limiter = rate_limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_key = request.client.host if request.client and request.client.host else UNKNOWN_CLIENT_KEY
        decision = self._rate_limiter.rate_limit_hit(client_key)
        quota_headers = decision.rate_limit_headers()

        if not decision.allowed:
            retry_after_seconds = decision.rate_limit_retry_after_seconds()
            logger.warning(
                "Rate limit exceeded",
                extra={
                    "client_key": client_key,
                    "http_method": request.method,
                    "request_path": request.url.path,
                    "status_code": status.HTTP_429_TOO_MANY_REQUESTS,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "statusCode": status.HTTP_429_TOO_MANY_REQUESTS,
                    "error": "Too Many Requests",
                    "message": f"Rate limit exceeded, retry in {retry_after_seconds} seconds",
                },
                headers={**quota_headers, "Retry-After": str(retry_after_seconds)},
            )

        response = await call_next(request)
        for header_name, header_value in quota_headers.items():
            response.headers[header_name] = header_value
        return response
