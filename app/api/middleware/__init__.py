"""HTTP middleware applied ahead of every route."""

from .http_logging import HttpLoggingMiddleware
from .rate_limit import FixedWindowRateLimiter, RateLimitDecision, RateLimitMiddleware
from .security_headers import DEFAULT_SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "DEFAULT_SECURITY_HEADERS",
    "FixedWindowRateLimiter",
    "HttpLoggingMiddleware",
    "RateLimitDecision",
    "RateLimitMiddleware",
    "SecurityHeadersMiddleware",
]
