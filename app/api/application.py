"""FastAPI application factory.

Middleware is installed before routers so every route, including unmatched
paths, passes through header hardening and rate limiting.
"""

from fastapi import FastAPI

from app.config import AppSettings
from app.status import StatusServicePort

from .middleware import (
    FixedWindowRateLimiter,
    HttpLoggingMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from .routers import api_create_health_router, api_create_root_router


def create_api_application(
    settings: AppSettings,
    status_service: StatusServicePort,
    rate_limiter: FixedWindowRateLimiter | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Starlette runs the last registered middleware first, so requests flow
    through request logging, header hardening, then rate limiting. Rejected
    429 responses therefore still carry hardened headers and are logged.

    Args:
        settings: Validated application settings.
        status_service: Service providing greeting and health responses.
        rate_limiter: Optional limiter; built from settings when omitted.

    Returns:
        FastAPI: Application with middleware and routes registered.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if rate_limiter is None:
        rate_limiter = FixedWindowRateLimiter(
            max_requests=settings.rate_limit_max,
            window_seconds=settings.rate_limit_window_seconds,
        )

    application = FastAPI(title="Hello Service", docs_url=None, redoc_url=None, openapi_url=None)

    application.add_middleware(RateLimitMiddleware, rate_limiter=rate_limiter)
    application.add_middleware(SecurityHeadersMiddleware, content_security_policy=None)
    application.add_middleware(HttpLoggingMiddleware)

    application.include_router(api_create_root_router(status_service=status_service))
    application.include_router(api_create_health_router(status_service=status_service))

    return application
