"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.api import create_api_application
from app.api.middleware import FixedWindowRateLimiter
from app.config import AppSettings, config_load_settings
from app.status import StaticStatusService


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Already validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if settings is None:
        settings = config_load_settings()
    rate_limiter = FixedWindowRateLimiter(
        max_requests=settings.rate_limit_max,
        window_seconds=settings.rate_limit_window_seconds,
    )
    return create_api_application(
        settings=settings,
        status_service=StaticStatusService(),
        rate_limiter=rate_limiter,
    )
