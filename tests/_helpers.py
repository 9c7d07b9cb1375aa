"""Shared builders for API tests."""

from fastapi import FastAPI

from app.api.application import create_api_application
from app.api.middleware import FixedWindowRateLimiter
from app.config import AppSettings, config_validate_environment
from app.status import StaticStatusService, StatusServicePort


def build_settings(**overrides: str) -> AppSettings:
    """Create deterministic test settings independent of the process environment.

    Args:
        overrides: Environment-style values such as `PORT="4000"`.

    Returns:
        AppSettings: Validated settings with test defaults.

    Raises:
        SettingsLoadError: Raised when overrides are invalid.
    """

    return config_validate_environment({"NODE_ENV": "test", **overrides})


def build_application(
    status_service: StatusServicePort | None = None,
    rate_limiter: FixedWindowRateLimiter | None = None,
) -> FastAPI:
    """Create an application wired with test collaborators.

    Args:
        status_service: Optional service double; the static service is used when omitted.
        rate_limiter: Optional limiter; settings defaults are used when omitted.

    Returns:
        FastAPI: Application under test.
    """

    return create_api_application(
        build_settings(),
        status_service if status_service is not None else StaticStatusService(),
        rate_limiter=rate_limiter,
    )
