"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

_SETTINGS_ENVIRONMENT_NAMES = (
    "NODE_ENV",
    "PORT",
    "API_KEY",
    "DATABASE_URL",
    "APPLICATION_HOST",
    "RATE_LIMIT_MAX",
    "RATE_LIMIT_WINDOW_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_settings_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove settings variables inherited from the developer shell or CI."""

    for environment_name in _SETTINGS_ENVIRONMENT_NAMES:
        monkeypatch.delenv(environment_name, raising=False)
