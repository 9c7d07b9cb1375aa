"""Configuration package for runtime settings and startup validation."""

from .settings import (
    AppSettings,
    SettingsLoadError,
    config_describe_validation_errors,
    config_load_settings,
    config_validate_environment,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_describe_validation_errors",
    "config_load_settings",
    "config_validate_environment",
]
