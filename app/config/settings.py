"""Typed runtime settings with dotenv support and startup validation."""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, AliasChoices, AnyUrl, Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RuntimeEnvironment = Literal["development", "production", "test"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_URI_ADAPTER = TypeAdapter(AnyUrl)


def _config_check_uri(value: str) -> str:
    # Shape check only; the value is kept exactly as given.
    try:
        _URI_ADAPTER.validate_python(value)
    except ValidationError as error:
        raise ValueError("value must be a well-formed URI") from error
    return value


UriString = Annotated[str, AfterValidator(_config_check_uri)]


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated.

    Attributes:
        errors: One `<ENV_NAME>: <reason>` entry per violated constraint.
    """

    def __init__(self, message: str, errors: tuple[str, ...] = ()):
        super().__init__(message)
        self.errors = errors


class AppSettings(BaseSettings):
    """Application settings for the HTTP runtime.

    Each field reads from the uppercase environment variable named in its
    validation alias. Example: `node_env` reads from `NODE_ENV`.

    Attributes:
        node_env: Runtime environment label.
        port: Web server port.
        api_key: Optional API key, never logged.
        database_url: Optional database URI, validated for shape only.
        application_host: Host interface for web server binding.
        rate_limit_max: Requests allowed per client within one window.
        rate_limit_window_seconds: Rate limit window length.
        log_level: Root logger level.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    node_env: RuntimeEnvironment = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "node_env"),
    )
    port: int = Field(default=3000, ge=1, le=65535, validation_alias=AliasChoices("PORT", "port"))
    api_key: str | None = Field(default=None, validation_alias=AliasChoices("API_KEY", "api_key"))
    database_url: UriString | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )
    application_host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("APPLICATION_HOST", "application_host"),
    )
    rate_limit_max: int = Field(
        default=100,
        ge=1,
        validation_alias=AliasChoices("RATE_LIMIT_MAX", "rate_limit_max"),
    )
    rate_limit_window_seconds: float = Field(
        default=60.0,
        gt=0,
        validation_alias=AliasChoices("RATE_LIMIT_WINDOW_SECONDS", "rate_limit_window_seconds"),
    )
    log_level: LogLevelName = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    @field_validator("api_key", "database_url", mode="before")
    @classmethod
    def _validate_optional_blank_as_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level_case(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def config_describe_validation_errors(error: ValidationError) -> tuple[str, ...]:
    """Render one operator-facing line per violated settings constraint.

    Args:
        error: Validation error raised by the settings model.

    Returns:
        tuple[str, ...]: Lines formatted as `<ENV_NAME>: <reason>`.
    """

    described_errors = []
    for entry in error.errors():
        location = entry.get("loc") or ("settings",)
        described_errors.append(f"{str(location[0]).upper()}: {entry['msg']}")
    return tuple(described_errors)


def _config_build_error(error: ValidationError) -> SettingsLoadError:
    described_errors = config_describe_validation_errors(error)
    return SettingsLoadError(
        "Startup configuration validation failed. Update .env or environment variables. "
        f"Details: {'; '.join(described_errors)}",
        errors=described_errors,
    )


def config_validate_environment(environment: Mapping[str, str | None]) -> AppSettings:
    """Validate an explicit environment mapping and apply defaults.

    Only the given mapping is read; the process environment and `.env` are
    ignored. Keys whose value is None count as absent and unknown keys are
    tolerated.

    Args:
        environment: Environment variable names mapped to raw values.

    Returns:
        AppSettings: Normalized settings object.

    Raises:
        SettingsLoadError: Raised when one or more constraints are violated.
    """

    present_values = {key: value for key, value in environment.items() if value is not None}
    try:
        return AppSettings.model_validate(present_values)
    except ValidationError as error:
        raise _config_build_error(error) from error


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise _config_build_error(error) from error
