"""Typed runtime settings loaded from `settings.toml` with environment overrides."""

import os
import tomllib
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

SETTINGS_FILE_NAME = "settings.toml"
CONFIG_DIR_ENV_VAR = "CONFIG_DIR"
ENV_PREFIX = "APP_"

_LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


def config_resolve_settings_path() -> Path:
    """Resolve the settings file path from `CONFIG_DIR`.

    Returns:
        Path: `$CONFIG_DIR/settings.toml`, with `CONFIG_DIR` defaulting to the current directory.
    """

    config_dir = os.environ.get(CONFIG_DIR_ENV_VAR) or "."
    return Path(config_dir) / SETTINGS_FILE_NAME


class AppSettings(BaseSettings):
    """Application settings for API runtime.

    Values are read from `settings.toml` and overridden by environment
    variables prefixed with `APP_`. Example: `run_mode` reads from
    `APP_RUN_MODE` before falling back to the TOML file.

    Attributes:
        run_mode: Runtime mode label such as `development` or `production`.
        some_other_setting: Free-form placeholder setting.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    run_mode: str
    some_other_setting: str
    application_host: str = Field(default="127.0.0.1", min_length=1)
    application_port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        _ = (dotenv_settings, file_secret_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=config_resolve_settings_path()),
        )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVEL_NAMES)}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from `settings.toml` and environment.

    Returns:
        AppSettings: Validated, immutable runtime settings object.

    Raises:
        SettingsLoadError: Raised when the settings file is missing or values are invalid.
    """

    settings_path = config_resolve_settings_path()
    if not settings_path.is_file():
        raise SettingsLoadError(
            f"Startup configuration file not found: {settings_path}. "
            f"Create it or point {CONFIG_DIR_ENV_VAR} at the directory that contains it."
        )

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update {settings_path} or {ENV_PREFIX}* "
            f"environment variables. Details: {error}"
        ) from error
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as error:
        raise SettingsLoadError(
            f"Startup configuration file could not be read: {settings_path}. Details: {error}"
        ) from error
