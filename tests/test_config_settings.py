"""Tests for settings loading from `settings.toml` and `APP_` environment overrides."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from app.config import AppSettings, SettingsLoadError, config_load_settings, config_resolve_settings_path


def _write_settings_file(directory: Path, content: str) -> Path:
    """Write a settings file into the target directory.

    Args:
        directory: Directory that will contain `settings.toml`.
        content: TOML document text.

    Returns:
        Path: Written file path.
    """

    settings_path = directory / "settings.toml"
    settings_path.write_text(content, encoding="utf-8")
    return settings_path


def test_config_load_settings_fails_for_nonexistent_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise a load error naming the missing file.

    Returns:
        None: Assertions validate error behavior.

    Raises:
        AssertionError: Raised when loading does not fail.
    """

    monkeypatch.setenv("CONFIG_DIR", "/non/existent/directory")

    with pytest.raises(SettingsLoadError, match="/non/existent/directory"):
        config_load_settings()


def test_config_load_settings_round_trips_file_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Load both required keys unchanged from a valid settings file."""

    _write_settings_file(tmp_path, 'run_mode = "test"\nsome_other_setting = "value"\n')
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))

    settings = config_load_settings()

    assert settings.run_mode == "test"
    assert settings.some_other_setting == "value"
    assert settings.application_host == "127.0.0.1"
    assert settings.application_port == 3000
    assert settings.log_level == "INFO"


def test_config_load_settings_applies_environment_overrides(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Prefer `APP_` environment variables over file values."""

    _write_settings_file(tmp_path, 'run_mode = "test"\nsome_other_setting = "value"\napplication_port = 8080\n')
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("APP_RUN_MODE", "env_value")
    monkeypatch.setenv("APP_LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.run_mode == "env_value"
    assert settings.some_other_setting == "value"
    assert settings.application_port == 8080
    assert settings.log_level == "DEBUG"


def test_config_load_settings_fails_when_required_key_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Wrap validation errors for a file lacking a required key."""

    _write_settings_file(tmp_path, 'run_mode = "test"\n')
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))

    with pytest.raises(SettingsLoadError, match="some_other_setting") as error_info:
        config_load_settings()

    assert isinstance(error_info.value.__cause__, ValidationError)


def test_config_load_settings_fails_for_unparseable_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Reject values that cannot be coerced to their declared types."""

    _write_settings_file(
        tmp_path,
        'run_mode = "test"\nsome_other_setting = "value"\napplication_port = "not-a-port"\n',
    )
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))

    with pytest.raises(SettingsLoadError, match="application_port"):
        config_load_settings()


def test_config_resolve_settings_path_defaults_to_current_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve `./settings.toml` when `CONFIG_DIR` is unset."""

    monkeypatch.delenv("CONFIG_DIR", raising=False)

    assert config_resolve_settings_path() == Path(".") / "settings.toml"


def test_app_settings_rejects_unknown_log_level() -> None:
    """Reject log level names outside the standard logging levels."""

    with pytest.raises(ValidationError):
        AppSettings(run_mode="test", some_other_setting="value", log_level="verbose")


def test_config_load_settings_keeps_required_values_unchanged(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Load padded and empty string values exactly as written in the file."""

    _write_settings_file(tmp_path, 'run_mode = "  dev  "\nsome_other_setting = ""\n')
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))

    settings = config_load_settings()

    assert settings.run_mode == "  dev  "
    assert settings.some_other_setting == ""


def test_config_load_settings_fails_for_malformed_toml(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Wrap TOML syntax errors in a load error naming the file."""

    settings_path = _write_settings_file(tmp_path, 'run_mode = "test\nsome_other_setting = "value"\n')
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))

    with pytest.raises(SettingsLoadError, match="could not be read") as error_info:
        config_load_settings()

    assert str(settings_path) in str(error_info.value)
    assert isinstance(error_info.value.__cause__, tomllib.TOMLDecodeError)


def test_app_settings_are_immutable() -> None:
    """Refuse attribute assignment after load."""

    settings = AppSettings(run_mode="test", some_other_setting="value")

    with pytest.raises(ValidationError):
        settings.run_mode = "changed"
