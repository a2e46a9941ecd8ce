"""Shared fixtures for API and configuration tests."""

import pytest
from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings


@pytest.fixture(autouse=True)
def _isolate_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Point settings lookups at an empty directory and clear `APP_` overrides.

    Returns:
        None: Environment is patched in place for the test duration.
    """

    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    for variable_name in (
        "APP_RUN_MODE", "APP_SOME_OTHER_SETTING", "APP_APPLICATION_HOST", "APP_APPLICATION_PORT", "APP_LOG_LEVEL",
    ):
        monkeypatch.delenv(variable_name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    """Create deterministic test settings.

    Returns:
        AppSettings: Settings built from init values only.
    """

    return AppSettings(run_mode="test", some_other_setting="value")


@pytest.fixture
def client(settings: AppSettings) -> TestClient:
    """Create a test client for the fully composed application.

    Returns:
        TestClient: Client bound to a fresh application instance.
    """

    return TestClient(create_api_application(settings))
