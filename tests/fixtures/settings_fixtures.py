"""Environment fixtures for tests."""
import pytest
from launcher.config.settings import ApiSettings, get_api_settings, get_settings

LAUNCHER_ENV_VARS = ["APP_NAME", "HOST", "PORT", "QUEUE", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without launcher settings leaking in from the shell."""
    for name in LAUNCHER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_api_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_api_settings.cache_clear()


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings()
