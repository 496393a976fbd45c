import pytest

from maven_essentials.main import MavenEssentialsApplication

SETTINGS_ENV_VARS = (
    "APPLICATION_NAME",
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_STARTUP_TIMEOUT_SECONDS",
    "MAIN_WEB_APPLICATION_TYPE",
    "MAIN_REGISTER_SHUTDOWN_HOOK",
    "LOGGING_LEVEL_ROOT",
    "CORS_ALLOWED_ORIGINS",
    "TIMEZONE",
    "CONFIG_ENV_FILE",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test in an empty directory with no settings in the environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def definition():
    return MavenEssentialsApplication
