import pytest
from loguru import logger

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.enums.platform import HostPlatform

# Disable logging to keep output clean
logger.remove()


@pytest.fixture(autouse=True)
def clean_desktop_env(monkeypatch):
    """Start every test without XDG_CURRENT_DESKTOP set."""
    monkeypatch.delenv(cnst.XDG_CURRENT_DESKTOP_VAR, raising=False)


@pytest.fixture
def host_platform(monkeypatch):
    """Return a setter that pretends the process runs on the given host."""

    def _set(platform: HostPlatform) -> None:
        monkeypatch.setattr(cnst, "HOST_PLATFORM", platform)

    return _set


@pytest.fixture
def xdg_host(host_platform):
    host_platform(HostPlatform.OTHER)


@pytest.fixture
def mock_xdg(tmp_path, monkeypatch):
    """Set up isolated config and state directories."""
    config_dir = tmp_path / ".config" / cnst.APPLICATION_NAME
    state_dir = tmp_path / ".local" / "state" / cnst.APPLICATION_NAME

    monkeypatch.setattr(cnst, "APP_CONFIG_DIR", config_dir)
    monkeypatch.setattr(
        cnst, "APP_CONFIG_FILE", config_dir / (cnst.APPLICATION_NAME + ".json")
    )
    monkeypatch.setattr(cnst, "APP_STATE_DIR", state_dir)
    monkeypatch.setattr(cnst, "APP_LOG_DIR", state_dir / "logs")

    yield tmp_path

    logger.remove()
