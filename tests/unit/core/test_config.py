from __future__ import annotations

import pytest

from solarops.core.config import get_config
from solarops.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_defaults(monkeypatch):
    for name in ("API_PREFIX", "LOG_LEVEL", "TRACKER_MAX_CUSTOMERS", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    cfg = get_config("development")
    assert cfg.APP_NAME == "SolarOps"
    assert cfg.API_PREFIX == "/api/v1"
    assert cfg.TRACKER_MAX_CUSTOMERS == 1000
    assert cfg.DEBUG is True
    assert cfg.is_production is False


def test_production_forces_debug_off(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    cfg = get_config("production")
    assert cfg.is_production is True
    assert cfg.DEBUG is False


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        get_config()


def test_tracker_limit_must_be_positive(monkeypatch):
    monkeypatch.setenv("TRACKER_MAX_CUSTOMERS", "0")
    with pytest.raises(ConfigurationError, match="TRACKER_MAX_CUSTOMERS"):
        get_config()


def test_api_prefix_needs_leading_slash(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "api/v1")
    with pytest.raises(ConfigurationError, match="API_PREFIX"):
        get_config()
