"""
Environment-driven settings: defaults and rejection of bad durations.
"""

import importlib

import pytest

import config

_VARS = ["SESSION_TTL_SECS", "REAPER_INTERVAL_SECS", "CORS_ORIGINS", "LOG_LEVEL", "HOST", "PORT"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # Restore the module for the rest of the suite once the env is reset.
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(clean_env):
    importlib.reload(config)

    assert config.SESSION_TTL_SECS == 30
    assert config.REAPER_INTERVAL_SECS == 86400
    assert config.PORT == 3030
    assert config.HOST == "127.0.0.1"
    assert config.LOG_LEVEL == "INFO"
    assert config.CORS_ORIGINS == ["http://localhost:5173"]
    assert config.SESSION_COOKIE_NAME == "session_id"


def test_overrides_are_read(clean_env):
    clean_env.setenv("SESSION_TTL_SECS", "5")
    clean_env.setenv("REAPER_INTERVAL_SECS", "0.5")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    clean_env.setenv("LOG_LEVEL", "debug")
    importlib.reload(config)

    assert config.SESSION_TTL_SECS == 5
    assert config.REAPER_INTERVAL_SECS == 0.5
    assert config.CORS_ORIGINS == ["https://a.example", "https://b.example"]
    assert config.LOG_LEVEL == "DEBUG"


def test_blank_value_falls_back_to_default(clean_env):
    clean_env.setenv("SESSION_TTL_SECS", "  ")
    importlib.reload(config)
    assert config.SESSION_TTL_SECS == 30


@pytest.mark.parametrize("name", ["SESSION_TTL_SECS", "REAPER_INTERVAL_SECS"])
@pytest.mark.parametrize("raw", ["soon", "-1", "nan", "inf", "-inf"])
def test_bad_duration_names_the_variable(clean_env, name, raw):
    clean_env.setenv(name, raw)
    with pytest.raises(ValueError, match=name):
        importlib.reload(config)


def test_zero_reaper_interval_is_rejected(clean_env):
    clean_env.setenv("REAPER_INTERVAL_SECS", "0")
    with pytest.raises(ValueError, match="REAPER_INTERVAL_SECS"):
        importlib.reload(config)


def test_zero_ttl_is_allowed(clean_env):
    clean_env.setenv("SESSION_TTL_SECS", "0")
    importlib.reload(config)
    assert config.SESSION_TTL_SECS == 0
