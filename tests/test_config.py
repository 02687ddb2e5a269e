import pytest

from netease_lrc.config import DEFAULT_SEARCH_LIMIT, DEFAULT_TIMEOUT, Settings, load_settings
from netease_lrc.exceptions import ConfigError

_ENV_VARS = ("NETEASE_LRC_TRANSLATE", "NETEASE_LRC_DEBUG", "NETEASE_LRC_TIMEOUT", "NETEASE_LRC_SEARCH_LIMIT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.translation_enabled is False
    assert settings.debug is False
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.search_limit == DEFAULT_SEARCH_LIMIT


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NETEASE_LRC_TRANSLATE", "yes")
    monkeypatch.setenv("NETEASE_LRC_DEBUG", "1")
    monkeypatch.setenv("NETEASE_LRC_TIMEOUT", "2.5")
    monkeypatch.setenv("NETEASE_LRC_SEARCH_LIMIT", "50")
    settings = load_settings()
    assert settings.translation_enabled is True
    assert settings.debug is True
    assert settings.timeout == 2.5
    assert settings.search_limit == 50


def test_env_false_values(monkeypatch):
    monkeypatch.setenv("NETEASE_LRC_TRANSLATE", "off")
    assert load_settings().translation_enabled is False


def test_invalid_bool(monkeypatch):
    monkeypatch.setenv("NETEASE_LRC_TRANSLATE", "maybe")
    with pytest.raises(ConfigError):
        load_settings()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("NETEASE_LRC_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        load_settings()


def test_non_positive_timeout():
    with pytest.raises(ConfigError):
        Settings(timeout=0)


def test_search_limit_out_of_range():
    with pytest.raises(ConfigError):
        Settings(search_limit=0)
    with pytest.raises(ConfigError):
        Settings(search_limit=101)
