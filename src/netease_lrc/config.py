"""Configuration settings for netease_lrc.

Every setting has a module-level default that can be overridden through an
environment variable; command-line flags override both.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigError

SEARCH_URL = "http://music.163.com/api/search/get/web"
LYRIC_URL = "http://music.163.com/api/song/lyric"

DEFAULT_TIMEOUT = 15.0
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 100

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    """Switches consulted by the lookup and the backend."""

    translation_enabled: bool = False
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT
    search_limit: int = DEFAULT_SEARCH_LIMIT

    def __post_init__(self):
        validate_settings(self)


def validate_settings(settings: Settings) -> None:
    """Validate configuration values."""
    if settings.timeout <= 0:
        raise ConfigError(f"Invalid timeout: {settings.timeout}")
    if not (1 <= settings.search_limit <= MAX_SEARCH_LIMIT):
        raise ConfigError(
            f"Invalid search limit: {settings.search_limit} (expected 1-{MAX_SEARCH_LIMIT})"
        )


def load_settings() -> Settings:
    """Build :class:`Settings` from the ``NETEASE_LRC_*`` environment variables."""
    return Settings(
        translation_enabled=_env_bool("NETEASE_LRC_TRANSLATE", False),
        debug=_env_bool("NETEASE_LRC_DEBUG", False),
        timeout=_env_number("NETEASE_LRC_TIMEOUT", DEFAULT_TIMEOUT, float),
        search_limit=_env_number("NETEASE_LRC_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT, int),
    )


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {raw!r}")


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from exc
