class NeteaseLrcError(Exception):
    """Base exception for netease_lrc."""


class FetchError(NeteaseLrcError):
    """Raised when an HTTP request fails or returns an empty body.

    ``status_code`` is 0 for transport errors and for empty 200 responses.
    """

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(NeteaseLrcError):
    """Raised when a backend response body is not the JSON document we expect."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Parse error for {url}: {reason}")


class ConfigError(NeteaseLrcError):
    """Raised when a configuration value is invalid."""
