"""Logging configuration for netease_lrc."""

import logging
import sys


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """Set up the ``netease_lrc`` logger and return it."""

    # Request lines from the HTTP client are noise next to our own debug output
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger("netease_lrc")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    if verbose:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def get_logger(name: str = "netease_lrc") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
