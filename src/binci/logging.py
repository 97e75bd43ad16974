"""Logging configuration for binci.

User-facing output goes through rich consoles in the CLI; this module only
configures the stdlib ``binci`` logger tree used for diagnostics.

Usage:
    from binci.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("Run args: %s", args)

Enable verbose logging via:
    - CLI flag: binci --debug
    - Environment: BINCI_DEBUG=1, or BINCI_LOG_LEVEL=info
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER = "binci"

_loggers: dict[str, logging.Logger] = {}
_initialized = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_TRUTHY = ("1", "true", "yes")


def _formatter(debug: bool) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if debug else LOG_FORMAT, datefmt=DATE_FORMAT)


def _get_log_level() -> int:
    """Determine log level from environment.

    BINCI_DEBUG takes precedence over BINCI_LOG_LEVEL. Unknown level names
    fall back to WARNING.
    """
    if os.environ.get("BINCI_DEBUG", "").lower() in _TRUTHY:
        return logging.DEBUG
    name = os.environ.get("BINCI_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else logging.WARNING


def _init_logging() -> None:
    """Attach a single stderr handler to the binci root logger (once)."""
    global _initialized
    if _initialized:
        return

    level = _get_log_level()
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(_formatter(level == logging.DEBUG))
        root_logger.addHandler(handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the binci namespace.

    Args:
        name: Module name (typically __name__).
    """
    _init_logging()

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def set_debug(enabled: bool = True) -> None:
    """Switch the binci logger tree between DEBUG and WARNING.

    Called by CLI when --debug flag is used.
    """
    level = logging.DEBUG if enabled else logging.WARNING
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)
        handler.setFormatter(_formatter(enabled))
