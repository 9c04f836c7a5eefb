"""
logger.py
---------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

Diagnostics go to stderr so they never mix with command output.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PACKAGE = "coffee_dms"
_initialized = False


def _init_logging() -> None:
    """Attach the stderr handler to the package logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger(_PACKAGE)
    root.setLevel(logging.WARNING)
    root.addHandler(handler)
    _initialized = True


def set_level(level: str) -> None:
    """
    Change the package log level.

    Args:
        level: A level name such as ``"INFO"`` or ``"warning"``.

    Raises:
        ValueError: If the name is not a logging level.
    """
    _init_logging()
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.getLogger(_PACKAGE).setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
