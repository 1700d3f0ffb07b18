"""Logging configuration for the chat shell.

Attaches a single handler to the "chatcmd" logger: a file handler when a
log file is configured, otherwise stderr. The REPL draws on the terminal,
so the default level from the config is ERROR.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "chatcmd"

# Module-level state
_handler: Optional[logging.Handler] = None
_log_path: Optional[Path] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(
    log_file: Union[str, Path, None] = None,
    level: Union[int, str] = logging.ERROR,
) -> Optional[Path]:
    """Configure logging for the chatcmd package.

    Replaces any handler installed by a previous call.

    Args:
        log_file: Append logs to this file; log to stderr when None
        level: Logging level, as an int or a level name

    Returns:
        Path to the log file, or None when logging to stderr
    """
    global _handler, _log_path

    close_logging()
    level = _resolve_level(level)

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        _log_path = path
    else:
        handler = logging.StreamHandler(sys.stderr)
        _log_path = None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    _handler = handler

    logger.debug("=== Logging configured ===")
    return _log_path


def close_logging() -> None:
    """Detach and close the handler installed by configure_logging."""
    global _handler, _log_path

    if _handler is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
        _log_path = None


def get_log_path() -> Optional[Path]:
    """Get the active log file path, or None if not logging to a file."""
    return _log_path
