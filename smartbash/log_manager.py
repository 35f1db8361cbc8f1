# smartbash/log_manager.py
"""
Centralized logger factory for SmartBash.

This module provides a single entry point, :func:`get_logger`, that returns a
configured :class:`logging.Logger`. It supports:
- Colored console logs via `colorlog` when stderr is a TTY
- Plain console logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (prevents duplicate handlers)

Console records go to stderr so they never interleave with the output of
commands the user runs through the shell.

Environment variables
---------------------
SMARTBASH_FORCE_COLOR=true|false
    Force colored logging on or off regardless of whether stderr is a TTY.

Python: 3.9+
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional, Union

import colorlog

__all__ = ["get_logger", "ROOT_LOGGER_NAME"]

ROOT_LOGGER_NAME = "smartbash"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("SMARTBASH_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _build_colored_stream_handler() -> logging.Handler:
    handler = colorlog.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=_COLOR_FMT,
            datefmt=_PLAIN_DATEFMT,
            log_colors=_LEVEL_COLORS,
        )
    )
    return handler


def _build_plain_stream_handler() -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger) -> None:
    """Attach a single stream handler to `logger` if not already attached."""
    if getattr(logger, "_smartbash_stream_handler_attached", False):
        return
    handler = _build_colored_stream_handler() if _should_use_color() else _build_plain_stream_handler()
    logger.addHandler(handler)
    logger._smartbash_stream_handler_attached = True  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path per logger."""
    log_file_path = os.path.abspath(os.path.expanduser(log_to_file))
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Union[int, str] = logging.WARNING,
    log_to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "smartbash"
        Logger name. Modules log through children of this logger
        (``smartbash.history``, ``smartbash.paths``...) which inherit its
        handlers.
    level : int or str, default logging.WARNING
        Log level for this logger; level names such as ``"DEBUG"`` are accepted.
    log_to_file : Optional[str], default None
        Optional filesystem path for file logging.

    Returns
    -------
    logging.Logger
        A configured logger instance with ``propagate = False``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    _attach_stream_handler(logger)
    if log_to_file:
        _attach_file_handler(logger, log_to_file)

    logger.propagate = False
    return logger
