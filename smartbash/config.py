# smartbash/config.py
"""
Runtime configuration for SmartBash.

Values are resolved in this order (later wins):

1. :data:`smartbash.constants.DEFAULT_CONFIG`
2. Environment variables (a ``.env`` in the working directory is loaded
   first without overriding real exports)
3. Explicit overrides passed to :func:`load_config` (``None`` means "unset")

Environment variables
---------------------
SMARTBASH_HISTFILE   Path of the persisted history log.
SMARTBASH_SHELL      Shell executable used to run commands.
SMARTBASH_LOG_LEVEL  Logging level name (DEBUG, INFO, ...).
SMARTBASH_LOG_FILE   Optional log file path.
SMARTBASH_NO_BANNER  Truthy value suppresses the startup banner.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import new_default_config

__all__ = ["Config", "load_config"]

_ENV_KEYS: Dict[str, str] = {
    "SMARTBASH_HISTFILE": "history_file",
    "SMARTBASH_SHELL": "shell",
    "SMARTBASH_LOG_LEVEL": "log_level",
    "SMARTBASH_LOG_FILE": "log_file",
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Resolved settings for one session."""

    history_file: str
    shell: str
    log_level: str
    log_file: Optional[str]
    show_banner: bool

    @property
    def history_path(self) -> Path:
        return Path(os.path.expanduser(self.history_file))


def _validate_level(name: str) -> str:
    level = str(name).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def load_config(env: Optional[Mapping[str, str]] = None, **overrides: Any) -> Config:
    """Build a :class:`Config` from defaults, environment and overrides.

    Parameters
    ----------
    env : Mapping[str, str], optional
        Environment to read from. Defaults to ``os.environ`` after loading a
        ``.env`` file; tests pass an explicit mapping.
    **overrides
        Keyword values for any :class:`Config` field. ``None`` is ignored.

    Raises
    ------
    ValueError
        If the resolved log level is not a known logging level name.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ

    values = new_default_config()
    for var, key in _ENV_KEYS.items():
        raw = env.get(var)
        if raw is not None and raw.strip():
            values[key] = raw.strip()
    no_banner = env.get("SMARTBASH_NO_BANNER")
    if no_banner is not None and no_banner.strip().lower() in _TRUTHY:
        values["show_banner"] = False

    for key, value in overrides.items():
        if key not in values:
            raise TypeError(f"Unknown config option: {key}")
        if value is not None:
            values[key] = value

    values["log_level"] = _validate_level(values["log_level"])
    return Config(**values)
