# smartbash/constants.py
"""
Shared constants and defaults for SmartBash (Python 3.9+).

Public API
----------
- EXIT_COMMANDS: Inputs (trimmed, case-sensitive) that end the session.
- CD_COMMAND: Name of the directory-change built-in.
- WINDOW_TITLE / BANNER_SUBTITLE / BANNER_HINT: Strings shown at startup.
- HISTORY_FILE_MODE: Permission bits used when the history log is created.
- DEFAULT_CONFIG: Template configuration values (copy before mutating).
- new_default_config(): Return a deep-copied DEFAULT_CONFIG for safe mutation.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Dict, Final, Tuple

__all__ = [
    "EXIT_COMMANDS",
    "CD_COMMAND",
    "WINDOW_TITLE",
    "BANNER_SUBTITLE",
    "BANNER_HINT",
    "HISTORY_FILE_MODE",
    "USAGE_ANNOTATION",
    "DEFAULT_CONFIG",
    "new_default_config",
]

EXIT_COMMANDS: Final[Tuple[str, ...]] = ("exit", "quit")
CD_COMMAND: Final[str] = "cd"

WINDOW_TITLE: Final[str] = "Smart Bash Fuzzy"
BANNER_SUBTITLE: Final[str] = "your history suggestion"
BANNER_HINT: Final[str] = "Enter command or 'exit' to leave."

# Owner read/write only; applied by os.open when the log does not exist yet.
HISTORY_FILE_MODE: Final[int] = 0o600

# Annotation attached to history matches.
USAGE_ANNOTATION: Final[str] = "used {count} times"

# ---------------------------------------------------------------------------
# Default runtime config.
# IMPORTANT: Treat as a template; copy it before mutating at runtime.
# ---------------------------------------------------------------------------
DEFAULT_CONFIG: Final[Dict[str, object]] = {
    "history_file": "~/.bash_history",
    "shell": "bash",
    "log_level": "WARNING",
    "log_file": None,
    "show_banner": True,
}


def new_default_config() -> Dict[str, object]:
    """Return a deep copy of :data:`DEFAULT_CONFIG` for safe mutation."""
    return deepcopy(DEFAULT_CONFIG)
