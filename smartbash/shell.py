# smartbash/shell.py
"""
Command execution helpers for the SmartBash loop.

Public API
----------
- is_exit_command(text) -> bool
- change_directory(target) -> Optional[str]
- run_command(command, shell) -> Optional[int]
- execute(command, store, shell) -> Optional[rich.text.Text]
- prompt_message(home=None) -> str
- restore_terminal() -> None

Design
------
- Commands run through ``<shell> -c`` with the terminal's stdin/stdout/stderr
  inherited, so output appears as it is produced. The exit status is only
  logged.
- ``cd`` has to be handled in-process: a subshell cannot change our working
  directory.
- A successful command line is recorded in the history before it runs; a
  failed ``cd`` is not recorded.

Python: 3.9+
"""

from __future__ import annotations

import getpass
import logging
import os
import shutil
import socket
import subprocess
import sys
from typing import Optional

from rich.text import Text

from .constants import CD_COMMAND, EXIT_COMMANDS
from .history import HistoryStore
from .paths import compress_home, expand_home, home_dir

__all__ = [
    "is_exit_command",
    "change_directory",
    "run_command",
    "execute",
    "prompt_message",
    "restore_terminal",
]

logger = logging.getLogger("smartbash.shell")


# =============================================================================
# Internal helpers
# =============================================================================

def _current_user() -> str:
    user = os.getenv("USER")
    if user:
        return user
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        # cwd was removed underneath us
        return "?"


def _cd_argument(command: str) -> Optional[str]:
    """Return the ``cd`` target (``""`` for a bare ``cd``), or None if not a cd."""
    parts = command.split()
    if not parts or parts[0] != CD_COMMAND:
        return None
    return parts[1] if len(parts) > 1 else ""


# =============================================================================
# Public API
# =============================================================================

def is_exit_command(text: str) -> bool:
    """True for ``exit`` / ``quit`` (surrounding whitespace ignored)."""
    return (text or "").strip() in EXIT_COMMANDS


def change_directory(target: str) -> Optional[str]:
    """Change the working directory; return an error string on failure.

    An empty target means the home directory; ``~`` is expanded.
    """
    if not target:
        dest = home_dir()
        if dest is None:
            return "cd: HOME not set"
    else:
        dest = expand_home(target)

    try:
        os.chdir(dest)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        return f"cd: {target or dest}: {reason}"
    logger.debug("cwd -> %s", dest)
    return None


def run_command(command: str, shell: str = "bash") -> Optional[int]:
    """Run `command` with ``<shell> -c``; return its exit status.

    Returns None when the shell itself could not be started.
    """
    try:
        proc = subprocess.run([shell, "-c", command])  # noqa: S603
    except OSError as exc:
        logger.error("Could not start %s: %s", shell, exc)
        return None
    logger.debug("%r exited with %s", command, proc.returncode)
    return proc.returncode


def execute(command: str, store: HistoryStore, shell: str = "bash") -> Optional[Text]:
    """Handle one submitted line.

    Returns a short message for the user when something needs reporting
    (failed ``cd``, missing shell), otherwise None.
    """
    command = (command or "").strip()
    if not command:
        return None

    target = _cd_argument(command)
    if target is not None:
        error = change_directory(target)
        if error:
            return Text(error, style="bold red")
        store.append(command)
        return None

    store.append(command)
    if run_command(command, shell) is None:
        return Text(f"smartbash: cannot run shell '{shell}'", style="bold red")
    return None


def prompt_message(home: Optional[str] = None) -> str:
    """Return ``user@host:cwd$ `` with the home directory shown as ``~``."""
    cwd = compress_home(_current_dir(), home)
    return f"{_current_user()}@{socket.gethostname()}:{cwd}$ "


def restore_terminal() -> None:
    """Put the terminal back in cooked mode with echo on."""
    try:
        interactive = sys.stdin is not None and sys.stdin.isatty()
    except (AttributeError, ValueError, OSError):
        interactive = False
    if not interactive or shutil.which("stty") is None:
        return
    try:
        subprocess.run(["stty", "-raw", "echo"], stdin=sys.stdin, check=False)  # noqa: S603,S607
    except OSError as exc:
        logger.debug("stty failed: %s", exc)
