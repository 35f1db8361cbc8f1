# smartbash/paths.py
"""
Filesystem path completion.

Public API
----------
- home_dir() -> Optional[str]
- expand_home(token, home=None) -> str
- compress_home(path, home=None) -> str
- suggest_paths(prefix, raw_token, home=None) -> List[Suggestion]

Behavior
--------
Given the path fragment under the cursor, list the directory it points into,
keep the entries whose name starts with the fragment's last component and
rebuild full suggestions. Directories get a trailing separator so the user
can keep completing. A token typed with ``~`` keeps its ``~`` in the
suggestions.

Unreadable or missing directories produce no suggestions: this happens on
nearly every keystroke while a path is being typed, so it is logged at DEBUG
and never shown to the user.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from .models import Suggestion

__all__ = ["home_dir", "expand_home", "compress_home", "suggest_paths"]

logger = logging.getLogger("smartbash.paths")


def home_dir() -> Optional[str]:
    """Return the current user's home directory, or None if it is unknown."""
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError):
        return None
    return None if home in ("", "~") else home


_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)


def _is_home_shorthand(token: str) -> bool:
    return token == "~" or (token[:1] == "~" and token[1:2] in _SEPARATORS)


def expand_home(token: str, home: Optional[str] = None) -> str:
    """Expand a leading ``~`` or ``~/``; leave the token alone on failure.

    ``~user`` forms are not expanded.
    """
    if not _is_home_shorthand(token):
        return token
    home = home if home is not None else home_dir()
    if not home:
        return token
    return home.rstrip(os.sep) + token[1:] if token != "~" else home


def _under(path: str, home: str) -> Optional[str]:
    """Return `path` relative to `home` ("" for home itself), or None."""
    base = home.rstrip(os.sep)
    if path == home or path == base:
        return ""
    if path.startswith(base + os.sep):
        return path[len(base) + 1 :]
    return None


def compress_home(path: str, home: Optional[str] = None) -> str:
    """Render `path` with the home directory replaced by ``~``."""
    home = home if home is not None else home_dir()
    if not home:
        return path
    rel = _under(path, home)
    if rel is None:
        return path
    return "~" + os.sep + rel if rel else "~"


def _list_dir(directory: str) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Path completion: %s not found", directory)
    except OSError as exc:
        logger.debug("Path completion: cannot read %s: %s", directory, exc)
    return None


def _entry_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def suggest_paths(prefix: str, raw_token: str, home: Optional[str] = None) -> List[Suggestion]:
    """Return directory-entry suggestions for the path fragment `raw_token`.

    Parameters
    ----------
    prefix : str
        Text re-attached in front of every suggestion (see
        :func:`smartbash.tokenizer.split_line`).
    raw_token : str
        The fragment exactly as typed, possibly starting with ``~``.
    home : str, optional
        Home directory override; resolved from the environment when omitted.

    Returns
    -------
    List[Suggestion]
        In directory enumeration order. ``display_text`` is ``prefix`` plus
        the rendered path and replaces ``prefix + raw_token`` on the line;
        ``annotation`` is the full, unabbreviated path.
    """
    if home is None:
        home = home_dir()
    expanded = expand_home(raw_token, home)

    if not expanded:
        # Bare current directory: list everything, render names as-is.
        listing_dir, fragment, join_dir = ".", "", ""
    elif expanded.endswith(_SEPARATORS):
        listing_dir, fragment, join_dir = expanded, "", expanded
    else:
        join_dir = os.path.dirname(expanded)
        listing_dir = join_dir or "."
        fragment = os.path.basename(expanded)

    entries = _list_dir(listing_dir)
    if entries is None:
        return []

    restore_tilde = raw_token.startswith("~") and bool(home)
    replace_length = len(prefix) + len(raw_token)

    suggestions: List[Suggestion] = []
    for entry in entries:
        name = entry.name
        if fragment and not name.startswith(fragment):
            continue

        full = os.path.join(join_dir, name) if join_dir else name
        display = compress_home(full, home) if restore_tilde else full
        if _entry_is_dir(entry):
            full += os.sep
            display += os.sep

        suggestions.append(
            Suggestion(
                display_text=prefix + display,
                annotation=full,
                replace_length=replace_length,
            )
        )

    return suggestions
