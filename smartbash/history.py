# smartbash/history.py
"""
Frequency-aware command history.

Overview
--------
:class:`HistoryStore` owns an in-memory frequency table built from a plain
text, one-command-per-line log (``~/.bash_history`` by default) and keeps a
ranked snapshot of it for the completer.

- ``load`` reads a path or an open text stream; a missing log is an empty
  history, not an error.
- ``append`` writes the command to the log (append-only, created ``0600``)
  and bumps its counter. A write failure never blocks the command itself.
  Commands spanning several lines are stored line by line.
- The log is read and written as strict UTF-8; an undecodable log is
  reported at WARNING and ignored.
- ``snapshot`` returns entries by frequency descending; ties keep the order
  in which commands were first seen.

The snapshot is rebuilt after every mutation. At interactive history sizes
this costs one sort per submitted command.
"""

from __future__ import annotations

import logging
import os
import re
from collections import Counter
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Tuple, Union

from .constants import HISTORY_FILE_MODE
from .models import HistoryEntry

__all__ = ["HistoryStore"]

logger = logging.getLogger("smartbash.history")

PathLike = Union[str, "os.PathLike[str]"]

# Same breaks as universal-newline text reads.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _records(lines: Iterable[str]) -> Iterator[str]:
    """Yield the trimmed, non-blank lines of `lines`."""
    for line in lines:
        cmd = line.strip()
        if cmd:
            yield cmd


class HistoryStore:
    """Owned command-frequency table with a ranked snapshot.

    Parameters
    ----------
    path : str or PathLike, optional
        Persisted log used by :meth:`append` (and by :meth:`load` when called
        without a source). ``None`` keeps the store purely in memory.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path: Optional[Path] = Path(path) if path is not None else None
        self._counts: Counter[str] = Counter()
        self._snapshot: Tuple[HistoryEntry, ...] = ()

    # ------------------------------------------------------------------ load
    def load(self, source: Union[PathLike, IO[str], None] = None) -> int:
        """Count every non-blank line of `source`; return how many were read."""
        if source is None:
            source = self.path
        if source is None:
            return 0

        if hasattr(source, "read"):
            added = self._consume(source)  # type: ignore[arg-type]
        else:
            try:
                # Read fully before counting: a decode error leaves the store unchanged.
                with open(source, "r", encoding="utf-8") as fh:
                    lines = fh.readlines()
            except FileNotFoundError:
                logger.debug("No history log at %s; starting empty.", source)
                lines = []
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Could not read history log %s: %s", source, exc)
                lines = []
            added = self._consume(lines)

        self.rebuild()
        logger.debug("Loaded %d history lines (%d distinct).", added, len(self._counts))
        return added

    def _consume(self, lines: Iterable[str]) -> int:
        added = 0
        for cmd in _records(lines):
            self._counts[cmd] += 1
            added += 1
        return added

    # ---------------------------------------------------------------- append
    def append(self, command: str) -> None:
        """Record `command` in the log and the frequency table.

        A multi-line command (e.g. a bracketed paste) is recorded as one entry
        per non-blank line, exactly as a later :meth:`load` will read it back.
        """
        cmds = list(_records(_LINE_BREAK.split(command or "")))
        if not cmds:
            return

        if self.path is not None:
            self._write(cmds)

        for cmd in cmds:
            self._counts[cmd] += 1
        self.rebuild()

    def _write(self, cmds: List[str]) -> None:
        try:
            fd = os.open(self.path, os.O_APPEND | os.O_WRONLY | os.O_CREAT, HISTORY_FILE_MODE)
            with os.fdopen(fd, "a", encoding="utf-8") as fh:
                fh.write("".join(cmd + "\n" for cmd in cmds))
        except (OSError, UnicodeEncodeError) as exc:
            logger.debug("History append to %s failed: %s", self.path, exc)

    # -------------------------------------------------------------- snapshot
    def rebuild(self) -> None:
        """Re-sort the frequency table into the ranked snapshot."""
        entries = [HistoryEntry(text, freq) for text, freq in self._counts.items()]
        # sorted() is stable: equal frequencies keep first-seen order.
        entries = sorted(entries, key=lambda e: e.frequency, reverse=True)
        self._snapshot = tuple(entries)

    def snapshot(self) -> Tuple[HistoryEntry, ...]:
        return self._snapshot

    def frequency(self, command: str) -> int:
        return self._counts.get(command.strip(), 0)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, command: object) -> bool:
        return isinstance(command, str) and command.strip() in self._counts
