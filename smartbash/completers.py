# smartbash/completers.py
"""
Prompt-toolkit completer for the SmartBash prompt.

Public API
----------
- SmartCompleter: prompt-toolkit Completer that offers path completion when
  the fragment under the cursor looks like a path, and fuzzy matches from the
  command history otherwise.

Notes
-----
- The decision is made per keystroke by :func:`smartbash.tokenizer.split_line`
  and :func:`smartbash.tokenizer.classify`.
- History suggestions replace the whole line; path suggestions replace the
  path argument (and the re-attached prefix, see ``split_line``).
- Errors raised while computing suggestions are logged and swallowed so the
  prompt keeps working.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .history import HistoryStore
from .models import Suggestion, TokenKind
from .paths import suggest_paths
from .ranker import rank_history
from .tokenizer import classify, split_line

__all__ = ["SmartCompleter", "suggest"]

logger = logging.getLogger("smartbash.completers")


def suggest(line: str, store: HistoryStore, home: Optional[str] = None) -> List[Suggestion]:
    """Return suggestions for the text before the cursor.

    Parameters
    ----------
    line : str
        Text before the cursor.
    store : HistoryStore
        Source of the ranked history snapshot.
    home : str, optional
        Home directory override for ``~`` handling (tests).
    """
    if not line.strip():
        return []

    prefix, token = split_line(line)
    if classify(token) is TokenKind.PATH:
        return suggest_paths(prefix, token, home=home)
    return rank_history(line.strip(), store.snapshot(), replace_length=len(line))


class SmartCompleter(Completer):
    """History + path completer.

    Parameters
    ----------
    store : HistoryStore
        The session's history; read through its snapshot on every keystroke so
        commands submitted earlier in the session are offered immediately.
    """

    __slots__ = ("store", "home")

    def __init__(self, store: HistoryStore, home: Optional[str] = None) -> None:
        self.store = store
        self.home = home

    def get_completions(  # type: ignore[override]
        self, document: Document, complete_event: Any
    ) -> Iterator[Completion]:
        try:
            suggestions = suggest(document.text_before_cursor, self.store, home=self.home)
        except Exception:  # noqa: BLE001
            logger.exception("Completion failed for %r", document.text_before_cursor)
            return

        for s in suggestions:
            yield Completion(
                text=s.display_text,
                start_position=-s.replace_length,
                display_meta=s.annotation,
            )
