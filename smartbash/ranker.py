# smartbash/ranker.py
"""
Fuzzy ranking of previously used commands.

Public API
----------
- FuzzyMatch: a matched candidate and its index in the pool.
- fuzzy_find(query, pool) -> List[FuzzyMatch]
- rank_history(query, snapshot) -> List[Suggestion]

Notes
-----
Scoring is delegated to prompt-toolkit's :class:`FuzzyCompleter`: a candidate
matches when it contains the query's characters in order (case-insensitive),
and matches are ordered by where the match starts, then by how short it is.
Equal scores keep pool order, so with a frequency-sorted pool the more used
command wins ties.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional, Sequence

from prompt_toolkit.completion import CompleteEvent, FuzzyCompleter, WordCompleter
from prompt_toolkit.document import Document

from .constants import USAGE_ANNOTATION
from .models import HistoryEntry, Suggestion

__all__ = ["FuzzyMatch", "fuzzy_find", "rank_history"]

# Treat the whole query, spaces included, as the fuzzy pattern.
_WHOLE_LINE = r"^.*"


class FuzzyMatch(NamedTuple):
    text: str
    index: int


def fuzzy_find(query: str, pool: Sequence[str]) -> List[FuzzyMatch]:
    """Return the candidates of `pool` matching `query`, best first.

    Parameters
    ----------
    query : str
        Characters that must appear, in order, in a candidate.
    pool : Sequence[str]
        Candidate strings. Duplicates resolve to their first index.

    Examples
    --------
    >>> [m.text for m in fuzzy_find("gt", ["git status", "grep x"])]
    ['git status']
    """
    if not query or not pool:
        return []

    index_of: Dict[str, int] = {}
    for idx, text in enumerate(pool):
        index_of.setdefault(text, idx)

    completer = FuzzyCompleter(
        WordCompleter(list(index_of), sentence=True),
        pattern=_WHOLE_LINE,
    )
    document = Document(text=query, cursor_position=len(query))
    return [
        FuzzyMatch(c.text, index_of[c.text])
        for c in completer.get_completions(document, CompleteEvent(completion_requested=True))
    ]


def rank_history(
    query: str,
    snapshot: Sequence[HistoryEntry],
    replace_length: Optional[int] = None,
) -> List[Suggestion]:
    """Fuzzy-match `query` against the ranked history snapshot.

    Every suggestion replaces the whole line, so ``replace_length`` defaults
    to the query length; callers that stripped the line pass its real length.
    Suggestions are annotated with their usage count.
    """
    if not query:
        return []

    pool = [entry.text for entry in snapshot]
    return [
        Suggestion(
            display_text=match.text,
            annotation=USAGE_ANNOTATION.format(count=snapshot[match.index].frequency),
            replace_length=len(query) if replace_length is None else replace_length,
        )
        for match in fuzzy_find(query, pool)
    ]
