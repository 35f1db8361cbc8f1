# smartbash/models.py
"""
Plain data types shared by the completion engine.

- HistoryEntry: a distinct command text and how often it has been observed.
- Suggestion: one completion candidate handed to the line editor.
- TokenKind: classification of the fragment being completed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["HistoryEntry", "Suggestion", "TokenKind"]


class TokenKind(str, Enum):
    PATH = "path"
    PLAIN = "plain"


@dataclass(frozen=True)
class HistoryEntry:
    text: str
    frequency: int = 1


@dataclass(frozen=True)
class Suggestion:
    """A completion candidate.

    Attributes
    ----------
    display_text : str
        Text inserted in place of the last ``replace_length`` characters
        before the cursor.
    annotation : str
        Human-readable metadata (full path, or usage count).
    replace_length : int
        How many characters before the cursor the suggestion replaces.
    """

    display_text: str
    annotation: str = ""
    replace_length: int = 0
