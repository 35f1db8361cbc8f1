# smartbash/tokenizer.py
"""
Split the text before the cursor into the fragment being completed and
what precedes it.

This is deliberately not a shell parser: no quoting, pipes or redirection.
Whitespace delimits tokens, and a token is *path-like* when it contains a
path separator or starts with ``~`` or ``.``.

Public API
----------
- is_path_like(token) -> bool
- classify(token) -> TokenKind
- split_line(line) -> (prefix, token)
"""

from __future__ import annotations

import os
from typing import Tuple

from .models import TokenKind

__all__ = ["is_path_like", "classify", "split_line"]

_SEPARATORS: Tuple[str, ...] = tuple(s for s in (os.sep, os.altsep) if s)


def is_path_like(token: str) -> bool:
    return any(sep in token for sep in _SEPARATORS) or token.startswith(("~", "."))


def classify(token: str) -> TokenKind:
    return TokenKind.PATH if is_path_like(token) else TokenKind.PLAIN


def _last_space(text: str) -> int:
    """Index of the last whitespace character in `text`, or -1."""
    for idx in range(len(text) - 1, -1, -1):
        if text[idx].isspace():
            return idx
    return -1


def split_line(line: str) -> Tuple[str, str]:
    """Return ``(prefix, token)`` for the text before the cursor.

    For a plain token the prefix is everything up to and including the last
    whitespace character:

    >>> split_line("echo hi")
    ('echo ', 'hi')
    >>> split_line("git add ")
    ('git add ', '')

    For a path-like token the prefix is re-derived: it is the argument right
    before the token (plus its trailing whitespace) when that argument is
    path-like too, and empty otherwise. Only one such argument is re-attached.

    >>> split_line("cd ~/pro")
    ('', '~/pro')
    >>> split_line("cp ./a ./b ./c")
    ('./b ', './c')
    """
    if not line.strip():
        return "", ""

    cut = _last_space(line)
    if cut == -1:
        return "", line
    prefix, token = line[: cut + 1], line[cut + 1 :]

    if not is_path_like(token):
        return prefix, token

    fields = prefix.split()
    if not fields or not is_path_like(fields[-1]):
        return "", token

    # Start of the previous argument: last whitespace before its first char.
    body_end = len(prefix.rstrip())
    start = _last_space(prefix[:body_end])
    if start == -1:
        return "", token
    return prefix[start + 1 :], token
