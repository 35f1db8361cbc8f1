# tests/conftest.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List

import pytest
from rich.text import Text

from smartbash.history import HistoryStore


class DummyConsole:
    """Rich Console stand-in that records what was printed."""

    def __init__(self, width: int = 100):
        self.width = width
        self.printed: List[Any] = []
        self.output: List[str] = []

    def print(self, obj: Any, *_, **__):
        self.printed.append(obj)
        self.output.append(obj.plain if isinstance(obj, Text) else str(obj))


class SessionStub:
    """
    Deterministic PromptSession replacement.

    - If an item is an exception instance, it is raised.
    - If the input list is exhausted, raises EOFError.
    """

    def __init__(self, inputs: Iterable[Any]):
        self._inputs = list(inputs)
        self.messages: List[Any] = []

    def prompt(self, message):
        self.messages.append(message)
        if not self._inputs:
            raise EOFError()
        nxt = self._inputs.pop(0)
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt


@pytest.fixture(autouse=True)
def _reset_app_logger():
    """Undo get_logger() side effects so caplog sees module records."""
    logger = logging.getLogger("smartbash")
    saved = (logger.handlers[:], logger.propagate, logger.level)
    logger.propagate = True
    yield
    logger.handlers[:], logger.propagate = saved[0], saved[1]
    logger.setLevel(saved[2])
    logger.__dict__.pop("_smartbash_stream_handler_attached", None)


@pytest.fixture()
def console() -> DummyConsole:
    return DummyConsole()


@pytest.fixture()
def fake_home(tmp_path: Path) -> Path:
    """A home directory with a couple of entries:

    home/u/
      proj/
      projects.txt
      notes.md
    """
    home = tmp_path / "home" / "u"
    (home / "proj").mkdir(parents=True)
    (home / "projects.txt").write_text("x")
    (home / "notes.md").write_text("x")
    return home


@pytest.fixture()
def store() -> HistoryStore:
    """In-memory store: git status x5, git pull x2, ls -la x1."""
    s = HistoryStore()
    for cmd in ["git status"] * 5 + ["git pull"] * 2 + ["ls -la"]:
        s.append(cmd)
    return s
