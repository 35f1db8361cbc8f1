# tests/test_tokenizer.py
from __future__ import annotations

import pytest

from smartbash import tokenizer as sut
from smartbash.models import TokenKind


@pytest.mark.parametrize(
    "token, expected",
    [
        ("", False),
        ("ls", False),
        ("-la", False),
        ("status", False),
        ("/", True),
        ("/tmp/a", True),
        ("src/main.py", True),
        ("~", True),
        ("~/proj", True),
        ("~user", True),
        (".", True),
        ("..", True),
        (".bashrc", True),
        ("a.b", False),
        ("x~", False),
    ],
)
def test_is_path_like_and_classify(token, expected):
    assert sut.is_path_like(token) is expected
    assert sut.classify(token) is (TokenKind.PATH if expected else TokenKind.PLAIN)


@pytest.mark.parametrize("line", ["", " ", "   ", "\t \t"])
def test_split_blank_lines(line):
    assert sut.split_line(line) == ("", "")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ls", ("", "ls")),
        ("echo hi", ("echo ", "hi")),
        ("git add ", ("git add ", "")),
        ("git  commit", ("git  ", "commit")),
        ("echo\thi", ("echo\t", "hi")),
        ("  ls", ("  ", "ls")),
    ],
)
def test_split_plain_tokens(line, expected):
    assert sut.split_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        # single path argument: nothing to re-attach
        ("/tmp/", ("", "/tmp/")),
        ("cd ~/pro", ("", "~/pro")),
        ("cat src/ma", ("", "src/ma")),
        ("ls -la ./", ("", "./")),
        # previous argument is a path too: re-attached as the prefix
        ("cp ./a ./b", ("./a ", "./b")),
        ("cp ./a  ./b", ("./a  ", "./b")),
        # no whitespace before the previous path argument
        ("./a ./b", ("", "./b")),
        # consecutive path arguments: only the nearest one is re-attached
        ("cp ./a ./b ./c", ("./b ", "./c")),
        ("mv ~/x /tmp/y ~/z", ("/tmp/y ", "~/z")),
    ],
)
def test_split_path_tokens(line, expected):
    assert sut.split_line(line) == expected


def test_split_token_is_never_rewritten():
    for line in ["cp ./a ./b", "x y/z", "vim ~/.bashrc"]:
        _, token = sut.split_line(line)
        assert line.endswith(token)
