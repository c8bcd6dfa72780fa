import io
import sys

import pytest

from estruturas.errors import EmptyError
from estruturas.word_stack import WordStack, main, run


def test_push_pop_order():
    stack = WordStack()
    for word in ("alpha", "beta", "gamma"):
        stack.push(word)
    assert stack.pop() == "gamma"
    assert list(stack) == ["alpha", "beta"]


def test_pop_empty_raises():
    with pytest.raises(EmptyError):
        WordStack().pop()


def test_drain_returns_top_first_and_empties():
    stack = WordStack()
    for word in "xyz":
        stack.push(word)
    assert stack.drain() == ["z", "y", "x"]
    assert stack.is_empty()


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["a", "b", "c", "B", "E"], "c\n@@\n"),
        (["B", "E"], "Vazio\n!\n"),
        (["w", "B"], "w\n!\n"),
        (["one", "E", "two", "three"], "@\n"),
    ],
)
def test_run(tokens, expected):
    assert run(tokens) == expected


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello world\nB\nE\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "world\n@\n"