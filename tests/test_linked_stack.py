import io
import sys

import pytest

from estruturas.errors import EmptyError
from estruturas.linked_stack import LinkedStack, main


def test_lifo_order():
    stack = LinkedStack()
    for value in [3, 1, 4, 1, 5]:
        stack.push(value)
    assert [stack.pop() for _ in range(5)] == [5, 1, 4, 1, 3]


def test_pop_on_empty_raises():
    with pytest.raises(EmptyError):
        LinkedStack().pop()


def test_never_full_and_grows():
    stack = LinkedStack()
    for value in range(500):
        stack.push(value)
    assert stack.is_full() is False
    assert len(stack) == 500


def test_iteration_and_render_go_top_to_bottom():
    stack = LinkedStack()
    assert stack.render() == "Pilha : []\n"
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]
    assert stack.render() == "Pilha : [30, 20, 10, ]\n"


def test_is_empty_after_push_and_pop():
    stack = LinkedStack()
    stack.push(9)
    assert not stack.is_empty()
    assert stack.pop() == 9
    assert stack.is_empty()


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4 1 8 4 5 2 2 0"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    for expected in (
        "A pilha esta vazia!",
        "A pilha nao esta vazia!",
        "A pilha nao esta cheia!",
        "Elemento Removido: 8",
        "Não tem elementos para remover!",
    ):
        assert expected in lines