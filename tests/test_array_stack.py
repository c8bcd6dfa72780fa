import io
import sys

import pytest

from estruturas.array_stack import ArrayStack, main
from estruturas.errors import EmptyError, FullError


def _stack_of(values, capacity=100):
    stack = ArrayStack(capacity)
    for value in values:
        stack.push(value)
    return stack


def test_pop_returns_items_in_reverse_order():
    stack = _stack_of([4, 8, 15])
    assert [stack.pop() for _ in range(3)] == [15, 8, 4]
    assert stack.is_empty()


def test_pop_on_empty_raises():
    with pytest.raises(EmptyError):
        ArrayStack().pop()


def test_push_beyond_capacity_raises():
    stack = _stack_of([1, 2], capacity=2)
    assert stack.is_full()
    with pytest.raises(FullError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_default_capacity_is_one_hundred():
    stack = ArrayStack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    assert len(stack) == 100


def test_iteration_goes_bottom_to_top():
    assert list(_stack_of((7, 9))) == [7, 9]


@pytest.mark.parametrize("values, expected", [((), "Pilha: [ ]\n"), ((1, 2), "Pilha: [ 1 2 ]\n")])
def test_render(values, expected):
    assert _stack_of(values).render() == expected


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_main_reports_size_and_empty_pop(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 5 6 2 2 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = ("A pilha possui 1 elementos!", "Elemento Removido: 5", "Nao tem elemento para ser removido!")
    assert [part in out for part in expected] == [True, True, True]