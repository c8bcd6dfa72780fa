import io

import pytest

from estruturas.array_queue import ArrayQueue, main
from estruturas.errors import EmptyError, FullError


def _filled(capacity, items):
    queue = ArrayQueue(capacity)
    for item in items:
        queue.enqueue(item)
    return queue


def test_fifo_order():
    queue = _filled(100, (3, 1, 4))
    assert [queue.dequeue() for _ in range(3)] == [3, 1, 4]
    assert queue.is_empty() is True


def test_default_capacity_is_one_hundred():
    queue = ArrayQueue()
    for item in range(100):
        queue.enqueue(item)
    assert queue.is_full() is True
    with pytest.raises(FullError):
        queue.enqueue(100)


@pytest.mark.parametrize(
    "action, error",
    [
        (lambda: ArrayQueue().dequeue(), EmptyError),
        (lambda: ArrayQueue(0), ValueError),
        (lambda: _filled(2, (1, 2)).enqueue(3), FullError),
    ],
)
def test_errors(action, error):
    with pytest.raises(error):
        action()


def test_wraps_around_capacity():
    queue = ArrayQueue(3)
    for item in range(10):
        queue.enqueue(item)
        if len(queue) == 3:
            queue.dequeue()
    assert list(queue) == [8, 9]
    assert len(queue) == 2


def test_full_after_dequeue_has_room():
    queue = _filled(2, (1, 2))
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert list(queue) == [2, 3]


@pytest.mark.parametrize(
    "items, expected",
    [((), "Fila: [ ]\n"), ((1, 2), "Fila: [ 1 2 ]\n")],
)
def test_render(items, expected):
    assert _filled(100, items).render() == expected


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5\n1 6\n2\n3\n2\n2\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Programa gerador de filas:\n")
    for expected in (
        "O elemento removido é: 5\n",
        "Fila: [ 6 ]\n",
        "A fila esta vazia!\nNenhum elemento foi removido!\nO elemento removido é: 0\n",
    ):
        assert expected in out
    assert out.endswith("Opcao invalida, tente novamente!\n")