"""Bounded first-in first-out queue of integers, with its interactive menu."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Iterator, Optional, Sequence

from estruturas.bst import _ask, _menu_loop, _parse_args, _read_tokens
from estruturas.errors import EmptyError, FullError

__all__ = ["ArrayQueue", "DEFAULT_CAPACITY", "main", "_menu_loop", "_parse_args", "_read_tokens"]

DEFAULT_CAPACITY = 100

_INVALID_OPTION = "Opcao invalida, tente novamente!"
_QUEUE_MENU = (
    "Digite 0 para parar o programa!\n"
    "Digite 1 para inserir um elemento!\n"
    "Digite 2 para remover um elemento!\n"
    "Digite 3 para imprimir os elementos da fila!"
)


class ArrayQueue:
    """FIFO queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back; FullError when there is no room."""
        if self.is_full():
            raise FullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> int:
        """Remove and return the front item; EmptyError when there is none."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        body = "".join(f"{item} " for item in self._items)
        return f"Fila: [ {body}]\n"


def _queue_session(
    queue: Any,
    tokens: Iterator[str],
    full_lines: Sequence[str],
    empty_lines: Sequence[str],
) -> None:
    """Drive the interactive menu shared by the integer queues."""

    def insert() -> None:
        item = int(_ask(tokens, "Digite o elemento a ser inserido na fila: ", end=""))
        try:
            queue.enqueue(item)
        except FullError:
            print(*full_lines, sep="\n")

    def remove() -> None:
        try:
            item = queue.dequeue()
        except EmptyError:
            print(*empty_lines, sep="\n")
            item = 0
        print(f"O elemento removido é: {item}")

    print("Programa gerador de filas:")
    _menu_loop(
        _QUEUE_MENU,
        tokens,
        {1: insert, 2: remove, 3: lambda: print(queue.render(), end="")},
        lambda: print(_INVALID_OPTION),
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive queue menu over standard input."""
    _parse_args(argv, "Interactive bounded queue.")
    _queue_session(
        ArrayQueue(),
        _read_tokens(sys.stdin),
        ("A fila esta cheia", "Esse elemento nao pode ser inserido"),
        ("A fila esta vazia!", "Nenhum elemento foi removido!"),
    )
    return 0