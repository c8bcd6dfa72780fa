"""Unbounded first-in first-out queue of integers."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterator, Optional

from estruturas.array_queue import _parse_args, _queue_session, _read_tokens
from estruturas.errors import EmptyError


class LinkedQueue:
    """FIFO queue that grows as needed."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """Room for another item can always be made, so never full."""
        return False

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> int:
        """Remove and return the front item; EmptyError when there is none."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        prefix = "A fila esta vazia!\n" if self.is_empty() else ""
        body = "".join(f"{item}, " for item in self._items)
        return f"{prefix}Fila : [{body}]\n"


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive queue menu over standard input."""
    _parse_args(argv, "Interactive linked queue.")
    _queue_session(
        LinkedQueue(),
        _read_tokens(sys.stdin),
        ("Fila esta cheia!", "Não foi possivel inserir este elemento!"),
        ("A fila esta vazia!", "Nao possui nenhum elemento para ser removido!"),
    )
    return 0