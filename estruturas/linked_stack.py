"""Unbounded last-in first-out stack of integers."""

from __future__ import annotations

import sys
from typing import Iterator, Optional

from estruturas.array_queue import _parse_args, _read_tokens
from estruturas.array_stack import _stack_session
from estruturas.errors import EmptyError


class LinkedStack:
    """LIFO stack that grows as needed."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """Room for another item can always be made, so never full."""
        return False

    def push(self, item: int) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; EmptyError when there is none."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        body = "".join(f"{item}, " for item in self)
        return f"Pilha : [{body}]\n"


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive stack menu over standard input."""
    _parse_args(argv, "Interactive linked stack.")
    _stack_session(
        LinkedStack(),
        _read_tokens(sys.stdin),
        ("Pilha esta cheia!", "Não foi possivel inserir este elemento!"),
        ("A pilha esta vazia!", "Não tem elementos para remover!"),
    )
    return 0