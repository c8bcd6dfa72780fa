"""Bounded last-in first-out stack of integers, with its interactive menu."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence

from estruturas.array_queue import _menu_loop, _parse_args, _read_tokens
from estruturas.errors import EmptyError, FullError

DEFAULT_CAPACITY = 100

_STACK_MENU = (
    "Digite 0 para parar o programa!\n"
    "Digite 1 para inserir um elemento!\n"
    "Digite 2 para remover um elemento!\n"
    "Digite 3 para imprimir a pilha!\n"
    "Digite 4 para verificar se a pilha esta vazia!\n"
    "Digite 5 para verificar se a pilha esta cheia!\n"
    "Digite 6 para verificar o tamanho da pilha!"
)


class ArrayStack:
    """LIFO stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity: Optional[int] = capacity
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def push(self, item: int) -> None:
        """Put ``item`` on top; FullError when there is no room."""
        if self.is_full():
            raise FullError("stack is full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; EmptyError when there is none."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        body = "".join(f"{item} " for item in self._items)
        return f"Pilha: [ {body}]\n"


def _stack_session(
    stack: ArrayStack,
    tokens: Iterator[str],
    full_lines: Sequence[str],
    empty_lines: Sequence[str],
) -> None:
    def insert() -> None:
        print("Digite o elemento a ser inserido: ", end="")
        item = int(next(tokens))
        try:
            stack.push(item)
        except FullError:
            print(*full_lines, sep="\n")

    def remove() -> None:
        try:
            item = stack.pop()
        except EmptyError:
            print(*empty_lines, sep="\n")
            item = 0
        print(f"Elemento Removido: {item}")

    def report(check, state: str) -> None:
        negation = "" if check() else "nao "
        print(f"A pilha {negation}esta {state}!")

    print("Programa gerador de pilhas:")
    _menu_loop(
        _STACK_MENU,
        tokens,
        {
            1: insert,
            2: remove,
            3: lambda: print(stack.render(), end=""),
            4: lambda: report(stack.is_empty, "vazia"),
            5: lambda: report(stack.is_full, "cheia"),
            6: lambda: print(f"A pilha possui {len(stack)} elementos!"),
        },
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive stack menu over standard input."""
    _parse_args(argv, "Interactive bounded stack.")
    _stack_session(
        ArrayStack(),
        _read_tokens(sys.stdin),
        ("A pilha esta cheia!", "Não é possivel inserir este elemento!"),
        ("A pilha esta vazia", "Nao tem elemento para ser removido!"),
    )
    return 0