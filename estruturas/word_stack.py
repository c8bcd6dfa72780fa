"""Stack of words driven by a stream of push, pop and end commands."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional

from estruturas.array_queue import _parse_args, _read_tokens
from estruturas.errors import EmptyError

POP_COMMAND = "B"
END_COMMAND = "E"


class WordStack:
    """LIFO stack of words."""

    def __init__(self) -> None:
        self._words: list[str] = []

    def is_empty(self) -> bool:
        return not self._words

    def push(self, word: str) -> None:
        self._words.append(word)

    def pop(self) -> str:
        """Remove and return the top word; EmptyError when there is none."""
        if not self._words:
            raise EmptyError("stack is empty")
        return self._words.pop()

    def __iter__(self) -> Iterator[str]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._words)

    def drain(self) -> list[str]:
        """Empty the stack, returning the removed words from the top down."""
        removed = self._words[::-1]
        self._words.clear()
        return removed


def run(tokens: Iterable[str]) -> str:
    """Process command tokens and return the text the session prints.

    ``B`` pops and prints the top word (or ``Vazio``), ``E`` ends the session,
    anything else is pushed. At the end an ``@`` is printed for each word
    still stacked, or ``!`` when none is left.
    """
    stack = WordStack()
    output: list[str] = []
    for token in tokens:
        if token == END_COMMAND:
            break
        if token != POP_COMMAND:
            stack.push(token)
            continue
        try:
            output.append(f"{stack.pop()}\n")
        except EmptyError:
            output.append("Vazio\n")
    leftover = stack.drain()
    output.append("@" * len(leftover) + "\n" if leftover else "!\n")
    return "".join(output)


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from standard input and print the session's output."""
    _parse_args(argv, "Word stack driven by B/E commands.")
    sys.stdout.write(run(_read_tokens(sys.stdin)))
    return 0