"""Doubly linked list of enrollments where each new one goes after a given key."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional

from estruturas.enrollment_list import Date, Enrollment
from estruturas.errors import EmptyError

_EMPTY_MESSAGE = "Lista Vazia!\n"


class EnrollmentDeque:
    """Ordered enrollments that can be walked from either end."""

    def __init__(self) -> None:
        self._items: list[Enrollment] = []

    def insert_after(self, enrollment: Enrollment, number: str) -> None:
        """Insert after the first enrollment with ``number``, or at the front if none has it."""
        for position, item in enumerate(self._items):
            if item.number == number:
                self._items.insert(position + 1, enrollment)
                return
        self._items.insert(0, enrollment)

    def remove(self, number: str) -> int:
        """Remove every enrollment with ``number`` and return how many went.

        Raises EmptyError when the list holds nothing.
        """
        if not self._items:
            raise EmptyError("list is empty")
        kept = [item for item in self._items if item.number != number]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def __iter__(self) -> Iterator[Enrollment]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Enrollment]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> int:
        """Empty the list and return how many enrollments it held."""
        count = len(self._items)
        self._items.clear()
        return count


def _listing(enrollments: Iterable[Enrollment]) -> str:
    lines = [f"{item.format()}\n" for item in enrollments]
    return "".join(lines) if lines else _EMPTY_MESSAGE


def run(tokens: Iterable[str]) -> str:
    """Process command tokens and return the text the session prints.

    Commands: 1 key record (insert the record after ``key``), 2 remove by
    number, 3 list from the first, 4 list from the last, 0 clear (one ``*``
    per enrollment, then a newline) and stop.
    """
    enrollments = EnrollmentDeque()
    output: list[str] = []
    stream = iter(tokens)
    try:
        while True:
            option = int(next(stream))
            if option == 1:
                key = next(stream)
                number = next(stream)
                name = next(stream)
                birth = Date.parse(next(stream))
                grade = float(next(stream))
                enrollments.insert_after(Enrollment(number, name, birth, grade), key)
            elif option == 2:
                number = next(stream)
                try:
                    enrollments.remove(number)
                except EmptyError:
                    output.append(_EMPTY_MESSAGE)
            elif option == 3:
                output.append(_listing(enrollments))
            elif option == 4:
                output.append(_listing(reversed(enrollments)))
            elif option == 0:
                output.append("*" * enrollments.clear() + "\n")
                break
    except (StopIteration, ValueError):
        pass
    return "".join(output)


def _read_tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from standard input and print the session's output."""
    argparse.ArgumentParser(description="Enrollment deque driven by numbered commands.").parse_args(argv)
    sys.stdout.write(run(_read_tokens(sys.stdin)))
    return 0