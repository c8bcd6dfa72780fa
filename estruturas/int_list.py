"""Linked list of integers built from a sequence."""

from __future__ import annotations

import argparse
from collections import deque
from typing import Iterable, Iterator, Optional

_DEFAULT_VALUES = (1, 21, 4, 6)


class IntList:
    """Integers kept in insertion order, addable at either end."""

    def __init__(self) -> None:
        self._values: deque[int] = deque()

    def append(self, value: int) -> None:
        self._values.append(value)

    def prepend(self, value: int) -> None:
        self._values.appendleft(value)

    def __iter__(self) -> Iterator[int]:
        yield from self._values

    def __reversed__(self) -> Iterator[int]:
        yield from reversed(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def format(self) -> str:
        """Render every value followed by a space."""
        return "".join(f"{value} " for value in self)


def build_list(values: Iterable[int]) -> IntList:
    """Build a list holding ``values`` in the same order."""
    result = IntList()
    for value in values:
        result.append(value)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Build a list from the given integers (or a default set) and print it."""
    parser = argparse.ArgumentParser(description="Build and print a list of integers.")
    parser.add_argument("values", nargs="*", type=int)
    values = parser.parse_args(argv).values or _DEFAULT_VALUES
    print(build_list(values).format())
    return 0