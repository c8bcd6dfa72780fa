"""Singly linked list of student enrollments driven by numbered commands."""

from __future__ import annotations

import re
import struct
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from estruturas.array_queue import _parse_args, _read_tokens
from estruturas.errors import EmptyError

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")
_EMPTY_MESSAGE = "Lista Vazia!\n"


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INTEGER_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Date:
    """A calendar date as entered, without validation."""

    day: int
    month: int
    year: int

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse ``day/month/year``; ValueError when a part is missing."""
        parts = [part for part in text.split("/") if part]
        if len(parts) < 3:
            raise ValueError(f"invalid date: {text!r}")
        day, month, year = (_atoi(part) for part in parts[:3])
        return cls(day, month, year)

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class Enrollment:
    """One enrolled student."""

    number: str
    name: str
    birth: Date
    grade: float

    def format(self) -> str:
        return f"{self.number}, {self.name}, {self.birth}, {_single_precision(self.grade):.2f}"


class EnrollmentList:
    """Ordered collection of enrollments."""

    def __init__(self) -> None:
        self._entries: list[Enrollment] = []

    def append(self, enrollment: Enrollment) -> None:
        self._entries.append(enrollment)

    def prepend(self, enrollment: Enrollment) -> None:
        self._entries.insert(0, enrollment)

    def remove(self, number: str) -> int:
        """Remove every enrollment with ``number`` and return how many went.

        Raises EmptyError when the list holds nothing.
        """
        if not self._entries:
            raise EmptyError("list is empty")
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.number != number]
        return before - len(self._entries)

    def __iter__(self) -> Iterator[Enrollment]:
        yield from self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __reversed__(self) -> Iterator[Enrollment]:
        yield from self._entries[::-1]

    def clear(self) -> int:
        """Empty the list and return how many enrollments it held."""
        count = len(self._entries)
        self._entries = []
        return count


def _listing(enrollments: Iterable[Enrollment]) -> str:
    lines = [f"{entry.format()}\n" for entry in enrollments]
    return "".join(lines) or _EMPTY_MESSAGE


def _read_enrollment(stream: Iterator[str]) -> Enrollment:
    number = next(stream)
    name = next(stream)
    birth = Date.parse(next(stream))
    return Enrollment(number, name, birth, float(next(stream)))


def run(tokens: Iterable[str]) -> str:
    """Process command tokens and return the text the session prints.

    Commands: 1 add at the end, 2 remove by number, 3 list, 4 list reversed,
    5 count, 0 clear (one ``-`` per enrollment) and stop.
    """
    enrollments = EnrollmentList()
    output: list[str] = []
    stream = iter(tokens)
    try:
        while True:
            option = int(next(stream))
            if option == 0:
                output.append("-" * enrollments.clear())
                break
            if option == 1:
                enrollments.append(_read_enrollment(stream))
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
            elif option == 5:
                output.append(f"{len(enrollments)}\n")
    except (StopIteration, ValueError):
        pass
    return "".join(output)


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from standard input and print the session's output."""
    _parse_args(argv, "Enrollment list driven by numbered commands.")
    sys.stdout.write(run(_read_tokens(sys.stdin)))
    return 0