"""Linked lists of employee records."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from estruturas.enrollment_list import Date

_REMOVED_ID = 2
_BATCH_SIZE = 5


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    employee_id: int
    name: str
    salary: float
    birth: Date

    def format_lines(self) -> str:
        """Render each field on its own line, each followed by a space."""
        return (
            f"{self.employee_id} \n"
            f"{self.name} \n"
            f"{self.salary:.2f} \n"
            f"{self.birth} \n"
        )

    def format_block(self) -> str:
        """Render each field on its own line."""
        return f"{self.employee_id}\n{self.name}\n{self.salary:.2f}\n{self.birth}\n"


class EmployeeList:
    """Employees walked from the front only."""

    def __init__(self) -> None:
        self._items: list[Employee] = []

    def prepend(self, employee: Employee) -> None:
        self._items.insert(0, employee)

    def remove(self, employee_id: int) -> bool:
        """Remove the first employee with ``employee_id``; return whether one was found."""
        for position, item in enumerate(self._items):
            if item.employee_id == employee_id:
                del self._items[position]
                return True
        return False

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class EmployeeDeque:
    """Employees that can be added and walked at either end."""

    def __init__(self) -> None:
        self._items: deque[Employee] = deque()

    def append(self, employee: Employee) -> None:
        self._items.append(employee)

    def prepend(self, employee: Employee) -> None:
        self._items.appendleft(employee)

    def remove(self, employee_id: int) -> int:
        """Remove every employee with ``employee_id`` and return how many went."""
        kept = deque(item for item in self._items if item.employee_id != employee_id)
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Employee]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _read_date(stream: Iterator[str]) -> Date:
    token = next(stream)
    if "/" in token:
        return Date.parse(token)
    return Date(int(token), int(next(stream)), int(next(stream)))


def read_employees(tokens: Iterable[str], count: int) -> list[Employee]:
    """Read ``count`` employees as ``id name salary date`` from ``tokens``.

    The date is either one ``day/month/year`` token or three separate numbers.
    Raises ValueError when the input runs out or a field is malformed.
    """
    stream = iter(tokens)
    employees: list[Employee] = []
    try:
        for _ in range(count):
            employee_id = int(next(stream))
            name = next(stream)
            salary = float(next(stream))
            birth = _read_date(stream)
            employees.append(Employee(employee_id, name, salary, birth))
    except StopIteration:
        raise ValueError("not enough input for the employees requested") from None
    return employees


def _read_tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Read employees from standard input and print the resulting list.

    ``singly`` reads a count, prepends that many employees, drops the one
    with id 2 and prints them; ``append`` and ``prepend`` read five employees
    into a deque at the back or the front and print them.
    """
    parser = argparse.ArgumentParser(description="Build and print a list of employees.")
    parser.add_argument("--mode", choices=("singly", "append", "prepend"), default="singly")
    args = parser.parse_args(argv)
    tokens = _read_tokens(sys.stdin)
    try:
        if args.mode == "singly":
            count = int(next(tokens))
            employees = EmployeeList()
            for employee in read_employees(tokens, count):
                employees.prepend(employee)
            employees.remove(_REMOVED_ID)
            output = "".join(employee.format_lines() for employee in employees)
        else:
            staff = EmployeeDeque()
            add = staff.append if args.mode == "append" else staff.prepend
            for employee in read_employees(tokens, _BATCH_SIZE):
                add(employee)
            output = "".join(employee.format_block() for employee in staff)
    except (StopIteration, ValueError) as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0