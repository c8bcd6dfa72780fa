"""Fixed-size hash table of students addressed by ``ra % size``."""

from __future__ import annotations

import sys
from typing import Optional

from estruturas.bst import _ask, _menu_loop, _parse_args, _read_tokens
from estruturas.student import Student


class HashTable:
    """Open table with one slot per position; a colliding insert overwrites."""

    def __init__(self, size: int, max_items: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self.max_items = max_items
        self._count = 0
        self._slots = [Student() for _ in range(size)]

    def _position(self, ra: int) -> int:
        return ra % self.size

    def is_full(self) -> bool:
        return self._count == self.max_items

    def __len__(self) -> int:
        return self._count

    def insert(self, student: Student) -> None:
        """Store ``student`` in its slot, replacing whatever was there."""
        self._slots[self._position(student.ra)] = student
        self._count += 1

    def remove(self, ra: int) -> None:
        """Clear the slot that ``ra`` maps to, if it holds a student."""
        position = self._position(ra)
        if not self._slots[position].is_placeholder():
            self._slots[position] = Student()
            self._count -= 1

    def search(self, ra: int) -> Optional[Student]:
        """Return the stored student with ``ra``, or None."""
        stored = self._slots[self._position(ra)]
        if stored.is_placeholder() or stored.ra != ra:
            return None
        return stored

    def render(self) -> str:
        lines = ["Tabela hash:"]
        lines.extend(
            f"{position} : {student.ra} {student.name}"
            for position, student in enumerate(self._slots)
            if not student.is_placeholder()
        )
        return "\n".join(lines) + "\n"

    def load_factor(self) -> float:
        return self.max_items / self.size


_HASH_MENU = (
    "Digite 0 para parar o algoritmo!\n"
    "Digite 1 para inserir um elemento!\n"
    "Digite 2 para remover um elemento!\n"
    "Digite 3 para buscar um elemento!\n"
    "Digite 4 para imprimir a Hash!"
)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive hash table menu over standard input."""
    _parse_args(argv, "Interactive hash table of students.")
    tokens = _read_tokens(sys.stdin)
    print("Programa gerador de Hash!")
    try:
        size = int(_ask(tokens, "Digite o tamanho da Hash: ", end=""))
        max_items = int(_ask(tokens, "Digite o numero maximo de elementos: ", end=""))
        table = HashTable(size, max_items)
    except (StopIteration, ValueError):
        return 0
    print(f"O fator de carga é: {table.load_factor():g}")

    def insert() -> None:
        ra = int(_ask(tokens, "Digite o RA do aluno: ", end=""))
        name = _ask(tokens, "Digite o nome do aluno: ", end="")
        table.insert(Student(ra, name))

    def remove() -> None:
        table.remove(int(_ask(tokens, "Digite o RA do aluno a ser removido: ", end="")))

    def search() -> None:
        found = table.search(int(_ask(tokens, "Digite o RA do aluno a ser buscado: ", end="")))
        if found is None:
            print("Aluno nao encontrado!")
        else:
            print(f"Aluno encontrado!\nRa: {found.ra}\nNome: {found.name}")

    _menu_loop(
        _HASH_MENU,
        tokens,
        {0: lambda: None, 1: insert, 2: remove, 3: search, 4: lambda: print(table.render(), end="")},
        lambda: print("Opção invalida!"),
        prompt="Opcao: ",
    )
    return 0