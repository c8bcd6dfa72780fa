"""Binary search tree of students keyed by registration number."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, TextIO

from estruturas.student import Student


@dataclass
class Node:
    """A tree node holding one student."""

    student: Student
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def is_empty(self) -> bool:
        return self.root is None

    def is_full(self) -> bool:
        """A node can always be allocated, so the tree is never full."""
        return False

    def insert(self, student: Student) -> None:
        new_node = Node(student)
        if self.root is None:
            self.root = new_node
            return
        current = self.root
        while True:
            if student.ra < current.student.ra:
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right

    def remove(self, ra: int) -> None:
        """Remove the first student found with ``ra``; KeyError if absent."""
        self.root = self._remove(self.root, ra)

    def _remove(self, node: Optional[Node], ra: int) -> Optional[Node]:
        if node is None:
            raise KeyError(ra)
        if ra < node.student.ra:
            node.left = self._remove(node.left, ra)
        elif ra > node.student.ra:
            node.right = self._remove(node.right, ra)
        else:
            return self._delete_node(node)
        return node

    def _delete_node(self, node: Node) -> Optional[Node]:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _leftmost(node.right)
        node.student = successor.student
        node.right = self._remove(node.right, successor.student.ra)
        return node

    def search(self, ra: int) -> Optional[Student]:
        """Return the student with ``ra``, or None when it is not stored."""
        return _search(self.root, ra)

    def preorder(self) -> Iterator[Student]:
        return _preorder(self.root)

    def inorder(self) -> Iterator[Student]:
        return _inorder(self.root)

    def postorder(self) -> Iterator[Student]:
        return _postorder(self.root)


def _leftmost(node: Any) -> Any:
    while node.left is not None:
        node = node.left
    return node


def _search(node: Any, ra: int) -> Optional[Student]:
    while node is not None:
        if ra < node.student.ra:
            node = node.left
        elif ra > node.student.ra:
            node = node.right
        else:
            return node.student
    return None


def _preorder(node: Any) -> Iterator[Student]:
    if node is not None:
        yield node.student
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Any) -> Iterator[Student]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.student
        yield from _inorder(node.right)


def _postorder(node: Any) -> Iterator[Student]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.student


def format_student(student: Student) -> str:
    """Render a student as ``name: ra``."""
    return f"{student.name}: {student.ra}"


def _read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield the whitespace-separated words of ``stream``."""
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, end: str = "\n") -> str:
    """Show ``prompt`` and return the next input word."""
    print(prompt, end=end)
    return next(tokens)


def _parse_args(argv: Optional[list[str]], description: str) -> argparse.Namespace:
    return argparse.ArgumentParser(description=description).parse_args(argv)


def _menu_loop(
    menu: str,
    tokens: Iterator[str],
    handlers: dict[int, Callable[[], None]],
    fallback: Optional[Callable[[], None]] = None,
    prompt: str = "",
) -> None:
    """Show ``menu`` and dispatch options until 0 or the input runs out."""
    try:
        while True:
            print(menu)
            if prompt:
                print(prompt, end="")
            option = int(next(tokens))
            handler = handlers.get(option, fallback)
            if handler is not None:
                handler()
            if option == 0:
                break
    except (StopIteration, ValueError):
        pass


_TREE_MENU = (
    "Digite 0 para parar o algoritmo!\n"
    "Digite 1 para inserir um elemento!\n"
    "Digite 2 para remover um elemento!\n"
    "Digite 3 para buscar um elemento!\n"
    "Digite 4 para imprimir a arvore!"
)
_ORDER_MENU = (
    "Digite 1 para fazer a impressao em pre ordem!\n"
    "Digite 2 para fazer a impressao em ordem!\n"
    "Digite 3 para fazer a impressao em pos ordem!"
)


def _tree_session(tree: Any, tokens: Iterator[str]) -> None:
    """Drive the interactive menu shared by the student trees."""

    def insert() -> None:
        name = _ask(tokens, "Digite o nome do aluno:")
        ra = int(_ask(tokens, "Digite o RA do aluno:"))
        if tree.is_full():
            print("A Árvore esta cheia!")
            print("Nao foi possivel inserir o elemento!")
        else:
            tree.insert(Student(ra, name))

    def remove() -> None:
        ra = int(_ask(tokens, "Digite o RA do aluno a ser removido!"))
        try:
            tree.remove(ra)
        except KeyError:
            print("Elemento nao encontrado!")

    def search() -> None:
        found = tree.search(int(_ask(tokens, "Digite o RA do aluno a ser buscado!")))
        if found is None:
            print("Elemento nao encontrado!")
        else:
            print(f"Elemento encontrado!\nNome: {found.name}\nRA: {found.ra}")

    def show() -> None:
        order = int(_ask(tokens, _ORDER_MENU))
        traversal = {1: tree.preorder, 2: tree.inorder}.get(order, tree.postorder)
        for student in traversal():
            print(format_student(student))

    _menu_loop(
        _TREE_MENU,
        tokens,
        {1: insert, 2: remove, 3: search, 4: show},
        lambda: print("Opcao invalida!"),
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive tree menu over standard input."""
    _parse_args(argv, "Interactive binary search tree of students.")
    _tree_session(BinarySearchTree(), _read_tokens(sys.stdin))
    return 0