"""Self-balancing (AVL) binary search tree of students keyed by registration number."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional

from estruturas.bst import (
    _inorder,
    _leftmost,
    _parse_args,
    _postorder,
    _preorder,
    _read_tokens,
    _search,
    _tree_session,
)
from estruturas.student import Student


@dataclass
class AVLNode:
    """A tree node holding one student and its balance factor.

    ``balance`` is the height of the right subtree minus the height of the left.
    """

    student: Student
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    balance: int = 0


def _rotate_right(parent: AVLNode) -> AVLNode:
    new_parent = parent.left
    assert new_parent is not None
    parent.left = new_parent.right
    new_parent.right = parent
    return new_parent


def _rotate_left(parent: AVLNode) -> AVLNode:
    new_parent = parent.right
    assert new_parent is not None
    parent.right = new_parent.left
    new_parent.left = parent
    return new_parent


def _rotate_left_right(parent: AVLNode) -> AVLNode:
    assert parent.left is not None
    parent.left = _rotate_left(parent.left)
    return _rotate_right(parent)


def _rotate_right_left(parent: AVLNode) -> AVLNode:
    assert parent.right is not None
    parent.right = _rotate_right(parent.right)
    return _rotate_left(parent)


def _rebalance(node: AVLNode) -> AVLNode:
    """Rotate ``node`` if its balance factor is out of range; return the new subtree root."""
    if node.balance == -2:
        child = node.left
        assert child is not None
        if child.balance == -1:
            node.balance = 0
            child.balance = 0
            return _rotate_right(node)
        if child.balance == 0:
            node.balance = -1
            child.balance = 1
            return _rotate_right(node)
        grandchild = child.right
        assert grandchild is not None
        if grandchild.balance == -1:
            node.balance, child.balance = 1, 0
        elif grandchild.balance == 0:
            node.balance, child.balance = 0, 0
        else:
            node.balance, child.balance = 0, -1
        grandchild.balance = 0
        return _rotate_left_right(node)
    if node.balance == 2:
        child = node.right
        assert child is not None
        if child.balance == 1:
            node.balance = 0
            child.balance = 0
            return _rotate_left(node)
        if child.balance == 0:
            node.balance = 1
            child.balance = -1
            return _rotate_left(node)
        grandchild = child.left
        assert grandchild is not None
        if grandchild.balance == 1:
            node.balance, child.balance = -1, 0
        elif grandchild.balance == 0:
            node.balance, child.balance = 0, 0
        else:
            node.balance, child.balance = 0, 1
        grandchild.balance = 0
        return _rotate_right_left(node)
    return node


class AVLTree:
    """Height-balanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def is_empty(self) -> bool:
        return self.root is None

    def is_full(self) -> bool:
        """A node can always be allocated, so the tree is never full."""
        return False

    def insert(self, student: Student) -> None:
        self.root, _ = self._insert(self.root, student)

    def _insert(self, node: Optional[AVLNode], student: Student) -> tuple[AVLNode, bool]:
        if node is None:
            return AVLNode(student), True
        if student.ra < node.student.ra:
            node.left, grew = self._insert(node.left, student)
            if grew:
                node.balance -= 1
        else:
            node.right, grew = self._insert(node.right, student)
            if grew:
                node.balance += 1
        node = _rebalance(node)
        if grew and node.balance == 0:
            grew = False
        return node, grew

    def remove(self, ra: int) -> None:
        """Remove the first student found with ``ra``; KeyError if absent."""
        self.root, _ = self._remove(self.root, ra)

    def _remove(self, node: Optional[AVLNode], ra: int) -> tuple[Optional[AVLNode], bool]:
        if node is None:
            raise KeyError(ra)
        if ra < node.student.ra:
            node.left, shrank = self._remove(node.left, ra)
            if shrank:
                node.balance += 1
        elif ra > node.student.ra:
            node.right, shrank = self._remove(node.right, ra)
            if shrank:
                node.balance -= 1
        else:
            replacement, shrank = self._delete_node(node)
            if replacement is None:
                return None, shrank
            node = replacement
        node = _rebalance(node)
        if shrank and node.balance != 0:
            shrank = False
        return node, shrank

    def _delete_node(self, node: AVLNode) -> tuple[Optional[AVLNode], bool]:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _leftmost(node.right)
        node.student = successor.student
        node.right, shrank = self._remove(node.right, successor.student.ra)
        if shrank:
            node.balance -= 1
        return node, shrank

    def search(self, ra: int) -> Optional[Student]:
        """Return the student with ``ra``, or None when it is not stored."""
        return _search(self.root, ra)

    def preorder(self) -> Iterator[Student]:
        return _preorder(self.root)

    def inorder(self) -> Iterator[Student]:
        return _inorder(self.root)

    def postorder(self) -> Iterator[Student]:
        return _postorder(self.root)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive AVL tree menu over standard input."""
    _parse_args(argv, "Interactive AVL tree of students.")
    _tree_session(AVLTree(), _read_tokens(sys.stdin))
    return 0