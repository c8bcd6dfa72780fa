# estruturas

A collection of classic data structures written in plain Python, each paired
with a small program that reads from standard input and prints its results.
The package has no dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `estruturas.errors` | `StructureError`, `FullError`, `EmptyError` |
| `estruturas.student` | `Student(ra, name)`, the record stored in the trees and the hash table |
| `estruturas.bst` | `BinarySearchTree`, an unbalanced binary search tree keyed by RA, and `format_student` |
| `estruturas.avl_tree` | `AVLTree`, a self-balancing binary search tree keyed by RA |
| `estruturas.hash_table` | `HashTable`, a fixed-size table addressed by `ra % size` |
| `estruturas.array_queue` | `ArrayQueue`, a FIFO queue with a fixed capacity (100 by default) |
| `estruturas.linked_queue` | `LinkedQueue`, an unbounded FIFO queue |
| `estruturas.array_stack` | `ArrayStack`, a LIFO stack with a fixed capacity (100 by default) |
| `estruturas.linked_stack` | `LinkedStack`, an unbounded LIFO stack |
| `estruturas.word_stack` | `WordStack`, a stack of words, and `run` for a `B`/`E` command stream |
| `estruturas.enrollment_list` | `Date`, `Enrollment` and `EnrollmentList`, plus `run` |
| `estruturas.enrollment_deque` | `EnrollmentDeque`, walkable from both ends, plus `run` |
| `estruturas.employee_list` | `Employee`, `EmployeeList`, `EmployeeDeque` and `read_employees` |
| `estruturas.int_list` | `IntList` and `build_list` |

Bounded structures raise `FullError` when they have no room left; taking an
item out of an empty structure raises `EmptyError`. Both derive from
`StructureError`. The trees raise `KeyError` when asked to remove an RA they
do not hold, and their `search` returns `None` in that case.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from estruturas.array_stack import ArrayStack
from estruturas.errors import EmptyError

stack = ArrayStack(3)
stack.push(1)
stack.push(2)
print(len(stack))              # 2
print(stack.pop())             # 2
print(stack.render(), end="")  # Pilha: [ 1 ]

try:
    ArrayStack(3).pop()
except EmptyError:
    print("nothing to pop")
```

```python
from estruturas.int_list import build_list

numbers = build_list([1, 21, 4, 6])
print(list(numbers))            # [1, 21, 4, 6]
print(list(reversed(numbers)))  # [6, 4, 21, 1]
print(numbers.format())         # "1 21 4 6 "
```

The trees hold `Student` records and are searched and pruned by RA; their
`preorder`, `inorder` and `postorder` methods return iterators of students:

```python
from estruturas.avl_tree import AVLTree
from estruturas.student import Student

tree = AVLTree()
for ra, name in [(3, "ana"), (1, "bia"), (2, "caio")]:
    tree.insert(Student(ra, name))
print([s.ra for s in tree.inorder()])  # [1, 2, 3]
print(tree.search(2))                  # Student(ra=2, name='caio')
tree.remove(2)
```

The hash table keeps one student per slot at `ra % size`:

```python
from estruturas.hash_table import HashTable
from estruturas.student import Student

table = HashTable(10, 5)
table.insert(Student(12, "ana"))
print(table.search(12))      # Student(ra=12, name='ana')
print(table.load_factor())   # 0.5
print(table.render(), end="")
```

## Command-line programs

Every program reads standard input, so a prepared file can be replayed with
shell redirection.

Menu-driven programs print their options and read a number choosing the next
action; `0` (or the end of input) ends the session:

```
estruturas-bst            # binary search tree of students
estruturas-avl            # AVL tree of students
estruturas-hash           # asks for the table size and item limit first
estruturas-queue          # bounded queue of integers
estruturas-linked-queue   # unbounded queue of integers
estruturas-stack          # bounded stack of integers
estruturas-linked-stack   # unbounded stack of integers
```

Batch programs read whitespace-separated input without prompting:

```
estruturas-word-stack < words.txt
estruturas-enrollments < enrollments.txt
estruturas-enrollment-deque < enrollments.txt
estruturas-employees --mode singly < employees.txt
estruturas-int-list 1 21 4 6
```

- `estruturas-word-stack`: `B` pops and prints the top word (or `Vazio`), `E`
  ends, any other word is pushed. At the end one `@` is printed per word left,
  or `!` if none is left.
- `estruturas-enrollments`: `1 number name day/month/year grade` appends,
  `2 number` removes, `3` lists, `4` lists in reverse, `5` prints the count,
  `0` prints one `-` per enrollment and stops.
- `estruturas-enrollment-deque`: `1 key number name day/month/year grade`
  inserts after the enrollment with `key` (or at the front), `2 number`
  removes, `3` lists from the first, `4` from the last, `0` prints one `*`
  per enrollment and stops.
- `estruturas-employees`: records are `id name salary date`, the date as
  `day/month/year` or three numbers. `--mode singly` (the default) reads a
  count, prepends that many employees, drops the one with id 2 and prints the
  rest; `--mode append` and `--mode prepend` read five employees into a deque
  at the back or the front and print them.
- `estruturas-int-list`: prints the given integers as a list, or `1 21 4 6`
  when none are given.

## Limitations

- Nothing is saved: every structure lives in memory for one session only.
- `HashTable` does not resolve collisions; inserting a student whose slot is
  taken replaces the one stored there, and its item count is not checked
  against `max_items` on insert (`is_full` only reports it).
- The trees' and linked structures' `is_full` always returns `False`.