[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Classic data structures: stacks, queues, linked lists, binary search and AVL trees, and a hash table, each with a small command-line driver."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "linked list",
    "binary search tree",
    "avl tree",
    "hash table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas-bst = "estruturas.bst:main"
estruturas-avl = "estruturas.avl_tree:main"
estruturas-hash = "estruturas.hash_table:main"
estruturas-queue = "estruturas.array_queue:main"
estruturas-linked-queue = "estruturas.linked_queue:main"
estruturas-stack = "estruturas.array_stack:main"
estruturas-linked-stack = "estruturas.linked_stack:main"
estruturas-word-stack = "estruturas.word_stack:main"
estruturas-enrollments = "estruturas.enrollment_list:main"
estruturas-enrollment-deque = "estruturas.enrollment_deque:main"
estruturas-employees = "estruturas.employee_list:main"
estruturas-int-list = "estruturas.int_list:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.hatch.build.targets.sdist]
include = ["estruturas", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
