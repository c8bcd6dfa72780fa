"""Stacks, queues, linked lists, search trees and a hash table, with command-line drivers."""

__version__ = "0.1.0"