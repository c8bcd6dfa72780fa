"""Exceptions raised by the data structures in this package."""


class StructureError(Exception):
    """Base class for errors raised by a data structure."""


class FullError(StructureError):
    """Raised when an item is added to a structure that has no room left."""


class EmptyError(StructureError):
    """Raised when an item is taken from a structure that holds none."""