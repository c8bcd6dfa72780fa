"""The student record stored by the trees and the hash table."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_RA = -1
PLACEHOLDER_NAME = " "


@dataclass(frozen=True)
class Student:
    """A student identified by a registration number (``ra``) and a name."""

    ra: int = PLACEHOLDER_RA
    name: str = PLACEHOLDER_NAME

    def is_placeholder(self) -> bool:
        """Return True for the empty record used to mark a free slot."""
        return self.ra == PLACEHOLDER_RA