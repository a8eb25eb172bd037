"""
Tower of Hanoi - Peg

A bounded last-in-first-out stack of disk sizes. The peg only guards its own
capacity; size ordering is checked by the game before every push.
"""

from typing import ClassVar

from src.engine.base import CapacityError, EmptyPegError


class Peg:
    """Bounded stack of disk sizes, bottom of the list is the bottom of the peg."""

    DEFAULT_CAPACITY: ClassVar[int] = 100

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Peg capacity must be positive, got {capacity}.")
        self._capacity = capacity
        self._disks: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, disk: int) -> None:
        """
        Place a disk on top of the peg.

        Raises:
            CapacityError: If the peg is already full
        """
        if self.is_full():
            raise CapacityError(f"Peg is full (capacity {self._capacity}).")
        self._disks.append(disk)

    def pop(self) -> int:
        """
        Remove and return the top disk.

        Raises:
            EmptyPegError: If the peg holds no disks
        """
        if self.is_empty():
            raise EmptyPegError("Cannot pop from an empty peg.")
        return self._disks.pop()

    def peek(self) -> int | None:
        """Top disk, or None if the peg is empty."""
        if self.is_empty():
            return None
        return self._disks[-1]

    def size(self) -> int:
        return len(self._disks)

    def is_empty(self) -> bool:
        return not self._disks

    def is_full(self) -> bool:
        return len(self._disks) >= self._capacity

    def contents(self) -> tuple[int, ...]:
        """Disks from bottom to top."""
        return tuple(self._disks)

    def clear(self) -> None:
        self._disks.clear()

    def __len__(self) -> int:
        return len(self._disks)

    def __repr__(self) -> str:
        return f"Peg({list(self._disks)!r}, capacity={self._capacity})"
