"""A bounded stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """A last-in first-out stack holding at most ``capacity`` integers."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Place a value on top; raise StackFullError at capacity."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={self._items!r})"