"""A simple LIFO stack of pixel indices for recursive linking."""

from __future__ import annotations

from .errors import StackUnderflowError


class Stack:
    """Last-in, first-out stack of pixel indices."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push a value onto the top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the most recently pushed value."""
        if not self._items:
            raise StackUnderflowError("Stack underflow error.")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack(size={len(self._items)})"