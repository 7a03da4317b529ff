"""A sorted singly linked list of integers holding no duplicates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class SortedLinkedList:
    """Singly linked list kept in ascending order, each value at most once."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _locate(self, value: int) -> tuple[_Node | None, _Node | None]:
        """Return the node before the first node not less than value, and that node."""
        previous, current = None, self._head
        while current is not None and current.value < value:
            previous, current = current, current.next
        return previous, current

    def member(self, value: int) -> bool:
        """Return True if value is in the list."""
        _, current = self._locate(value)
        return current is not None and current.value == value

    def insert(self, value: int) -> bool:
        """Insert value in order; return False if it was already present."""
        previous, current = self._locate(value)
        if current is not None and current.value == value:
            return False
        node = _Node(value, current)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        self._size += 1
        return True

    def delete(self, value: int) -> bool:
        """Remove value; return False if it was not present."""
        previous, current = self._locate(value)
        if current is None or current.value != value:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1
        return True

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.member(value)

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the list as 'List: a -> b -> NULL'."""
        return "List: " + "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"SortedLinkedList({list(self)!r})"