"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that supports adding at either end, mapping and clearing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item: Any) -> None:
        """Insert item before the first element."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Append item after the last element."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the last item; raise IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every item, front to back."""
        for item in self:
            func(item)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of func(item) for every item.

        A result of None counts as a failure: every item already produced is
        handed to release, and ValueError is raised.
        """
        mapped = LinkedList()
        for item in self:
            result = func(item)
            if result is None:
                mapped.clear(release)
                raise ValueError(f"mapping failed for item {item!r}")
            mapped.push_back(result)
        return mapped

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every item, handing each to release first when given."""
        if release is not None:
            for item in self:
                release(item)
        self._head = None
        self._tail = None
        self._size = 0