"""A singly linked list with front/back insertion, traversal and mapping."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert value at the front and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the end and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            following = current.next
            yield current
            current = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def pop_front(self, on_delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first value, pass it to on_delete if given, and return it."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if on_delete is not None:
            on_delete(node.value)
        return node.value

    def clear(self, on_delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every value, passing each to on_delete in order if given."""
        nodes = list(self._nodes())
        self._head = self._tail = None
        self._size = 0
        for node in nodes:
            node.next = None
            if on_delete is not None:
                on_delete(node.value)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func(value) for every value."""
        return LinkedList(func(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"