"""A singly linked list with the usual front/back operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One element of a LinkedList."""

    content: T
    next: Optional[Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list holding arbitrary contents."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Node[T] | None = None
        for item in reversed(list(items)):
            self.push_front(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert content at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: T) -> Node[T]:
        """Append content at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node[T] | None:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U]) -> LinkedList[U]:
        """A new list holding func applied to every content, in order."""
        return LinkedList(func(content) for content in self)

    def clear(self, on_delete: Callable[[T], Any] | None = None) -> None:
        """Empty the list, passing each content to on_delete when given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if on_delete is not None:
                on_delete(node.content)
            node.next = None
            node = following

    def swap_first(self) -> None:
        """Exchange the first two elements; lists shorter than two are unchanged."""
        first = self.head
        if first is None or first.next is None:
            return
        second = first.next
        first.next = second.next
        second.next = first
        self.head = second