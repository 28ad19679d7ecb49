"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to *delete* first."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call *f* on each content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        If *f* fails, the contents built so far are passed to *delete*
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"