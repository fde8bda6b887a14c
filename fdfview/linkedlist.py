"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link: its content and the link after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with a head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from first to last."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the first node and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def clear(self, deleter: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to ``deleter`` first to last."""
        if deleter is not None:
            for content in self:
                deleter(content)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content, first to last."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` returns None for some content, the contents mapped so
        far are passed to ``deleter`` and ValueError is raised.
        """
        mapped = LinkedList()
        for content in self:
            result = func(content)
            if result is None:
                mapped.clear(deleter)
                raise ValueError(f"mapping produced no value for {content!r}")
            mapped.push_back(result)
        return mapped