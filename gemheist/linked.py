"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the next cell."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(Node(content))

    def nodes(self) -> Iterator[Node]:
        """Yield every node from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; a missing node is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` (and whatever follows it) after the last node."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def clear(self, release: Callable[[Any], Any]) -> None:
        """Pass each content to ``release`` in order, then empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            release(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], release: Callable[[Any], Any]
    ) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(Node(func(content)))
        except BaseException:
            result.clear(release)
            raise
        return result