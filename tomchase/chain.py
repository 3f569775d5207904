"""A singly linked chain of values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link: its content and the link after it."""

    content: Any
    next: Optional[Node] = None


class Chain:
    """A singly linked list that can grow at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Put ``content`` at the start of the chain."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Put ``content`` at the end of the chain."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty chain."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` if given."""
        while self.head is not None:
            self.remove_first(delete)

    def remove_first(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first node and return its content, after passing it to ``delete``."""
        if self.head is None:
            raise IndexError("remove from an empty chain")
        node = self.head
        self.head = node.next
        if delete is not None:
            delete(node.content)
        return node.content

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> Chain:
        """A new chain of ``func`` applied to every content.

        If ``func`` raises, the contents made so far go to ``delete`` and
        the error propagates.
        """
        result = Chain()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())