"""A singly linked list whose nodes carry content and a rank index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One list cell: its content, a rank index and the following node."""

    content: Any
    index: int = 0
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with constant-time insertion at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front and return it."""
        node = Node(content, next=self.head)
        self.head = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node and return its content.

        ``delete`` is called on the content first when given. Raises
        IndexError on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._size = 0

    def iterate(self, function: Optional[Callable[[Any], object]]) -> None:
        """Call ``function`` on every content in order; None does nothing."""
        if function is None:
            return
        for content in self:
            function(content)

    def map(
        self, function: Callable[[Any], Any], delete: Deleter = None
    ) -> "LinkedList":
        """A new list of ``function`` applied to every content.

        If ``function`` returns None, the contents built so far are passed to
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = function(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.add_back(mapped)
        return result