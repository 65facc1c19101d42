"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: a content value and the node that follows it."""

    content: Any = None
    next: Node | None = None


def delete_node(node: Node | None, delete: Callable[[Any], object] | None) -> None:
    """Hand the node's content to delete and detach the node.

    Nothing happens when either the node or the delete function is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A chain of Node objects reached from its head."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.add_back(Node(content))

    def nodes(self) -> Iterator[Node]:
        """Yield every node from the head onwards."""
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

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, node: Node) -> None:
        """Make node the new head, ahead of the current one."""
        if node is None:
            raise TypeError("add_front needs a node")
        node.next = self.head
        self.head = node

    def add_back(self, node: Node | None) -> None:
        """Attach node after the current last node; on an empty list it becomes the head."""
        if self.head is None:
            self.head = node
            return
        if node is not None:
            last = self.last()
            assert last is not None
            last.next = node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        last = None
        for last in self.nodes():
            pass
        return last

    def clear(self, delete: Callable[[Any], object] | None) -> None:
        """Pass every content to delete and empty the list.

        Without a delete function the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], object] | None) -> None:
        """Call func on every content in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any] | None,
        delete: Callable[[Any], object] | None,
    ) -> LinkedList:
        """Build a new list of func(content) for every content.

        If func raises part way, the contents built so far are passed to
        delete before the error propagates. An empty list or a missing func
        gives an empty list.
        """
        result = LinkedList()
        if self.head is None or func is None:
            return result
        try:
            for content in self:
                result.add_back(Node(func(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result