"""Doubly linked list whose elements carry their own links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from rdecontainers.linked_list import _link_before, _unlink, _walk


class IntrusiveListNode:
    """Base class for objects stored in an IntrusiveList.

    The node holds its own ``next`` and ``prev`` links.  An unlinked node
    points to itself.  Subclasses must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        self.next: IntrusiveListNode = self
        self.prev: IntrusiveListNode = self

    def in_list(self) -> bool:
        """True when the node is linked into a list."""
        return self.next is not self


N = TypeVar("N", bound=IntrusiveListNode)


class IntrusiveList(Generic[N]):
    """Doubly linked list of IntrusiveListNode objects.

    The list does not own its nodes; it only links them.  Positions are the
    nodes themselves, and ``end()`` is a sentinel node that follows the last
    element.  Walk positions with a node's ``next`` and ``prev`` attributes.
    """

    def __init__(self) -> None:
        self._root = IntrusiveListNode()

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self._root, "next"))

    def __iter__(self) -> Iterator[N]:
        return _walk(self._root, "next")

    def __bool__(self) -> bool:
        return self._root.in_list()

    def begin(self) -> IntrusiveListNode:
        """The first node, or end() when the list is empty."""
        return self._root.next

    def end(self) -> IntrusiveListNode:
        """The sentinel position past the last node."""
        return self._root

    def _edge(self, direction: str) -> N:
        if not self:
            raise IndexError("list is empty")
        return getattr(self._root, direction)

    def _take(self, node: N) -> N:
        _unlink(node)
        return node

    def front(self) -> N:
        """The first node."""
        return self._edge("next")

    def back(self) -> N:
        """The last node."""
        return self._edge("prev")

    def push_back(self, node: N) -> None:
        """Link ``node`` at the back."""
        _link_before(node, self._root)

    def push_front(self, node: N) -> None:
        """Link ``node`` at the front."""
        _link_before(node, self._root.next)

    def pop_back(self) -> N:
        """Unlink and return the last node."""
        return self._take(self._edge("prev"))

    def pop_front(self) -> N:
        """Unlink and return the first node."""
        return self._take(self._edge("next"))

    def insert(self, pos: IntrusiveListNode, node: N) -> N:
        """Link ``node`` before ``pos`` and return it."""
        _link_before(node, pos)
        return node

    def erase(self, pos: IntrusiveListNode) -> IntrusiveListNode:
        """Unlink the node at ``pos`` and return the position that followed it."""
        if pos is self._root:
            raise ValueError("cannot erase the end position")
        following = pos.next
        _unlink(pos)
        return following

    def erase_range(
        self, first: IntrusiveListNode, last: IntrusiveListNode
    ) -> IntrusiveListNode:
        """Unlink the nodes in ``[first, last)`` and return ``last``."""
        while first is not last:
            first = self.erase(first)
        return first

    def clear(self) -> None:
        """Unlink every node."""
        self.erase_range(self.begin(), self.end())

    def remove(self, node: N) -> None:
        """Unlink ``node`` from the list in constant time."""
        if node is self._root:
            raise ValueError("cannot remove the end position")
        _unlink(node)

    def __repr__(self) -> str:
        return f"IntrusiveList({list(self)!r})"