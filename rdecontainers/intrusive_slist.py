"""Singly linked list whose elements carry their own link."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar


class IntrusiveSListNode:
    """Base class for objects stored in an IntrusiveSList.

    The node holds its own ``next`` link; an unlinked node points to itself.
    Subclasses must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        self.next: IntrusiveSListNode = self

    def in_list(self) -> bool:
        """True when the node is linked into a list."""
        return self.next is not self


N = TypeVar("N", bound=IntrusiveSListNode)


class IntrusiveSList(Generic[N]):
    """Singly linked list of IntrusiveSListNode objects.

    The list does not own its nodes.  Positions are the nodes themselves and
    ``end()`` is a sentinel node that follows the last element.
    """

    def __init__(self) -> None:
        self._root = IntrusiveSListNode()

    @staticmethod
    def _link_after(node: IntrusiveSListNode, prev_node: IntrusiveSListNode) -> None:
        if node.in_list():
            raise ValueError("node is already linked into a list")
        node.next = prev_node.next
        prev_node.next = node

    def _unlink_after(self, node: IntrusiveSListNode) -> IntrusiveSListNode:
        victim = node.next
        if victim is self._root or victim is node:
            raise ValueError("no node follows this position")
        node.next = victim.next
        victim.next = victim
        return victim

    def __len__(self) -> int:
        count = 0
        node = self._root.next
        while node is not self._root:
            count += 1
            node = node.next
        return count

    def __iter__(self) -> Iterator[N]:
        node = self._root.next
        while node is not self._root:
            following = node.next
            yield node  # type: ignore[misc]
            node = following

    def __bool__(self) -> bool:
        return self._root.in_list()

    def begin(self) -> IntrusiveSListNode:
        """The first node, or end() when the list is empty."""
        return self._root.next

    def end(self) -> IntrusiveSListNode:
        """The sentinel position past the last node."""
        return self._root

    def front(self) -> N:
        """The first node."""
        if not self:
            raise IndexError("front of empty list")
        return self._root.next  # type: ignore[return-value]

    def push_front(self, node: N) -> None:
        """Link ``node`` at the front."""
        self._link_after(node, self._root)

    def pop_front(self) -> N:
        """Unlink and return the first node."""
        if not self:
            raise IndexError("pop from empty list")
        return self._unlink_after(self._root)  # type: ignore[return-value]

    def insert(self, pos: IntrusiveSListNode, node: N) -> N:
        """Link ``node`` before ``pos`` and return it; linear time."""
        return self.insert_after(self.previous(pos), node)

    def insert_after(self, pos: IntrusiveSListNode, node: N) -> N:
        """Link ``node`` after ``pos`` and return it."""
        self._link_after(node, pos)
        return node

    def erase(self, pos: IntrusiveSListNode) -> IntrusiveSListNode:
        """Unlink the node at ``pos`` and return the position that followed it."""
        if pos is self._root:
            raise ValueError("cannot erase the end position")
        prev = self.previous(pos)
        self._unlink_after(prev)
        return prev.next

    def erase_after(self, pos: IntrusiveSListNode) -> N:
        """Unlink and return the node that follows ``pos``."""
        return self._unlink_after(pos)  # type: ignore[return-value]

    def previous(self, pos: IntrusiveSListNode) -> IntrusiveSListNode:
        """Return the position whose ``next`` is ``pos``."""
        if pos is not self._root and not pos.in_list():
            raise ValueError("position is not linked into a list")
        prev = pos
        while prev.next is not pos:
            prev = prev.next
        return prev

    def get_iterator(self, node: N) -> N:
        """Return the position of a linked ``node``."""
        if not node.in_list():
            raise ValueError("node is not linked into a list")
        return node

    def erase_range(
        self, first: IntrusiveSListNode, last: IntrusiveSListNode
    ) -> IntrusiveSListNode:
        """Unlink the nodes in ``[first, last)`` and return ``last``."""
        if first is last:
            return last
        prev = self.previous(first)
        while prev.next is not last:
            self._unlink_after(prev)
        return last

    def clear(self) -> None:
        """Unlink every node."""
        self.erase_range(self.begin(), self.end())

    def remove(self, node: N) -> None:
        """Unlink ``node``; linear time."""
        prev = self._root
        while prev.next is not node:
            prev = prev.next
            if prev is self._root:
                raise ValueError("node is not in this list")
        self._unlink_after(prev)

    def __repr__(self) -> str:
        return f"IntrusiveSList({list(self)!r})"