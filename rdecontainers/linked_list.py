"""Doubly linked list built around a sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _link_before(node: Any, next_node: Any) -> None:
    """Link an unlinked ``node`` in front of ``next_node``."""
    if node.next is not node:
        raise ValueError("node is already linked")
    node.prev = next_node.prev
    node.prev.next = node
    next_node.prev = node
    node.next = next_node


def _unlink(node: Any) -> None:
    """Take ``node`` out of its ring, leaving it pointing at itself."""
    if node.next is node:
        raise ValueError("node is not linked")
    node.prev.next = node.next
    node.next.prev = node.prev
    node.next = node.prev = node


def _walk(root: Any, direction: str) -> Iterator[Any]:
    """Yield the nodes of the ring around ``root`` following ``direction``."""
    node = getattr(root, direction)
    while node is not root:
        following = getattr(node, direction)
        yield node
        node = following


class _Node:
    __slots__ = ("prev", "next", "value")

    def __init__(self, value: Any = None) -> None:
        self.prev: _Node = self
        self.next: _Node = self
        self.value = value

    def in_list(self) -> bool:
        return self.next is not self

    def reset(self) -> None:
        self.next = self.prev = self


class ListPosition(Generic[T]):
    """Immutable position inside a LinkedList; the end position is past the last element."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: LinkedList[T], node: _Node) -> None:
        self._owner = owner
        self._node = node

    @property
    def at_end(self) -> bool:
        """True for the position past the last element."""
        return self._node is self._owner._root

    def _element(self) -> _Node:
        if self.at_end:
            raise ValueError("end position has no value")
        return self._node

    @property
    def value(self) -> T:
        """The element at this position."""
        return self._element().value

    @value.setter
    def value(self, new_value: T) -> None:
        self._element().value = new_value

    def advance(self) -> ListPosition[T]:
        """Return the position that follows this one."""
        return ListPosition(self._owner, self._node.next)

    def retreat(self) -> ListPosition[T]:
        """Return the position that precedes this one."""
        return ListPosition(self._owner, self._node.prev)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListPosition):
            return self._node is other._node
        return NotImplemented

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self.at_end:
            return "ListPosition(<end>)"
        return f"ListPosition({self._node.value!r})"


class LinkedList(Generic[T]):
    """Doubly linked list with positions that stay valid across other edits."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._root = _Node()
        self._size = 0
        self.assign(iterable)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in _walk(self._root, "next"))

    def __reversed__(self) -> Iterator[T]:
        return (node.value for node in _walk(self._root, "prev"))

    def begin(self) -> ListPosition[T]:
        """Position of the first element, or end() when empty."""
        return ListPosition(self, self._root.next)

    def end(self) -> ListPosition[T]:
        """Position past the last element."""
        return ListPosition(self, self._root)

    def _edge(self, direction: str) -> _Node:
        if not self._size:
            raise IndexError("list is empty")
        return getattr(self._root, direction)

    def _push(self, value: T, before: _Node) -> _Node:
        node = _Node(value)
        _link_before(node, before)
        self._size += 1
        return node

    def _remove(self, node: _Node) -> T:
        _unlink(node)
        self._size -= 1
        return node.value

    def front(self) -> T:
        """The first element."""
        return self._edge("next").value

    def back(self) -> T:
        """The last element."""
        return self._edge("prev").value

    def push_front(self, value: T) -> None:
        """Add ``value`` at the front."""
        self._push(value, self._root.next)

    def pop_front(self) -> T:
        """Remove and return the first element."""
        return self._remove(self._edge("next"))

    def push_back(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._push(value, self._root)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        return self._remove(self._edge("prev"))

    def _check_owner(self, pos: ListPosition[T]) -> None:
        if pos._owner is not self:
            raise ValueError("position belongs to another list")

    def insert(self, pos: ListPosition[T], value: T) -> ListPosition[T]:
        """Insert ``value`` before ``pos`` and return the position of the new element."""
        self._check_owner(pos)
        if pos._node is not self._root and not pos._node.in_list():
            raise ValueError("position no longer refers to an element")
        return ListPosition(self, self._push(value, pos._node))

    def erase(self, pos: ListPosition[T]) -> ListPosition[T]:
        """Remove the element at ``pos`` and return the position that followed it."""
        self._check_owner(pos)
        node = pos._node
        if node is self._root:
            raise ValueError("cannot erase the end position")
        if not node.in_list():
            raise ValueError("position no longer refers to an element")
        following = node.next
        self._remove(node)
        return ListPosition(self, following)

    def erase_range(self, first: ListPosition[T], last: ListPosition[T]) -> ListPosition[T]:
        """Remove the elements in ``[first, last)`` and return ``last``."""
        self._check_owner(first)
        self._check_owner(last)
        while first != last:
            first = self.erase(first)
        return first

    def assign(self, iterable: Iterable[T]) -> None:
        """Replace the contents with the elements of ``iterable``."""
        values = list(iterable)
        self.clear()
        for value in values:
            self.push_back(value)

    def clear(self) -> None:
        """Remove every element."""
        for node in _walk(self._root, "next"):
            node.reset()
        self._root.reset()
        self._size = 0

    def copy(self) -> LinkedList[T]:
        """Return a shallow copy."""
        return LinkedList(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedList):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"