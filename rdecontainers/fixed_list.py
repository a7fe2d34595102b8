"""Doubly linked list whose nodes live in a fixed pool of slots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_ROOT = 0


class FixedListPosition(Generic[T]):
    """Immutable position inside a FixedList; slot 0 is the end position."""

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: FixedList[T], index: int) -> None:
        self._owner = owner
        self._index = index

    @property
    def at_end(self) -> bool:
        """True for the position past the last element."""
        return self._index == _ROOT

    @property
    def value(self) -> T:
        """The element at this position."""
        if self.at_end:
            raise ValueError("end position has no value")
        return self._owner._values[self._index]

    @value.setter
    def value(self, new_value: T) -> None:
        if self.at_end:
            raise ValueError("end position has no value")
        self._owner._values[self._index] = new_value

    def advance(self) -> FixedListPosition[T]:
        """Return the position that follows this one."""
        return FixedListPosition(self._owner, self._owner._next[self._index])

    def retreat(self) -> FixedListPosition[T]:
        """Return the position that precedes this one."""
        return FixedListPosition(self._owner, self._owner._prev[self._index])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedListPosition):
            return self._owner is other._owner and self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self._owner), self._index))

    def __repr__(self) -> str:
        if self.at_end:
            return "FixedListPosition(<end>)"
        return f"FixedListPosition({self.value!r})"


class FixedList(Generic[T]):
    """Doubly linked list holding at most ``capacity`` elements.

    Adding to a full list raises OverflowError.
    """

    def __init__(self, capacity: int, iterable: Iterable[T] = ()) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero")
        self._capacity = capacity
        slots = capacity + 1
        self._values: list[Any] = [None] * slots
        self._next: list[int] = list(range(slots))
        self._prev: list[int] = list(range(slots))
        self._free: list[int] = list(range(slots))
        self._size = 0
        self.assign(iterable)

    @property
    def capacity(self) -> int:
        """Maximum number of elements."""
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        index = self._next[_ROOT]
        while index != _ROOT:
            following = self._next[index]
            yield self._values[index]
            index = following

    def __reversed__(self) -> Iterator[T]:
        index = self._prev[_ROOT]
        while index != _ROOT:
            preceding = self._prev[index]
            yield self._values[index]
            index = preceding

    def begin(self) -> FixedListPosition[T]:
        """Position of the first element, or end() when empty."""
        return FixedListPosition(self, self._next[_ROOT])

    def end(self) -> FixedListPosition[T]:
        """Position past the last element."""
        return FixedListPosition(self, _ROOT)

    def front(self) -> T:
        """The first element."""
        if not self._size:
            raise IndexError("front of empty list")
        return self._values[self._next[_ROOT]]

    def back(self) -> T:
        """The last element."""
        if not self._size:
            raise IndexError("back of empty list")
        return self._values[self._prev[_ROOT]]

    def _in_list(self, index: int) -> bool:
        return self._next[index] != index

    def _link_before(self, index: int, next_index: int) -> None:
        self._prev[index] = self._prev[next_index]
        self._next[self._prev[index]] = index
        self._prev[next_index] = index
        self._next[index] = next_index

    def _unlink(self, index: int) -> None:
        self._next[self._prev[index]] = self._next[index]
        self._prev[self._next[index]] = self._prev[index]
        self._next[index] = self._prev[index] = index

    def _new_node(self, value: T, next_index: int) -> int:
        if len(self._free) <= 1:  # the bottom entry is the root slot
            raise OverflowError(f"fixed list is full ({self._capacity} elements)")
        index = self._free.pop()
        self._values[index] = value
        self._link_before(index, next_index)
        self._size += 1
        return index

    def _release_node(self, index: int) -> T:
        value = self._values[index]
        self._unlink(index)
        self._values[index] = None
        self._free.append(index)
        self._size -= 1
        return value

    def push_front(self, value: T) -> None:
        """Add ``value`` at the front."""
        self._new_node(value, self._next[_ROOT])

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("pop from empty list")
        return self._release_node(self._next[_ROOT])

    def push_back(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._new_node(value, _ROOT)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop from empty list")
        return self._release_node(self._prev[_ROOT])

    def _check_owner(self, pos: FixedListPosition[T]) -> None:
        if pos._owner is not self:
            raise ValueError("position belongs to another list")

    def insert(self, pos: FixedListPosition[T], value: T) -> FixedListPosition[T]:
        """Insert ``value`` before ``pos`` and return the position of the new element."""
        self._check_owner(pos)
        if pos._index != _ROOT and not self._in_list(pos._index):
            raise ValueError("position no longer refers to an element")
        return FixedListPosition(self, self._new_node(value, pos._index))

    def erase(self, pos: FixedListPosition[T]) -> FixedListPosition[T]:
        """Remove the element at ``pos`` and return the position that followed it."""
        self._check_owner(pos)
        index = pos._index
        if index == _ROOT:
            raise ValueError("cannot erase the end position")
        if not self._in_list(index):
            raise ValueError("position no longer refers to an element")
        following = self._next[index]
        self._release_node(index)
        return FixedListPosition(self, following)

    def erase_range(
        self, first: FixedListPosition[T], last: FixedListPosition[T]
    ) -> FixedListPosition[T]:
        """Remove the elements in ``[first, last)`` and return ``last``."""
        self._check_owner(first)
        self._check_owner(last)
        while first != last:
            first = self.erase(first)
        return first

    def assign(self, iterable: Iterable[T]) -> None:
        """Replace the contents with the elements of ``iterable``."""
        values = list(iterable)
        if len(values) > self._capacity:
            raise OverflowError(f"fixed list is full ({self._capacity} elements)")
        self.clear()
        for value in values:
            self.push_back(value)

    def clear(self) -> None:
        """Remove every element and make every slot free again."""
        slots = self._capacity + 1
        self._values[:] = [None] * slots
        self._next[:] = range(slots)
        self._prev[:] = range(slots)
        self._free[:] = range(slots)
        self._size = 0

    def copy(self) -> FixedList[T]:
        """Return a shallow copy with the same capacity."""
        return FixedList(self._capacity, self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedList):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedList({self._capacity}, {list(self)!r})"