"""Comparison functors and small sequence algorithms."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any, Any], bool]


def less(lhs: Any, rhs: Any) -> bool:
    """Return True when ``lhs`` orders before ``rhs``."""
    return lhs < rhs


def greater(lhs: Any, rhs: Any) -> bool:
    """Return True when ``lhs`` orders after ``rhs``."""
    return lhs > rhs


def equal_to(lhs: Any, rhs: Any) -> bool:
    """Return True when both operands compare equal."""
    return lhs == rhs


def lower_bound(items: Sequence[T], value: Any, pred: Predicate = less) -> int:
    """Return the first index whose element is not ordered before ``value``.

    ``items`` must be sorted with respect to ``pred``.  When every element is
    ordered before ``value`` the length of ``items`` is returned.
    """
    first = 0
    count = len(items)
    while count > 0:
        half = count >> 1
        mid = first + half
        if pred(items[mid], value):
            first = mid + 1
            count -= half + 1
        else:
            count = half
    return first


def upper_bound(items: Sequence[T], value: Any, pred: Predicate = less) -> int:
    """Return the first index whose element is ordered after ``value``.

    ``items`` must be sorted with respect to ``pred``.  When no element is
    ordered after ``value`` the length of ``items`` is returned.
    """
    first = 0
    count = len(items)
    while count > 0:
        half = count >> 1
        mid = first + half
        if not pred(value, items[mid]):
            first = mid + 1
            count -= half + 1
        else:
            count = half
    return first


def find(items: Iterable[T], value: Any) -> int:
    """Return the index of the first element equal to ``value``.

    When there is none, the number of elements is returned.
    """
    position = 0
    for position, item in enumerate(items):
        if item == value:
            return position
    else:
        return position + 1 if _has_items(items) else 0


def find_if(items: Iterable[T], value: Any, pred: Predicate) -> int:
    """Return the index of the first element for which ``pred(element, value)`` holds.

    When there is none, the number of elements is returned.
    """
    count = 0
    for count, item in enumerate(items, start=1):
        if pred(item, value):
            return count - 1
    return count


def _has_items(items: Iterable[Any]) -> bool:
    try:
        return len(items) > 0  # type: ignore[arg-type]
    except TypeError:
        return True


def accumulate(items: Iterable[T], initial: Any) -> Any:
    """Add every element onto ``initial`` and return the result."""
    result = initial
    for item in items:
        result += item
    return result


def absolute(x: Any) -> Any:
    """Return the absolute value of ``x``."""
    return x if x >= type(x)(0) else -x


def minimum(x: T, y: T) -> T:
    """Return the smaller of two values, ``y`` when they are equal."""
    return x if x < y else y


def maximum(x: T, y: T) -> T:
    """Return the larger of two values, ``y`` when they are equal."""
    return x if x > y else y


def fill_n(items: MutableSequence[T], n: int, value: T) -> None:
    """Set the first ``n`` elements of ``items`` to ``value``."""
    if n < 0:
        raise ValueError("count must not be negative")
    if n > len(items):
        raise IndexError("fill range exceeds the sequence")
    items[:n] = [value] * n


def move_n(items: MutableSequence[T], src: int, n: int, dst: int) -> None:
    """Copy ``n`` elements starting at ``src`` to ``dst`` within ``items``.

    Overlapping ranges are handled: the result is as if the source range had
    been copied out first.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    size = len(items)
    if src < 0 or dst < 0 or src + n > size or dst + n > size:
        raise IndexError("move range exceeds the sequence")
    items[dst:dst + n] = items[src:src + n]


def move_range(items: MutableSequence[T], first: int, last: int, dst: int) -> None:
    """Copy the elements in ``[first, last)`` to ``dst`` within ``items``."""
    if last < first:
        raise ValueError("range end lies before its start")
    move_n(items, first, last - first, dst)