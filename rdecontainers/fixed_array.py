"""Array with a size fixed at construction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FixedArray(Sequence, Generic[T]):
    """Sequence of exactly ``size`` elements that can be changed but not resized.

    Elements not given at construction are set to ``default``.
    """

    def __init__(self, size: int, values: Iterable[T] = (), default: Any = None) -> None:
        if size <= 0:
            raise ValueError("size must be greater than zero")
        initial = list(values)
        if len(initial) > size:
            raise ValueError(f"too many initial values for an array of {size}")
        self._data: list[T] = initial + [default] * (size - len(initial))

    def __getitem__(self, index: int) -> T:  # type: ignore[override]
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    @property
    def front(self) -> T:
        """The first element."""
        return self._data[0]

    @front.setter
    def front(self, value: T) -> None:
        self._data[0] = value

    @property
    def back(self) -> T:
        """The last element."""
        return self._data[-1]

    @back.setter
    def back(self, value: T) -> None:
        self._data[-1] = value

    def fill(self, value: T) -> None:
        """Set every element to ``value``."""
        self._data[:] = [value] * len(self._data)

    def from_raw_array(self, values: Iterable[T]) -> None:
        """Replace the contents with ``values``, which must match the size."""
        new = list(values)
        if len(new) != len(self._data):
            raise ValueError(
                f"expected {len(self._data)} values, got {len(new)}"
            )
        self._data[:] = new

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedArray):
            return self._data == other._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"FixedArray({len(self._data)}, {self._data!r})"