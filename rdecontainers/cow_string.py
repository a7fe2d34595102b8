"""Copy-on-write string that shares its buffer between copies until one changes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

_GRANULARITY = 32
# Sizes are kept in signed 16-bit counters, so capacities stay below this.
_MAX_CAPACITY = 1 << 15


def _round_capacity(length: int) -> int:
    """Capacity needed for ``length`` characters plus a terminator."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length == 0:
        return 0
    capacity = (length + 1 + _GRANULARITY - 1) & ~(_GRANULARITY - 1)
    capacity = max(capacity, _GRANULARITY)
    if capacity >= _MAX_CAPACITY:
        raise OverflowError(
            f"string of {length} characters exceeds the maximum capacity"
        )
    return capacity


class _Rep:
    """Shared buffer: reference count, capacity and text."""

    __slots__ = ("refs", "capacity", "text")

    def __init__(self, capacity: int = 0, text: str = "") -> None:
        self.refs = 1
        self.capacity = capacity
        self.text = text


Text = Union[str, "CowString"]


class CowString:
    """Mutable string whose copies share one buffer until a copy is modified.

    Buffers grow in steps of 32 characters.  Ordering compares lengths first
    and only then characters.
    """

    NPOS = -1

    def __init__(self, text: Text = "") -> None:
        if isinstance(text, CowString):
            if text._rep.capacity > 0:
                self._rep = text._rep
                self._rep.refs += 1
            else:
                self._rep = _Rep()
        else:
            self._rep = self._construct(str(text))

    @staticmethod
    def _construct(text: str) -> _Rep:
        return _Rep(_round_capacity(len(text)), text)

    def _release(self) -> None:
        self._rep.refs -= 1

    def __del__(self) -> None:
        rep = getattr(self, "_rep", None)
        if rep is not None:
            rep.refs -= 1

    def _make_unique(self, capacity_hint: int) -> None:
        rep = self._rep
        capacity = _round_capacity(capacity_hint)
        if rep.refs > 1 or capacity > rep.capacity:
            self._release()
            if capacity > 0:
                self._rep = _Rep(capacity, rep.text)
            else:
                self._rep = _Rep()

    @property
    def capacity(self) -> int:
        """Number of characters the buffer holds, terminator included."""
        return self._rep.capacity

    def shares_buffer_with(self, other: CowString) -> bool:
        """True when both strings use the same buffer."""
        return self._rep is other._rep

    def __getitem__(self, index: int) -> str:
        text = self._rep.text
        if not -len(text) <= index < len(text):
            raise IndexError("string index out of range")
        return text[index]

    def __len__(self) -> int:
        return len(self._rep.text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rep.text)

    def __str__(self) -> str:
        return self._rep.text

    def __repr__(self) -> str:
        return f"CowString({self._rep.text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (CowString, str)):
            return self.compare(other) == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (CowString, str)):
            return self.compare(other) < 0
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (CowString, str)):
            return self.compare(other) > 0
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> CowString:
        """Return a copy sharing this string's buffer."""
        return CowString(self)

    def assign(self, text: Text) -> CowString:
        """Replace the contents; another CowString's buffer is shared."""
        if isinstance(text, CowString):
            if text._rep is not self._rep:
                self._release()
                self._rep = text._rep
                self._rep.refs += 1
        else:
            new_rep = self._construct(str(text))
            self._release()
            self._rep = new_rep
        return self

    def substr(self, begin: int, end: int | None = None) -> CowString:
        """Return the characters in ``[begin, end)``; ``end`` defaults to the length."""
        length = len(self)
        if end is None:
            end = length
        if not 0 <= begin <= end <= length:
            raise IndexError("substring range out of bounds")
        return CowString(self._rep.text[begin:end])

    def append(self, text: Text) -> None:
        """Append ``text``; an empty string is ignored."""
        addition = str(text)
        if not addition or addition[0] == "\0":
            return
        self._make_unique(len(self) + len(addition))
        self._rep.text += addition

    def __iadd__(self, text: Text) -> CowString:
        self.append(text)
        return self

    def compare(self, other: Text) -> int:
        """Return -1, 0 or 1, ordering shorter strings first."""
        mine = self._rep.text
        theirs = str(other)
        if len(mine) != len(theirs):
            return -1 if len(mine) < len(theirs) else 1
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def reserve(self, capacity_hint: int) -> None:
        """Make the buffer unique and big enough for ``capacity_hint`` characters."""
        self._make_unique(capacity_hint)

    def clear(self) -> None:
        """Remove every character, keeping an unshared buffer."""
        self.resize(0)

    def resize(self, size: int) -> None:
        """Set the length, truncating or padding with NUL characters."""
        self._make_unique(size)
        text = self._rep.text
        self._rep.text = text[:size] + "\0" * (size - len(text))

    def make_lower(self) -> None:
        """Shift every character below 'a' up by the case distance."""
        self._make_unique(len(self))
        delta = ord("a") - ord("A")
        self._rep.text = "".join(
            chr(ord(c) + delta) if c < "a" else c for c in self._rep.text
        )

    def make_upper(self) -> None:
        """Shift every character above 'Z' down by the case distance."""
        self._make_unique(len(self))
        delta = ord("a") - ord("A")
        self._rep.text = "".join(
            chr(ord(c) - delta) if c > "Z" else c for c in self._rep.text
        )

    def _visible(self) -> str:
        text = self._rep.text
        end = text.find("\0")
        return text if end < 0 else text[:end]

    def find_index_of(self, ch: str) -> int:
        """Index of the first ``ch``, or NPOS."""
        return self._visible().find(ch)

    def find_index_of_last(self, ch: str) -> int:
        """Index of the last ``ch``, or NPOS."""
        return self._visible().rfind(ch)

    def find(self, needle: str) -> int:
        """Index of the first occurrence of ``needle``, or NPOS."""
        needle = str(needle)
        if not needle:
            return self.NPOS
        return self._visible().find(needle)

    def rfind(self, needle: str) -> int:
        """Index of the last occurrence of ``needle``, or NPOS."""
        return self._rep.text.rfind(str(needle))