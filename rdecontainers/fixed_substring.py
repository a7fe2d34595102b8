"""String with a fixed maximum length that truncates instead of growing."""

from __future__ import annotations

from typing import Union


def _cut(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


class FixedSubstring:
    """Text holding at most ``capacity`` characters.

    Assigning or appending more than fits silently truncates.
    """

    def __init__(self, capacity: int, text: Union[str, FixedSubstring] = "") -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._text = ""
        self.assign(text)

    @property
    def capacity(self) -> int:
        """Maximum number of characters."""
        return self._capacity

    def assign(self, text: Union[str, FixedSubstring]) -> None:
        """Replace the contents with ``text``, truncated to the capacity."""
        self._text = _cut(str(text))[: self._capacity]

    def append(self, text: Union[str, FixedSubstring]) -> None:
        """Append ``text``, keeping only what fits."""
        room = self._capacity - len(self._text)
        self._text += _cut(str(text))[:room]

    def find_index_of(self, ch: str) -> int:
        """Index of the first ``ch``, or -1."""
        return self._text.find(ch)

    def find_index_of_last(self, ch: str) -> int:
        """Index of the last ``ch``, or -1."""
        return self._text.rfind(ch)

    def trim_end(self, index: int) -> None:
        """Remove every character from ``index`` to the end."""
        if not 0 <= index < len(self._text):
            raise IndexError("trim index out of range")
        self._text = self._text[:index]

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedSubstring):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> str:
        return self._text[index]

    def __repr__(self) -> str:
        return f"FixedSubstring({self._capacity}, {self._text!r})"