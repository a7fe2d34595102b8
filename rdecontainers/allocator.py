"""Memory allocators handing out byte blocks."""

from __future__ import annotations

from typing import Optional


class Allocator:
    """General-purpose allocator: every request gets a fresh block."""

    def __init__(self, name: str = "DEFAULT") -> None:
        self.name = name

    def allocate(self, nbytes: int) -> bytearray:
        """Return a new zeroed block of ``nbytes`` bytes."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        return bytearray(nbytes)

    def deallocate(self, block: Optional[bytearray]) -> None:
        """Release the storage of a block, leaving it empty.

        ``None`` is accepted and ignored; anything but a bytearray raises
        TypeError.
        """
        if block is None:
            return
        if not isinstance(block, bytearray):
            raise TypeError("block was not allocated by an Allocator")
        block.clear()

    def __eq__(self, other: object) -> bool:
        # Any allocator of this kind can release what another one allocated.
        if isinstance(other, Allocator):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Allocator)

    def __repr__(self) -> str:
        return f"Allocator(name={self.name!r})"


class BufferAllocator:
    """Bump allocator carving blocks out of one fixed buffer; never frees."""

    def __init__(self, name: str, buffer: bytearray) -> None:
        self.name = name
        self._buffer = buffer
        self._view = memoryview(buffer)
        self._top = 0

    @property
    def capacity(self) -> int:
        """Total size of the underlying buffer."""
        return len(self._buffer)

    @property
    def used(self) -> int:
        """Number of bytes handed out so far."""
        return self._top

    def allocate(self, nbytes: int) -> memoryview:
        """Return the next ``nbytes`` bytes of the buffer as a view."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        if self._top + nbytes > len(self._buffer):
            raise MemoryError(
                f"buffer allocator {self.name!r} exhausted: "
                f"{nbytes} requested, {len(self._buffer) - self._top} left"
            )
        block = self._view[self._top:self._top + nbytes]
        self._top += nbytes
        return block

    def deallocate(self, block: Optional[memoryview]) -> None:
        """Accept a block back; memory is not reused.

        Raises ValueError when the block did not come from this buffer.
        """
        if block is None:
            return
        if not isinstance(block, memoryview) or block.obj is not self._buffer:
            raise ValueError("block does not belong to this buffer")

    def __repr__(self) -> str:
        return (
            f"BufferAllocator(name={self.name!r}, used={self._top}, "
            f"capacity={len(self._buffer)})"
        )