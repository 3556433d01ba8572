"""Fixed-capacity byte FIFO used to buffer incoming serial data."""

from __future__ import annotations

from collections import deque

__all__ = ["SERIAL_BUFFER_SIZE", "RingBuffer"]

SERIAL_BUFFER_SIZE = 64


class RingBuffer:
    """A bounded byte queue that drops new bytes once it is full.

    ``read_char`` and ``peek`` return -1 when the buffer is empty, as the
    serial API expects.
    """

    def __init__(self, size: int = SERIAL_BUFFER_SIZE) -> None:
        if size <= 0:
            raise ValueError("ring buffer size must be positive")
        self._size = size
        self._items: deque[int] = deque()

    @property
    def size(self) -> int:
        """Capacity of the buffer in bytes."""
        return self._size

    def store_char(self, c: int) -> None:
        """Append one byte; silently dropped if the buffer is full."""
        if not self.is_full():
            self._items.append(c & 0xFF)

    def clear(self) -> None:
        """Discard every stored byte."""
        self._items.clear()

    def read_char(self) -> int:
        """Remove and return the oldest byte, or -1 if empty."""
        if not self._items:
            return -1
        return self._items.popleft()

    def available(self) -> int:
        """Number of bytes waiting to be read."""
        return len(self._items)

    def available_for_store(self) -> int:
        """Number of bytes that can still be stored."""
        return self._size - len(self._items)

    def peek(self) -> int:
        """Return the oldest byte without removing it, or -1 if empty."""
        if not self._items:
            return -1
        return self._items[0]

    def is_full(self) -> bool:
        """True if no more bytes can be stored."""
        return len(self._items) == self._size

    def __len__(self) -> int:
        return len(self._items)