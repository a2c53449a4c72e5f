"""Fixed-size ring buffer of bytes."""

from __future__ import annotations


class Fifo:
    """Ring buffer over ``size`` slots; one slot stays free, so it holds ``size - 1`` bytes."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("fifo size must be at least 1")
        self._buf = bytearray(size)
        self._last = size - 1
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold at once."""
        return self._last

    def is_empty(self) -> bool:
        return self._head == self._tail

    def is_full(self) -> bool:
        return (self._head == 0 and self._tail == self._last) or self._tail == self._head - 1

    def push(self, c: int) -> None:
        """Append one byte; raises IndexError if the buffer is full."""
        if self.is_full():
            raise IndexError("push to a full fifo")
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte out of range: {c}")
        self._buf[self._tail] = c
        self._tail = 0 if self._tail == self._last else self._tail + 1

    def pop(self) -> int:
        """Remove and return the oldest byte; raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("pop from an empty fifo")
        value = self._buf[self._head]
        self._head = 0 if self._head == self._last else self._head + 1
        return value

    def flush(self) -> None:
        """Discard everything in the buffer."""
        self._head = self._tail

    def __len__(self) -> int:
        return (self._tail - self._head) % len(self._buf)