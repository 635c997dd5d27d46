"""A bounded, thread-safe FIFO queue of unsigned 32-bit integers."""

from __future__ import annotations

import threading

_UINT_MAX = 0xFFFFFFFF


class QueueFullError(Exception):
    """Raised when pushing onto a queue with no free slot."""


class QueueEmptyError(Exception):
    """Raised when popping from a queue that holds nothing."""


class UintQueue:
    """Ring buffer of unsigned integers.

    The ring holds ``size`` plus one or two extra slots so that an odd
    total is kept; one slot always stays free to tell full from empty.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size + 1 + ((size & 0x01) ^ 0x01)
        self._array = [0] * self._size
        self._read = 0
        self._write = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Number of elements the queue can hold at once."""
        return self._size - 1

    def push(self, element: int) -> None:
        """Append ``element``; raise QueueFullError when no slot is free."""
        if not isinstance(element, int) or not 0 <= element <= _UINT_MAX:
            raise ValueError(f"not an unsigned 32-bit integer: {element!r}")
        with self._lock:
            following = (self._write + 1) % self._size
            if following == self._read:
                raise QueueFullError("queue is full")
            self._array[self._write] = element
            self._write = following

    def pop(self) -> int:
        """Remove and return the oldest element; raise QueueEmptyError if none."""
        with self._lock:
            if self._read == self._write:
                raise QueueEmptyError("queue is empty")
            element = self._array[self._read]
            self._read = (self._read + 1) % self._size
            return element

    def __len__(self) -> int:
        with self._lock:
            return (self._write - self._read) % self._size