"""A fixed-size, thread-safe circular buffer."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Circular buffer; inserting into a full buffer overwrites the slot at the write position."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._buffer: list[T | None] = [None] * capacity
        self._read_pos = 0
        self._write_pos = 0
        self._count = 0
        self._lock = threading.Lock()

    def insert(self, value: T) -> None:
        with self._lock:
            self._buffer[self._write_pos] = value
            self._write_pos = (self._write_pos + 1) % self.capacity
            if self._count < self.capacity:
                self._count += 1

    def pop(self) -> T:
        with self._lock:
            if self._count == 0:
                raise IndexError("buffer is empty")
            item = self._buffer[self._read_pos]
            self._read_pos = (self._read_pos + 1) % self.capacity
            self._count -= 1
            return item  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._count