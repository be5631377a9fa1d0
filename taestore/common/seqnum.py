"""Global sequence numbers and monotonically increasing id allocators."""

from __future__ import annotations

import threading

_global_lock = threading.Lock()
_global_seq_num = 0


def next_global_seq_num() -> int:
    """Advance the global sequence number and return the new value."""
    global _global_seq_num
    with _global_lock:
        _global_seq_num += 1
        return _global_seq_num


def get_global_seq_num() -> int:
    """Return the current global sequence number without advancing it."""
    with _global_lock:
        return _global_seq_num


class IdAllocator:
    """Hands out increasing ids; the first allocated id is ``start``."""

    def __init__(self, start: int) -> None:
        if start == 0:
            raise ValueError("should not be 0")
        self._id = start - 1
        self._lock = threading.Lock()

    def alloc(self) -> int:
        """Allocate and return the next id."""
        with self._lock:
            self._id += 1
            return self._id

    def get(self) -> int:
        """Return the most recently allocated id."""
        with self._lock:
            return self._id

    def set_start(self, start: int) -> None:
        """Treat ``start`` as the last allocated id."""
        with self._lock:
            self._id = start