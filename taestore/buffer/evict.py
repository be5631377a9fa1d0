"""A bounded FIFO of eviction candidates."""

from __future__ import annotations

import threading
from collections import deque
from typing import Optional

from taestore.buffer.base import EvictNode

EVICT_HOLDER_CAPACITY = 100000


class SimpleEvictHolder:
    """Thread-safe FIFO queue of :class:`EvictNode` with a fixed capacity."""

    def __init__(self, capacity: int = EVICT_HOLDER_CAPACITY) -> None:
        self.capacity = capacity
        self.lock = threading.Lock()
        self._queue: deque[EvictNode] = deque()

    def __len__(self) -> int:
        with self.lock:
            return len(self._queue)

    def enqueue(self, node: EvictNode) -> bool:
        """Queue ``node``; returns False and drops it when the queue is full."""
        with self.lock:
            if len(self._queue) >= self.capacity:
                return False
            self._queue.append(node)
            return True

    def dequeue(self) -> Optional[EvictNode]:
        """Remove and return the oldest candidate, or None when empty."""
        with self.lock:
            if not self._queue:
                return None
            return self._queue.popleft()