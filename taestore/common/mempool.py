"""A size-classed memory pool with usage accounting and quotas."""

from __future__ import annotations

import threading
from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional

K = 1024
M = 1024 * 1024
G = K * M
UNLIMIT = 0xFFFFFFFFFFFFFFFF

PAGE_SIZES: tuple[int, ...] = (
    64,
    128,
    256,
    512,
    1 * K,
    4 * K,
    8 * K,
    16 * K,
    32 * K,
    64 * K,
    128 * K,
    256 * K,
    512 * K,
    M,
)


def to_h(size: int) -> str:
    """Format a byte count in a human readable unit."""
    if size < K:
        return f"{size} B"
    if size < M:
        return f"{size / K:.4f} KB"
    if size < G:
        return f"{size / M:.4f} MB"
    return f"{size / G:.4f} GB"


def _find_page_idx(size: int) -> Optional[int]:
    """Index of the smallest page that holds ``size`` bytes, or None if none does."""
    if size > PAGE_SIZES[-1]:
        return None
    return bisect_left(PAGE_SIZES, size)


@dataclass(eq=False)
class MemNode:
    """A chunk handed out by a :class:`Mempool`.

    A node without a buffer is a quota: it only accounts for ``quota`` bytes.
    """

    idx: int = 0
    buf: Optional[bytearray] = None
    quota: int = 0

    @property
    def size(self) -> int:
        if self.buf is not None:
            return len(self.buf)
        return self.quota

    @property
    def page_idx(self) -> int:
        return self.idx

    @property
    def is_quota(self) -> bool:
        return self.buf is None


class _PagePool:
    """Free list for one page size; ``count`` tracks pages currently handed out."""

    def __init__(self, idx: int) -> None:
        self.idx = idx
        self.count = 0
        self._free: list[MemNode] = [self._new_node()]

    def _new_node(self) -> MemNode:
        return MemNode(idx=self.idx, buf=bytearray(PAGE_SIZES[self.idx]))

    def get(self) -> MemNode:
        self.count += 1
        if self._free:
            return self._free.pop()
        return self._new_node()

    def put(self, node: MemNode) -> None:
        self.count -= 1
        self._free.append(node)


class Mempool:
    """Hands out page-sized buffers and quotas up to a fixed capacity."""

    def __init__(self, capacity: int = UNLIMIT) -> None:
        self.capacity = capacity
        self._lock = threading.Lock()
        self._pools = [_PagePool(idx) for idx in range(len(PAGE_SIZES))]
        self._usage = 0
        self._quota_usage = 0
        self._other = 0
        self._peak_usage = 0

    @property
    def usage(self) -> int:
        with self._lock:
            return self._usage

    @property
    def quota_usage(self) -> int:
        with self._lock:
            return self._quota_usage

    @property
    def peak_usage(self) -> int:
        with self._lock:
            return self._peak_usage

    @property
    def other(self) -> int:
        """Number of outstanding nodes larger than the biggest page size."""
        with self._lock:
            return self._other

    def _reserve_locked(self, size: int) -> bool:
        post = self._usage + size
        if post > self.capacity:
            return False
        self._usage = post
        return True

    def alloc(self, size: int) -> Optional[MemNode]:
        """Allocate a buffer of at least ``size`` bytes, or None when full."""
        page_idx = _find_page_idx(size)
        if page_idx is not None:
            size = PAGE_SIZES[page_idx]
        with self._lock:
            if not self._reserve_locked(size):
                return None
            self._peak_usage = max(self._peak_usage, self._usage)
            if page_idx is None:
                self._other += 1
                return MemNode(idx=len(PAGE_SIZES), buf=bytearray(size))
            return self._pools[page_idx].get()

    def apply_quota(self, size: int) -> Optional[MemNode]:
        """Account for ``size`` bytes without a buffer, or None when full."""
        with self._lock:
            if not self._reserve_locked(size):
                return None
            self._quota_usage += size
        return MemNode(quota=size)

    def free(self, node: Optional[MemNode]) -> None:
        """Give a node back to the pool; None is ignored."""
        if node is None:
            return
        size = node.size
        with self._lock:
            if node.is_quota:
                self._quota_usage -= size
            elif node.idx < len(PAGE_SIZES):
                self._pools[node.idx].put(node)
            else:
                self._other -= 1
                node.buf = None
            self._usage -= size
            if self._usage < 0:
                raise RuntimeError("logic error")

    def page_count(self, idx: int) -> int:
        """Number of pages of size class ``idx`` currently handed out."""
        with self._lock:
            return self._pools[idx].count

    def __str__(self) -> str:
        with self._lock:
            lines = [
                f"<Mempool>(Cap={to_h(self.capacity)})(Usage={to_h(self._usage)})"
                f"(Quota={to_h(self._quota_usage)})(Peak={to_h(self._peak_usage)})"
            ]
            lines.extend(
                f"Page: {to_h(PAGE_SIZES[pool.idx])}, Count: {pool.count}"
                for pool in self._pools
            )
            lines.append(f"Page: [UDEF], Count: {self._other}")
        return "\n".join(lines)