"""Quota accounting against a maximum active size."""

from __future__ import annotations

import threading


class SizeLimiter:
    """Tracks the active size and refuses quotas that would exceed the maximum."""

    def __init__(self, max_active_size: int) -> None:
        self.max_active_size = max_active_size
        self._active_size = 0
        self._quota_lock = threading.Lock()

    def return_quota(self, size: int) -> int:
        """Give back ``size`` units and return the new active size."""
        with self._quota_lock:
            self._active_size -= size
            return self._active_size

    def apply_quota(self, size: int) -> bool:
        """Reserve ``size`` units if they fit; returns whether they did."""
        with self._quota_lock:
            post = self._active_size + size
            if post > self.max_active_size:
                return False
            self._active_size = post
            return True

    def total(self) -> int:
        """Return the active size."""
        with self._quota_lock:
            return self._active_size

    def __str__(self) -> str:
        return f"<sizeLimiter>[Size=({self.total()}/{self.max_active_size})]"