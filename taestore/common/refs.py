"""Reference counting helper."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class RefHelper:
    """Thread-safe reference counter with an optional callback fired at zero.

    Dropping a reference that was never taken is a logic error and raises
    RuntimeError.
    """

    def __init__(self, refs: int = 0, on_zero_cb: Optional[Callable[[], None]] = None) -> None:
        self.refs = refs
        self.on_zero_cb = on_zero_cb
        self._ref_lock = threading.Lock()

    def ref_count(self) -> int:
        """Return the current number of references."""
        with self._ref_lock:
            return self.refs

    def ref(self) -> None:
        """Take one reference."""
        with self._ref_lock:
            self.refs += 1

    def unref(self) -> None:
        """Drop one reference, calling the zero callback when none are left."""
        with self._ref_lock:
            self.refs -= 1
            value = self.refs
        if value == 0:
            if self.on_zero_cb is not None:
                self.on_zero_cb()
        elif value < 0:
            raise RuntimeError("logic error")