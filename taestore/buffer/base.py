"""Node states and eviction records for the buffer manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class NodeState(IntEnum):
    """Load state of a buffer node."""

    UNLOAD = 0
    LOADING = 1
    ROLLBACK = 2
    COMMIT = 3
    UNLOADING = 4
    LOADED = 5


def node_state_string(state: int) -> str:
    """Return the display name of ``state``; unknown states raise ValueError."""
    try:
        return NodeState(state).name
    except ValueError:
        raise ValueError(f"unsupported: {state}") from None


@dataclass(eq=False)
class EvictNode:
    """A candidate for eviction: a node and the iteration it was queued at."""

    handle: Any
    iter: int

    def __str__(self) -> str:
        return f"EvictNode({self.handle!r}, {self.iter})"

    def unloadable(self, handle: Any) -> bool:
        """True if ``handle`` was not pinned again since it was queued."""
        if handle is not self.handle:
            raise RuntimeError("Logic error")
        return handle.iteration() == self.iter