"""A node manager that pins nodes and evicts idle ones to stay within size."""

from __future__ import annotations

import threading
from typing import Any, Optional

from taestore.buffer.base import EvictNode, NodeState, node_state_string
from taestore.buffer.evict import SimpleEvictHolder
from taestore.buffer.limiter import SizeLimiter


class NodeManager(SizeLimiter):
    """Registers nodes, loads them on pin and unloads idle ones when short of room."""

    def __init__(self, max_size: int, evicter: Optional[Any] = None) -> None:
        super().__init__(max_size)
        self.evicter = evicter if evicter is not None else SimpleEvictHolder()
        self.nodes: dict[int, Any] = {}
        self._lock = threading.RLock()
        self._stats_lock = threading.Lock()
        self.unregister_times = 0
        self.load_times = 0
        self.evict_times = 0

    def __str__(self) -> str:
        with self._lock:
            with self._stats_lock:
                head = (
                    f"<nodeManager>[{SizeLimiter.__str__(self)}][Nodes:{len(self.nodes)},"
                    f"LoadTimes:{self.load_times},EvictTimes:{self.evict_times},"
                    f"UnregisterTimes:{self.unregister_times}]:"
                )
            parts = [head]
            loaded = 0
            for node in self.nodes.values():
                with node.lock:
                    parts.append(
                        f"\n\t{node.id} | {node_state_string(node.state)} | Size: {node.size} "
                    )
                    if node.state == NodeState.LOADED:
                        loaded += 1
            parts.append(f"\n[Load Status: ({loaded}/{len(self.nodes)})]")
            return "".join(parts)

    def count(self) -> int:
        with self._lock:
            return len(self.nodes)

    def register_node(self, node: Any) -> None:
        """Add ``node``; a second node with the same id raises ValueError."""
        with self._lock:
            if node.id in self.nodes:
                raise ValueError(f"Duplicate node: {node.id}")
            self.nodes[node.id] = node

    def unregister_node(self, node: Any) -> None:
        with self._lock:
            with self._stats_lock:
                self.unregister_times += 1
            self.nodes.pop(node.id, None)
            node.destroy()

    def make_room(self, size: int) -> bool:
        """Reserve ``size``, unloading queued idle nodes until it fits."""
        ok = self.apply_quota(size)
        while not ok:
            evicted = self.evicter.dequeue()
            if evicted is None:
                return False
            handle = evicted.handle
            if handle.is_closed():
                continue
            if not evicted.unloadable(handle):
                continue
            with handle.lock:
                if not evicted.unloadable(handle):
                    continue
                if not handle.unloadable():
                    continue
                handle.unload()
            ok = self.apply_quota(size)
        return True

    def pin(self, node: Any) -> Optional[Any]:
        """Load ``node`` if needed and take a reference; None if there is no room."""
        with node.lock:
            if node.is_loaded():
                node.ref()
                return node.make_handle()
            if not self.make_room(node.size):
                return None
            node.load()
            with self._stats_lock:
                self.load_times += 1
            node.ref()
            return node.make_handle()

    def unpin(self, node: Any) -> None:
        """Drop a reference; an idle node becomes a candidate for eviction."""
        with node.lock:
            node.unref()
            if node.ref_count() == 0:
                self.evicter.enqueue(EvictNode(node, node.inc_iteration()))
                with self._stats_lock:
                    self.evict_times += 1