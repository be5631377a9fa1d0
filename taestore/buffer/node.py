"""Buffer nodes that can be loaded, unloaded and pinned through a manager."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from taestore.buffer.base import NodeState
from taestore.common.refs import RefHelper


class NoSpaceError(Exception):
    """The manager could not make room for a node to grow."""

    def __init__(self, message: str = "aoe node expand: no enough space") -> None:
        super().__init__(message)


class NodeHandle:
    """A pin on a node; closing it unpins the node."""

    def __init__(self, node: Any, mgr: Any) -> None:
        self.node = node
        self.mgr = mgr

    @property
    def id(self) -> int:
        return self.node.id

    def close(self) -> None:
        self.mgr.unpin(self.node)

    def __enter__(self) -> "NodeHandle":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class Node(RefHelper):
    """A sized, reference-counted buffer node managed by a node manager.

    ``load``, ``unload`` and ``unloadable`` must be called with ``lock`` held.
    """

    def __init__(
        self,
        mgr: Any,
        id: int,
        size: int,
        impl: Any = None,
        load_func: Optional[Callable[[], None]] = None,
        unload_func: Optional[Callable[[], None]] = None,
        unloadable_func: Optional[Callable[[], bool]] = None,
        destroy_func: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self.lock = threading.RLock()
        self.mgr = mgr
        self.id = id
        self.size = size
        self.impl = impl
        self.state = NodeState.UNLOAD
        self.closed = False
        self.load_func = load_func
        self.unload_func = unload_func
        self.unloadable_func = unloadable_func
        self.destroy_func = destroy_func
        self._iter = 0
        self._iter_lock = threading.Lock()

    def make_handle(self) -> NodeHandle:
        return NodeHandle(self.impl if self.impl is not None else self, self.mgr)

    def close(self) -> None:
        """Unload the node if needed and unregister it; closing twice is a no-op."""
        with self.lock:
            if self.closed:
                return
            self.closed = True
            if self.state == NodeState.LOADED:
                self.unload()
        self.mgr.unregister_node(self)

    def is_closed(self) -> bool:
        with self.lock:
            return self.closed

    def destroy(self) -> None:
        if self.destroy_func is not None:
            self.destroy_func()

    def load(self) -> None:
        if self.state == NodeState.LOADED:
            return
        if self.load_func is not None:
            self.load_func()
        self.state = NodeState.LOADED

    def unload(self) -> None:
        """Unload the node and return its size to the manager's quota."""
        if self.state == NodeState.UNLOAD:
            return
        self.mgr.return_quota(self.size)
        if self.unload_func is not None:
            self.unload_func()
        self.state = NodeState.UNLOAD

    def unloadable(self) -> bool:
        if self.state == NodeState.UNLOAD:
            return False
        if self.ref_count() > 0:
            return False
        if self.unloadable_func is not None:
            return self.unloadable_func()
        return True

    def is_loaded(self) -> bool:
        return self.state == NodeState.LOADED

    def expand(self, delta: int, fn: Optional[Callable[[], None]] = None) -> None:
        """Grow the node by ``delta`` after running ``fn``.

        Raises NoSpaceError if the manager cannot make room; if ``fn`` raises,
        the reserved room is given back and the error propagates.
        """
        if not self.mgr.make_room(delta):
            raise NoSpaceError()
        if fn is not None:
            try:
                fn()
            except BaseException:
                self.mgr.return_quota(delta)
                raise
        self.size += delta

    def inc_iteration(self) -> int:
        with self._iter_lock:
            self._iter += 1
            return self._iter

    def iteration(self) -> int:
        with self._iter_lock:
            return self._iter