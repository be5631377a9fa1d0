"""Singly linked list nodes."""

from __future__ import annotations

import threading
from typing import Optional

from taestore.common.refs import RefHelper


class SSLLNode:
    """A plain singly linked node; ``next`` is the following node or None."""

    def __init__(self) -> None:
        self.next: Optional[SSLLNode] = None

    def insert(self, node: "SSLLNode") -> None:
        """Insert ``node`` directly after this node."""
        node.next = self.next
        self.next = node

    def release_next_node(self) -> Optional["SSLLNode"]:
        """Unlink and return the node directly after this one."""
        removed = self.next
        if removed is not None:
            self.next = removed.next
        return removed

    def release_following(self) -> Optional["SSLLNode"]:
        """Cut the list after this node and return the detached remainder."""
        removed = self.next
        self.next = None
        return removed


class SLLNode(RefHelper):
    """A reference-counted, lock-guarded singly linked node.

    The lock may be shared between several nodes.
    """

    def __init__(self, lock: Optional[threading.Lock] = None) -> None:
        super().__init__()
        self.lock = lock if lock is not None else threading.Lock()
        self.next: Optional[SLLNode] = None

    def set_next_node(self, node: Optional["SLLNode"]) -> None:
        with self.lock:
            self.set_next_node_no_lock(node)

    def set_next_node_no_lock(self, node: Optional["SLLNode"]) -> None:
        """Replace the next node, dropping the reference held on the old one."""
        if self.next is not None:
            self.next.unref()
        self.next = node

    def insert(self, node: "SLLNode") -> None:
        with self.lock:
            node.next = self.next
            self.next = node

    def get_next_node(self) -> Optional["SLLNode"]:
        """Return the next node with a reference taken on it, or None."""
        with self.lock:
            node = self.next
            if node is not None:
                node.ref()
            return node

    def release_next_node(self) -> None:
        with self.lock:
            if self.next is not None:
                self.next.unref()
                self.next = None