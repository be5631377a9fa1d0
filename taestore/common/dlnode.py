"""Sorted doubly linked lists whose payloads order themselves."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Protocol


class NodePayload(Protocol):
    def compare(self, other: Any) -> int: ...


class DLNode:
    """A node of a doubly linked list holding a comparable payload."""

    def __init__(self, payload: NodePayload) -> None:
        self.prev: Optional[DLNode] = None
        self.next: Optional[DLNode] = None
        self.payload = payload

    def compare(self, other: "DLNode") -> int:
        return self.payload.compare(other.payload)

    def sort(self) -> tuple["DLNode", Optional["DLNode"]]:
        """Move this node towards the tail past every node that compares greater.

        Returns the new head candidate and, if this node ended up last, the tail.
        """
        curr = self
        head = curr
        prev = self.prev
        nxt = self.next
        while nxt is not None and curr.compare(nxt) < 0:
            if head is curr:
                head = nxt
            if prev is not None:
                prev.next = nxt
            nxt.prev = prev

            prev = nxt
            nxt = nxt.next

            prev.next = curr
            curr.prev = prev
            curr.next = nxt
            if nxt is not None:
                nxt.prev = curr
        tail = curr if nxt is None else None
        return head, tail


def insert_dl_node(
    payload: NodePayload, head: Optional[DLNode]
) -> tuple[DLNode, DLNode, Optional[DLNode]]:
    """Insert ``payload`` at ``head`` and sort it into place.

    Returns the new node, the new head and the new tail if it changed.
    """
    node = DLNode(payload)
    if head is None:
        return node, node, node
    node.next = head
    head.prev = node
    nhead, ntail = node.sort()
    return node, nhead, ntail


def find_head(node: DLNode) -> DLNode:
    head = node
    while head.prev is not None:
        head = head.prev
    return head


def loop_dlink(
    head: Optional[DLNode], fn: Callable[[DLNode], bool], reverse: bool
) -> None:
    """Call ``fn`` on each node from ``head`` until it returns False."""
    curr = head
    while curr is not None:
        if not fn(curr):
            break
        curr = curr.prev if reverse else curr.next


class Link:
    """A doubly linked list kept in descending order from head to tail."""

    def __init__(self) -> None:
        self.head: Optional[DLNode] = None
        self.tail: Optional[DLNode] = None

    def update(self, node: DLNode) -> None:
        nhead, ntail = node.sort()
        if nhead is not None:
            self.head = nhead
        if ntail is not None:
            self.tail = ntail

    def insert(self, payload: NodePayload) -> DLNode:
        node, self.head, tail = insert_dl_node(payload, self.head)
        if tail is not None:
            self.tail = tail
        return node

    def delete(self, node: DLNode) -> None:
        prev, nxt = node.prev, node.next
        if prev is not None and nxt is not None:
            prev.next = nxt
            nxt.prev = prev
        elif prev is None and nxt is not None:
            self.head = nxt
            nxt.prev = None
        elif prev is not None and nxt is None:
            self.tail = prev
            prev.next = None
        else:
            self.head = None
            self.tail = None

    def loop(self, fn: Callable[[DLNode], bool], reverse: bool) -> None:
        """Call ``fn`` on each node until it returns False; reverse starts at the tail."""
        loop_dlink(self.tail if reverse else self.head, fn, reverse)

    def iterate(self, reverse: bool = False) -> Iterator[DLNode]:
        """Yield the nodes from head to tail, or from tail to head."""
        curr = self.tail if reverse else self.head
        while curr is not None:
            yield curr
            curr = curr.prev if reverse else curr.next