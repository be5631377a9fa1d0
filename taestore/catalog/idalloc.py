"""Id allocation for databases, tables, segments and blocks."""

from __future__ import annotations

from taestore.common.seqnum import IdAllocator


class IDAllocator:
    """Independent id sequences for each kind of catalog entry, each starting at 1."""

    def __init__(self) -> None:
        self._db = IdAllocator(1)
        self._table = IdAllocator(1)
        self._segment = IdAllocator(1)
        self._block = IdAllocator(1)

    def init(self, prev_db: int, prev_table: int, prev_segment: int, prev_block: int) -> None:
        """Resume every sequence after the given last-used ids."""
        self._db.set_start(prev_db)
        self._table.set_start(prev_table)
        self._segment.set_start(prev_segment)
        self._block.set_start(prev_block)

    def next_db(self) -> int:
        return self._db.alloc()

    def next_table(self) -> int:
        return self._table.alloc()

    def next_segment(self) -> int:
        return self._segment.alloc()

    def next_block(self) -> int:
        return self._block.alloc()

    def curr_db(self) -> int:
        return self._db.get()

    def curr_table(self) -> int:
        return self._table.get()

    def curr_segment(self) -> int:
        return self._segment.get()

    def curr_block(self) -> int:
        return self._block.get()