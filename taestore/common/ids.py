"""Composite identifiers for tables, segments, blocks and column parts."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, replace

from taestore.common.encoding import MAX_UINT8, MAX_UINT32, MAX_UINT64

TRANSIENT_TABLE_START_ID = MAX_UINT64 // 2

_UINT_RE = re.compile(r"[0-9]+")
_counter_lock = threading.Lock()


class ParseNameError(ValueError):
    """A file name could not be parsed into an :class:`ID`."""


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ParseNameError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > MAX_UINT64:
        raise ParseNameError(f"value out of range: {text!r}")
    return value


@dataclass
class ID:
    """Identifies a table, segment, block or column part.

    ``idx`` is the column index of the part and ``iter`` its MVCC iteration.
    """

    table_id: int = 0
    segment_id: int = 0
    block_id: int = 0
    part_id: int = 0
    idx: int = 0
    iter: int = 0

    def __str__(self) -> str:
        return (
            f"RelationName<{self.idx}:{self.table_id}-{self.segment_id}-"
            f"{self.block_id}-{self.part_id}-{self.iter}>"
        )

    def as_block_id(self) -> "ID":
        return ID(table_id=self.table_id, segment_id=self.segment_id, block_id=self.block_id)

    def as_segment_id(self) -> "ID":
        return ID(table_id=self.table_id, segment_id=self.segment_id)

    def table_string(self) -> str:
        return f"RelationName<{self.table_id}>"

    def segment_string(self) -> str:
        return f"RelationName<{self.idx}:{self.table_id}-{self.segment_id}>"

    def block_string(self) -> str:
        return f"RelationName<{self.idx}:{self.table_id}-{self.segment_id}-{self.block_id}>"

    def is_same_segment(self, other: "ID") -> bool:
        return self.table_id == other.table_id and self.segment_id == other.segment_id

    def is_same_block(self, other: "ID") -> bool:
        return self.is_same_segment(other) and self.block_id == other.block_id

    def next(self) -> "ID":
        """Advance the table id and return an id holding its previous value."""
        with _counter_lock:
            current = self.table_id
            self.table_id = (current + 1) & MAX_UINT64
        return ID(table_id=current)

    def next_part(self) -> "ID":
        """Advance the part id and return a copy holding its previous value."""
        with _counter_lock:
            current = self.part_id
            self.part_id = (current + 1) & MAX_UINT32
            return replace(self, part_id=current)

    def next_iter(self) -> "ID":
        """Return a copy with the iteration advanced; this id is unchanged."""
        return replace(self, iter=(self.iter + 1) & MAX_UINT8)

    def next_block(self) -> "ID":
        """Advance the block id and return a copy holding its previous value."""
        with _counter_lock:
            current = self.block_id
            self.block_id = (current + 1) & MAX_UINT64
            return replace(self, block_id=current)

    def next_segment(self) -> "ID":
        """Advance the segment id and return a copy holding its previous value."""
        with _counter_lock:
            current = self.segment_id
            self.segment_id = (current + 1) & MAX_UINT64
            return replace(self, segment_id=current)

    def is_transient(self) -> bool:
        return self.table_id >= TRANSIENT_TABLE_START_ID

    def to_part_file_name(self) -> str:
        return f"{self.idx}_{self.table_id}_{self.segment_id}_{self.block_id}_{self.part_id}"

    def to_part_file_path(self) -> str:
        return (
            f"{self.table_id}/{self.segment_id}/{self.block_id}/"
            f"{self.idx}/{self.part_id}.{self.iter}"
        )

    def to_block_file_name(self) -> str:
        return f"{self.table_id}_{self.segment_id}_{self.block_id}"

    def to_tblock_file_name(self, name: str) -> str:
        return f"{self.table_id}_{self.segment_id}_{self.block_id}_{name}"

    def to_block_file_path(self) -> str:
        return f"{self.table_id}/{self.segment_id}/{self.block_id}/"

    def to_segment_file_name(self) -> str:
        return f"{self.table_id}_{self.segment_id}"

    def to_segment_file_path(self) -> str:
        return f"{self.table_id}/{self.segment_id}/"


def new_transient_id() -> ID:
    """Return an id at the start of the transient table id space."""
    return ID(table_id=TRANSIENT_TABLE_START_ID)


def parse_tblk_name(name: str) -> tuple[ID, str]:
    """Parse ``table_segment_block_tag`` into an id and its tag."""
    parts = name.split("_")
    if len(parts) != 4:
        raise ParseNameError("aoe: parse tblock file name")
    table_id, segment_id, block_id = (_parse_uint(p) for p in parts[:3])
    return ID(table_id=table_id, segment_id=segment_id, block_id=block_id), parts[3]


def parse_blk_name_to_id(name: str) -> ID:
    """Parse ``table_segment_block`` into an id."""
    parts = name.split("_")
    if len(parts) != 3:
        raise ParseNameError("aoe: parse block file name")
    table_id, segment_id, block_id = (_parse_uint(p) for p in parts)
    return ID(table_id=table_id, segment_id=segment_id, block_id=block_id)


def parse_segment_name_to_id(name: str) -> ID:
    """Parse ``table_segment`` into an id."""
    parts = name.split("_")
    if len(parts) != 2:
        raise ParseNameError("aoe: parse segment file name")
    table_id, segment_id = (_parse_uint(p) for p in parts)
    return ID(table_id=table_id, segment_id=segment_id)