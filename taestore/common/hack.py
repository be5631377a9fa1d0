"""In-place removal of rows from a column buffer."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TypeVar

S = TypeVar("S", bound=MutableSequence)


def inplace_delete_rows(orig: S, rows: Iterable[int]) -> S:
    """Delete the rows at the ascending positions ``rows`` from ``orig``.

    The sequence is compacted in place and returned.
    """
    if not isinstance(orig, MutableSequence):
        raise TypeError(f"not support: {type(orig).__name__}")
    write = 0
    prev = -1
    for row in rows:
        segment = orig[prev + 1 : row]
        orig[write : write + len(segment)] = segment
        write += len(segment)
        prev = row
    if prev < 0:
        return orig
    tail = orig[prev + 1 :]
    orig[write : write + len(tail)] = tail
    write += len(tail)
    del orig[write:]
    return orig