"""Length-prefixed string encoding, pretty-print levels and integer limits."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import BinaryIO

MAX_UINT8 = 0xFF
MAX_UINT16 = 0xFFFF
MAX_UINT32 = 0xFFFFFFFF
MAX_UINT64 = 0xFFFFFFFFFFFFFFFF

_LEN = struct.Struct(">H")


class PPLevel(IntEnum):
    """Detail level for pretty-printed output."""

    PPL0 = 0
    PPL1 = 1
    PPL2 = 2
    PPL3 = 3


def write_string(text: str, stream: BinaryIO) -> int:
    """Write ``text`` as a big-endian uint16 length followed by UTF-8 bytes.

    Returns the number of bytes written.
    """
    data = text.encode("utf-8")
    if len(data) > MAX_UINT16:
        raise ValueError(f"string too long to encode: {len(data)} bytes")
    stream.write(_LEN.pack(len(data)))
    written = stream.write(data)
    if written is None:
        written = len(data)
    return written + _LEN.size


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`."""
    header = stream.read(_LEN.size)
    if len(header) < _LEN.size:
        raise EOFError("unexpected end of stream reading string length")
    (length,) = _LEN.unpack(header)
    data = stream.read(length)
    if len(data) < length:
        raise EOFError("unexpected end of stream reading string body")
    return data.decode("utf-8")


def repeat_str(text: str, times: int) -> str:
    """Return ``text`` followed by ``times`` tab characters."""
    return text + "\t" * max(times, 0)