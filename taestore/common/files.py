"""In-memory stand-ins for buffer-managed files."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import IntEnum


class FileType(IntEnum):
    INVALID = 0
    MEM = 1
    DISK = 2


@dataclass(frozen=True)
class FileInfo:
    """Basic facts about a file; ``compress_algo`` is 0 when uncompressed."""

    size: int = 0
    rows: int = 0
    origin_size: int = 0
    compress_algo: int = 0
    name: str = ""


@dataclass
class MemFile:
    """A purely in-memory resource with empty content."""

    info: FileInfo = field(default_factory=FileInfo)
    file_type: FileType = FileType.MEM
    _content: io.BytesIO = field(
        default_factory=io.BytesIO, init=False, repr=False, compare=False
    )
    _refs: int = field(default=0, init=False, repr=False, compare=False)

    def read(self, size: int = -1) -> bytes:
        return self._content.read(size)

    def ref(self) -> None:
        self._refs += 1

    def unref(self) -> None:
        self._refs = max(0, self._refs - 1)

    def ref_count(self) -> int:
        return self._refs

    def stat(self) -> FileInfo:
        return self.info


@dataclass
class MockCompressedFile:
    """An in-memory resource that reports itself as compressed."""

    info: FileInfo = field(default_factory=lambda: FileInfo(compress_algo=1))
    file_type: FileType = FileType.MEM
    _content: io.BytesIO = field(
        default_factory=io.BytesIO, init=False, repr=False, compare=False
    )
    _refs: int = field(default=0, init=False, repr=False, compare=False)

    def read(self, size: int = -1) -> bytes:
        return self._content.read(size)

    def ref(self) -> None:
        self._refs += 1

    def unref(self) -> None:
        self._refs = max(0, self._refs - 1)

    def ref_count(self) -> int:
        return self._refs

    def stat(self) -> FileInfo:
        return self.info


def new_mem_file(size: int, rows: int) -> MemFile:
    return MemFile(FileInfo(size=size, rows=rows, origin_size=size, compress_algo=0))


def mock_compressed_file(size: int, origin_size: int, rows: int) -> MockCompressedFile:
    return MockCompressedFile(
        FileInfo(size=size, rows=rows, origin_size=origin_size, compress_algo=1)
    )