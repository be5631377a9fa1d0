"""Naming rules for data, lock, spill and index files."""

from __future__ import annotations

import posixpath
import re
from enum import IntEnum
from typing import Optional

from taestore.common.encoding import MAX_UINT16, MAX_UINT64


class FileT(IntEnum):
    """Kinds of files with a fixed naming rule."""

    LOCK = 0
    TBLOCK = 1
    BLOCK = 2
    SEGMENT = 3
    TRANSIENT_NODE = 4


TMP_SUFFIX = ".tmp"
TBLK_SUFFIX = ".tblk"
BLK_SUFFIX = ".blk"
SEG_SUFFIX = ".seg"
LOCK_SUFFIX = ".lock"
NODE_SUFFIX = ".nod"
BSI_SUFFIX = ".bsi"
BBSI_SUFFIX = ".bbsi"

SPILL_DIR_NAME = "spill"
TEMP_DIR_NAME = "temp"
DATA_DIR_NAME = "data"
META_DIR_NAME = "meta"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _join(*parts: str) -> str:
    present = [p for p in parts if p]
    if not present:
        return ""
    joined = posixpath.normpath(posixpath.join(*present))
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


def make_spill_dir(dirname: str) -> str:
    return _join(dirname, SPILL_DIR_NAME)


def make_temp_dir(dirname: str) -> str:
    return _join(dirname, TEMP_DIR_NAME)


def make_data_dir(dirname: str) -> str:
    return _join(dirname, DATA_DIR_NAME)


def make_meta_dir(dirname: str) -> str:
    return _join(dirname, META_DIR_NAME)


def make_tblock_file_name(dirname: str, name: str, is_tmp: bool) -> str:
    return make_filename(dirname, FileT.TBLOCK, name, is_tmp)


def make_block_file_name(dirname: str, name: str, table_id: int, is_tmp: bool) -> str:
    return make_filename(dirname, FileT.BLOCK, name, is_tmp)


def make_segment_file_name(dirname: str, name: str, table_id: int, is_tmp: bool) -> str:
    return make_filename(dirname, FileT.SEGMENT, name, is_tmp)


def make_lock_file_name(dirname: str, name: str) -> str:
    return make_filename(dirname, FileT.LOCK, name, False)


def make_bit_sliced_index_file_name(version: int, tid: int, sid: int, col: int) -> str:
    return f"{version}_{tid}_{sid}_{col}{BSI_SUFFIX}"


def make_block_bit_sliced_index_file_name(
    version: int, tid: int, sid: int, bid: int, col: int
) -> str:
    return f"{version}_{tid}_{sid}_{bid}_{col}{BBSI_SUFFIX}"


def _strip_suffix(filename: str, suffix: str) -> Optional[str]:
    if filename.endswith(suffix):
        return filename[: -len(suffix)]
    return None


def parse_block_bit_sliced_index_file_name(filename: str) -> Optional[str]:
    """Return the name without its ``.bbsi`` suffix, or None if it has none."""
    return _strip_suffix(filename, BBSI_SUFFIX)


def parse_segment_file_name(filename: str) -> Optional[str]:
    """Return the name without its ``.seg`` suffix, or None if it has none."""
    return _strip_suffix(filename, SEG_SUFFIX)


def parse_tblock_file_name(filename: str) -> Optional[str]:
    """Return the name without its ``.tblk`` suffix, or None if it has none."""
    return _strip_suffix(filename, TBLK_SUFFIX)


def parse_block_file_name(filename: str) -> Optional[str]:
    """Return the name without its ``.blk`` suffix, or None if it has none."""
    return _strip_suffix(filename, BLK_SUFFIX)


def parse_bit_sliced_index_file_name(filename: str) -> Optional[str]:
    """Return the name without its ``.bsi`` suffix, or None if it has none."""
    return _strip_suffix(filename, BSI_SUFFIX)


def _parse_fields(filename: str, suffix: str, count: int) -> Optional[list[int]]:
    # The suffix characters are trimmed from both ends as a character set.
    fields = filename.strip(suffix).split("_")
    if len(fields) < count:
        return None
    values = []
    for field in fields[:count]:
        if not _INT_RE.fullmatch(field):
            return None
        values.append(int(field))
    return values


def parse_bit_sliced_index_file_name_to_info(
    filename: str,
) -> Optional[tuple[int, int, int, int]]:
    """Parse ``version_table_segment_col.bsi``; None if it does not parse."""
    values = _parse_fields(filename, BSI_SUFFIX, 4)
    if values is None:
        return None
    version, tid, sid, col = values
    return version & MAX_UINT64, tid & MAX_UINT64, sid & MAX_UINT64, col & MAX_UINT16


def parse_block_bit_sliced_index_file_name_to_info(
    filename: str,
) -> Optional[tuple[int, int, int, int, int]]:
    """Parse ``version_table_segment_block_col.bbsi``; None if it does not parse."""
    values = _parse_fields(filename, BBSI_SUFFIX, 5)
    if values is None:
        return None
    version, tid, sid, bid, col = values
    return (
        version & MAX_UINT64,
        tid & MAX_UINT64,
        sid & MAX_UINT64,
        bid & MAX_UINT64,
        col & MAX_UINT16,
    )


def make_filename(dirname: str, ft: int, name: str, is_tmp: bool) -> str:
    """Build the path of a file of kind ``ft`` under ``dirname``.

    Transient node files are never temporary. Unknown kinds raise ValueError.
    """
    try:
        kind = FileT(ft)
    except ValueError:
        raise ValueError(f"unsupported {ft}") from None
    if kind is FileT.LOCK:
        path = _join(dirname, name + LOCK_SUFFIX)
    elif kind is FileT.TRANSIENT_NODE:
        path = _join(make_spill_dir(dirname), name + NODE_SUFFIX)
        is_tmp = False
    elif kind is FileT.TBLOCK:
        path = _join(make_data_dir(dirname), name + TBLK_SUFFIX)
    elif kind is FileT.BLOCK:
        path = _join(make_data_dir(dirname), name + BLK_SUFFIX)
    else:
        path = _join(make_data_dir(dirname), name + SEG_SUFFIX)
    if is_tmp:
        path += TMP_SUFFIX
    return path


def is_temp_file(name: str) -> bool:
    return name.endswith(TMP_SUFFIX)


def is_tblock_file(name: str) -> bool:
    return name.endswith(TBLK_SUFFIX)


def is_block_file(name: str) -> bool:
    return name.endswith(BLK_SUFFIX)


def is_segment_file(name: str) -> bool:
    return name.endswith(SEG_SUFFIX)


def filename_from_tmpfile(tmp_file: str) -> str:
    """Return the final name of a temporary file; ValueError if it is not one."""
    name = _strip_suffix(tmp_file, TMP_SUFFIX)
    if name is None:
        raise ValueError(f"Cannot extract filename from temp file {tmp_file}")
    return name