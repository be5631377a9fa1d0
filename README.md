# taestore

Core building blocks for a transactional, append-oriented storage engine.

## What is inside

- `taestore.common`
  - `refs.RefHelper`: a thread-safe reference counter with an optional
    callback when the count reaches zero; dropping below zero raises
    `RuntimeError`.
  - `seqnum`: `next_global_seq_num`, `get_global_seq_num` and `IdAllocator`.
  - `encoding`: `write_string` / `read_string` (big-endian uint16 length
    prefix plus UTF-8 bytes), `repeat_str`, `PPLevel` and the `MAX_UINT*`
    limits.
  - `range.Range`: closed ranges with `union`, `append`, `can_cover` and
    friends, raising `RangeNotContinuousError` / `RangeInvalidError`.
  - `linklist`: `SSLLNode` and the reference-counted `SLLNode`.
  - `mvcc.BaseMvcc`: previous/next version chains with pin/unpin callbacks.
  - `ids`: the `ID` identifier (table, segment, block, part, column index,
    iteration), its file-name forms, and `parse_tblk_name`,
    `parse_blk_name_to_id`, `parse_segment_name_to_id` (raising
    `ParseNameError`).
  - `filenames`: data, lock, spill and bit-sliced-index file naming
    (`make_filename`, `make_block_file_name`, `filename_from_tmpfile`, ...).
  - `files`: in-memory file stand-ins `MemFile` and `MockCompressedFile`
    with `FileInfo`.
  - `mempool.Mempool`: a size-classed memory pool with capacity, quotas and
    usage accounting; `to_h` formats byte counts.
  - `hack.inplace_delete_rows`: compacts a mutable sequence, removing rows at
    ascending positions.
  - `dlnode`: `Link` and `DLNode`, a doubly linked list kept sorted by the
    payloads' `compare` method.
  - `iterator`: `BaseResources` and `BaseIterator`, which run an executor over
    a set of resources and record the error, if any.
- `taestore.catalog`
  - `op`: `OpT`, `op_name` and the errors `CatalogError`, `NotFoundError`,
    `DuplicateError`, `ValidationError`.
  - `idalloc.IDAllocator`: separate id sequences for databases, tables,
    segments and blocks.
- `taestore.buffer`
  - `base`: `NodeState`, `node_state_string` and `EvictNode`.
  - `evict.SimpleEvictHolder`: a bounded FIFO of eviction candidates.
  - `limiter.SizeLimiter`: quota accounting against a maximum size.
  - `node`: `Node`, `NodeHandle` and `NoSpaceError`.
  - `nodemgr.NodeManager`: registers nodes, loads them on `pin`, queues idle
    ones on `unpin` and unloads them when it needs room.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from taestore.buffer.nodemgr import NodeManager
from taestore.buffer.node import Node

mgr = NodeManager(100)
first = Node(mgr, 1, 60)
second = Node(mgr, 2, 60)
mgr.register_node(first)
mgr.register_node(second)

handle = mgr.pin(first)        # loads the node, 60 of 100 used
assert mgr.pin(second) is None # no room while the first is pinned
handle.close()                 # unpinned: now evictable
handle = mgr.pin(second)       # unloads the first to make room
assert mgr.total() == 60
```

Identifiers and file names:

```python
from taestore.common.ids import parse_blk_name_to_id
from taestore.common.filenames import make_block_file_name

block_id = parse_blk_name_to_id("2_0_1")
assert block_id.to_block_file_path() == "2/0/1/"
assert make_block_file_name("/work", "blk-1", 0, False) == "/work/data/blk-1.blk"
```

## What it does not do

This package holds primitives only. It has no catalog of databases, tables,
segments or blocks, no transactions, no write-ahead log and no persistent
storage: file-name helpers build paths but nothing is written to disk. It
offers no command-line program and no server.