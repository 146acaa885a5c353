# middb

Building blocks for a log-structured (LSM) key-value storage engine.
It is plain Python and has no third-party dependencies.

## What is inside

- `middb.config` – `Config` and `CompactionStyle` hold the engine's settings,
  each with a default. `Config.from_data_dir(path)` puts the write-ahead-log
  directory at `<path>/wal`. `validate()` raises `InvalidConfigError` when a
  setting is out of range.
- `middb.errors` – the exception hierarchy. Every error derives from
  `MidDBError`: `StorageIOError`, `SerializationError`, `KeyNotFoundError`,
  `TransactionConflictError`, `StorageFullError`, `CorruptionError`,
  `InvalidConfigError`, `InvalidArgumentError` and `InternalError`.
- `middb.bloom` – `fnv_hash`, `BloomFilter` and `BloomFilterBuilder`. This is
  an FNV-1a based bloom filter. `to_bytes()` serialises it with a small header
  and `BloomFilter.from_bytes_with_meta()` reads it back. `from_bytes()`
  rebuilds a filter from a raw bit array.
- `middb.schema` – `DataType`, `Column`, `TableSchema` and
  `TableSchemaBuilder`, used to describe tables. Column positions are
  assigned in order.
- `middb.bptree` – `BPTree`, an in-memory B+ tree with a configurable fanout
  of at least 3. It supports ordered iteration and half-open range scans.
  `LeafNode` and `InteriorNode` are its node types.
- `middb.version` – `TableFileMeta`, `LevelFiles`, `Version`, `VersionEdit`
  and `VersionSet` describe which table files sit at each of the seven
  levels. Updates happen through copy-on-write versions.
- `middb.picker` – `CompactionPicker` and `CompactionTask` decide which files
  to compact next:
  - level 0 is compacted once it reaches the configured file count;
  - levels 1–5 are compacted once they exceed their size limit.

## Installation

```
pip install .
```

## Examples

A B+ tree:

```python
from middb.bptree import BPTree

tree = BPTree(4)
for i in range(10):
    tree.insert(i, i * 10)

tree.get(3)              # 30
list(tree.range(3, 7))   # [(3, 30), (4, 40), (5, 50), (6, 60)]
tree.remove(3)           # 30
len(tree)                # 9
```

A bloom filter:

```python
from middb.bloom import BloomFilter

bf = BloomFilter(100, 10)
bf.insert(b"apple")
bf.may_contain(b"apple")   # True
restored = BloomFilter.from_bytes_with_meta(bf.to_bytes())
```

A table schema:

```python
from middb.schema import DataType, TableSchemaBuilder

schema = (
    TableSchemaBuilder("users")
    .column("id", DataType.INT64, False)
    .column("name", DataType.STRING, False)
    .column("email", DataType.STRING, True)
    .build()
)
schema.column_count()               # 3
schema.get_column_index("email")    # 2
str(DataType.INT64)                 # "INT64"
```

Compaction planning:

```python
from middb.config import Config
from middb.picker import CompactionPicker
from middb.version import TableFileMeta, VersionSet

vs = VersionSet()
for file_id in range(4):
    vs.add_file(0, TableFileMeta(file_id, 1000, b"a", b"z", 100, 0))

task = CompactionPicker(Config()).pick(vs.current())
task.level, task.output_level   # (0, 1)
edit = task.to_edit(TableFileMeta(10, 4000, b"a", b"z", 400, 1))
vs.apply_edit(edit)
vs.l0_file_count()              # 0
```

## What this package does not do

These are components, not a working database. The package does not include:

- storage of keys and values on disk;
- a write-ahead log;
- reading or writing of table files, or merging them during compaction;
- a registry of table schemas;
- transactions;
- a server, client or command-line program.

`Config`, the version types and the compaction picker only describe and plan
that work. They do not carry it out.

## Running the tests

```
pip install .[test]
pytest
```