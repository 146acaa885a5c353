"""Building blocks for a log-structured key-value storage engine: configuration, errors, bloom filters, table schemas, a B+ tree, level versions and compaction planning."""

__version__ = "0.1.0"

__all__ = ["bloom", "bptree", "config", "errors", "picker", "schema", "version"]