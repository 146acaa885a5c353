"""Engine configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from middb.errors import InvalidConfigError


class CompactionStyle(enum.Enum):
    """Strategy used to merge table files."""

    LEVELED = "leveled"
    UNIVERSAL = "universal"


@dataclass
class Config:
    """Tunable settings of a database instance."""

    memtable_size: int = 64 * 1024 * 1024
    wal_dir: Path = field(default_factory=lambda: Path("./wal"))
    data_dir: Path = field(default_factory=lambda: Path("./data"))
    max_open_files: int = 1000
    compaction_style: CompactionStyle = CompactionStyle.LEVELED
    bloom_bits_per_key: int = 10
    block_size: int = 64 * 1024
    use_compression: bool = False
    level0_file_num_compaction_trigger: int = 4
    max_bytes_for_level_base: int = 10 * 1024 * 1024
    max_bytes_for_level_multiplier: int = 10

    @classmethod
    def from_data_dir(cls, data_dir: str | Path) -> Config:
        """Default settings rooted at ``data_dir``, with the WAL in its ``wal`` subdirectory."""
        data_dir = Path(data_dir)
        return cls(data_dir=data_dir, wal_dir=data_dir / "wal")

    def validate(self) -> None:
        """Raise InvalidConfigError if any setting is out of range."""
        if self.memtable_size < 1024 * 1024:
            raise InvalidConfigError("memtable_size must be at least 1 MB")
        if self.block_size < 4096:
            raise InvalidConfigError("block_size must be at least 4 KB")
        if self.bloom_bits_per_key == 0:
            raise InvalidConfigError("bloom_bits_per_key must be greater than 0")
        if self.level0_file_num_compaction_trigger < 2:
            raise InvalidConfigError(
                "level0_file_num_compaction_trigger must be at least 2"
            )