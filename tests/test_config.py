from pathlib import Path

import pytest

from middb.config import CompactionStyle, Config
from middb.errors import InvalidConfigError


def test_default_config():
    config = Config()
    config.validate()
    assert config.memtable_size == 64 * 1024 * 1024
    assert config.block_size == 64 * 1024
    assert config.bloom_bits_per_key == 10
    assert config.level0_file_num_compaction_trigger == 4
    assert config.compaction_style is CompactionStyle.LEVELED
    assert config.data_dir == Path("./data")
    assert config.wal_dir == Path("./wal")


def test_new_config():
    config = Config.from_data_dir("/tmp/testdb")
    assert config.data_dir == Path("/tmp/testdb")
    assert config.wal_dir == Path("/tmp/testdb/wal")
    assert config.memtable_size == Config().memtable_size


def test_invalid_memtable_size():
    config = Config()
    config.memtable_size = 1024
    with pytest.raises(InvalidConfigError, match="memtable_size"):
        config.validate()


def test_invalid_block_size():
    config = Config()
    config.block_size = 1024
    with pytest.raises(InvalidConfigError, match="block_size"):
        config.validate()


def test_invalid_bloom_bits():
    config = Config(bloom_bits_per_key=0)
    with pytest.raises(InvalidConfigError, match="bloom_bits_per_key"):
        config.validate()


def test_invalid_level0_trigger():
    config = Config(level0_file_num_compaction_trigger=1)
    with pytest.raises(InvalidConfigError, match="level0_file_num_compaction_trigger"):
        config.validate()