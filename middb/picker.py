"""Choosing which table files to merge next."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Iterator

from middb.config import Config
from middb.version import TableFileMeta, Version, VersionEdit


@dataclass
class CompactionTask:
    """Files from ``level`` to merge with overlapping files of ``output_level``."""

    level: int
    input_files: list[TableFileMeta] = field(default_factory=list)
    output_level: int = 1
    target_files: list[TableFileMeta] = field(default_factory=list)

    def all_input_files(self) -> Iterator[TableFileMeta]:
        return chain(self.input_files, self.target_files)

    def to_edit(self, output_file: TableFileMeta) -> VersionEdit:
        """An edit that replaces every input file with ``output_file``."""
        edit = VersionEdit()
        for file in self.input_files:
            edit.delete_file(self.level, file.file_id)
        for file in self.target_files:
            edit.delete_file(self.output_level, file.file_id)
        edit.add_file(self.output_level, output_file)
        return edit


class CompactionPicker:
    """Decides, from a version, whether and what to compact."""

    def __init__(self, config: Config) -> None:
        self.level0_trigger = config.level0_file_num_compaction_trigger
        self.level_size_base = config.max_bytes_for_level_base
        self.level_size_multiplier = config.max_bytes_for_level_multiplier

    def pick(self, version: Version) -> CompactionTask | None:
        task = self._pick_l0(version)
        if task is not None:
            return task
        for level in range(1, 6):
            task = self._pick_level(version, level)
            if task is not None:
                return task
        return None

    def _pick_l0(self, version: Version) -> CompactionTask | None:
        l0 = version.level(0)
        if l0 is None or l0.file_count() < self.level0_trigger:
            return None
        input_files = list(l0.files)
        smallest, largest = self._key_range(input_files)
        l1 = version.level(1)
        if l1 is None:
            return None
        return CompactionTask(
            level=0,
            input_files=input_files,
            output_level=1,
            target_files=l1.find_overlapping(smallest, largest),
        )

    def _pick_level(self, version: Version, level: int) -> CompactionTask | None:
        files = version.level(level)
        if files is None or files.total_size() <= self.max_bytes_for_level(level):
            return None
        if not files.files:
            return None
        file = files.files[0]
        next_level = version.level(level + 1)
        if next_level is None:
            return None
        return CompactionTask(
            level=level,
            input_files=[file],
            output_level=level + 1,
            target_files=next_level.find_overlapping(file.smallest_key, file.largest_key),
        )

    def max_bytes_for_level(self, level: int) -> int:
        """Size limit of ``level``: the base, times the multiplier for each level past 1."""
        return self.level_size_base * self.level_size_multiplier ** max(level - 1, 0)

    @staticmethod
    def _key_range(files: list[TableFileMeta]) -> tuple[bytes, bytes]:
        smallest = min((f.smallest_key for f in files), default=b"")
        largest = max((f.largest_key for f in files), default=b"")
        return smallest, largest