"""Versioned view of the table files held at each level of the tree."""

from __future__ import annotations

import threading
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Iterator

MAX_LEVELS = 7


@dataclass(frozen=True)
class TableFileMeta:
    """Description of one sorted table file on disk."""

    file_id: int
    file_size: int
    smallest_key: bytes
    largest_key: bytes
    num_entries: int = 0
    level: int = 0

    def may_contain(self, key: bytes) -> bool:
        """True if ``key`` lies inside this file's key range."""
        return self.smallest_key <= key <= self.largest_key


class LevelFiles:
    """The files of one level; files above level 0 are kept sorted by smallest key."""

    def __init__(self, level: int) -> None:
        self.level = level
        self.files: list[TableFileMeta] = []

    def total_size(self) -> int:
        return sum(f.file_size for f in self.files)

    def file_count(self) -> int:
        return len(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def add_file(self, file: TableFileMeta) -> None:
        if self.level == 0:
            self.files.append(file)
        else:
            pos = bisect_left([f.smallest_key for f in self.files], file.smallest_key)
            self.files.insert(pos, file)

    def remove_file(self, file_id: int) -> None:
        self.files = [f for f in self.files if f.file_id != file_id]

    def find_overlapping(self, smallest: bytes, largest: bytes) -> list[TableFileMeta]:
        """Files whose key range intersects ``[smallest, largest]``."""
        return [
            f
            for f in self.files
            if f.smallest_key <= largest and smallest <= f.largest_key
        ]

    def copy(self) -> LevelFiles:
        clone = LevelFiles(self.level)
        clone.files = list(self.files)
        return clone

    def __repr__(self) -> str:
        return f"LevelFiles(level={self.level}, files={self.files!r})"


class Version:
    """An immutable-by-convention snapshot of every level's files."""

    def __init__(self) -> None:
        self.levels: list[LevelFiles] = [LevelFiles(i) for i in range(MAX_LEVELS)]

    def level(self, level: int) -> LevelFiles | None:
        if 0 <= level < len(self.levels):
            return self.levels[level]
        return None

    def l0_file_count(self) -> int:
        return self.levels[0].file_count() if self.levels else 0

    def level_size(self, level: int) -> int:
        files = self.level(level)
        return files.total_size() if files is not None else 0

    def all_files(self) -> Iterator[TableFileMeta]:
        for level in self.levels:
            yield from level.files

    def files_for_key(self, key: bytes) -> list[TableFileMeta]:
        """Files that may hold ``key``, newest first: level 0 in reverse, then one per level."""
        result = [f for f in reversed(self.levels[0].files) if f.may_contain(key)]
        for level in self.levels[1:]:
            idx = bisect_right([f.largest_key for f in level.files], key, hi=len(level.files))
            # bisect_right finds the first file whose largest key exceeds key;
            # a file whose largest key equals key sits just before it.
            for candidate in (idx - 1, idx):
                if 0 <= candidate < len(level.files) and level.files[candidate].may_contain(key):
                    result.append(level.files[candidate])
                    break
        return result

    def copy(self) -> Version:
        clone = Version.__new__(Version)
        clone.levels = [lf.copy() for lf in self.levels]
        return clone


@dataclass
class VersionEdit:
    """A batch of file removals and additions to apply to a version."""

    deleted_files: list[tuple[int, int]] = field(default_factory=list)
    new_files: list[tuple[int, TableFileMeta]] = field(default_factory=list)

    def delete_file(self, level: int, file_id: int) -> None:
        self.deleted_files.append((level, file_id))

    def add_file(self, level: int, file: TableFileMeta) -> None:
        self.new_files.append((level, file))


class VersionSet:
    """Holds the current version and hands out file ids."""

    def __init__(self) -> None:
        self._current = Version()
        self._next_file_id = 1
        self._id_lock = threading.Lock()

    def current(self) -> Version:
        return self._current

    def next_file_id(self) -> int:
        """Reserve and return a fresh file id."""
        with self._id_lock:
            file_id = self._next_file_id
            self._next_file_id += 1
        return file_id

    def add_file(self, level: int, file: TableFileMeta) -> None:
        version = self._current.copy()
        files = version.level(level)
        if files is not None:
            files.add_file(file)
        self._current = version

    def apply_edit(self, edit: VersionEdit) -> None:
        version = self._current.copy()
        for level, file_id in edit.deleted_files:
            files = version.level(level)
            if files is not None:
                files.remove_file(file_id)
        for level, file in edit.new_files:
            files = version.level(level)
            if files is not None:
                files.add_file(file)
        self._current = version

    def l0_file_count(self) -> int:
        return self._current.l0_file_count()

    def level_size(self, level: int) -> int:
        return self._current.level_size(level)