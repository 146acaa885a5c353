from middb.config import Config
from middb.picker import CompactionPicker, CompactionTask
from middb.version import TableFileMeta, VersionSet


def make_config():
    config = Config()
    config.level0_file_num_compaction_trigger = 4
    config.max_bytes_for_level_base = 10 * 1024 * 1024
    return config


def make_file(file_id, smallest, largest, size):
    return TableFileMeta(file_id, size, smallest, largest, 100, 0)


def test_no_compaction_needed():
    picker = CompactionPicker(make_config())
    vs = VersionSet()
    vs.add_file(0, make_file(1, b"a", b"z", 1000))
    vs.add_file(0, make_file(2, b"a", b"z", 1000))
    assert picker.pick(vs.current()) is None


def test_l0_compaction_trigger():
    picker = CompactionPicker(make_config())
    vs = VersionSet()
    for i in range(4):
        vs.add_file(0, make_file(i, b"a", b"z", 1000))

    task = picker.pick(vs.current())
    assert task is not None
    assert task.level == 0
    assert task.output_level == 1
    assert len(task.input_files) == 4


def test_l0_compaction_with_overlap():
    picker = CompactionPicker(make_config())
    vs = VersionSet()
    for i in range(4):
        vs.add_file(0, make_file(i, b"a", b"m", 1000))
    vs.add_file(1, make_file(10, b"a", b"f", 1000))
    vs.add_file(1, make_file(11, b"g", b"m", 1000))
    vs.add_file(1, make_file(12, b"n", b"z", 1000))

    task = picker.pick(vs.current())
    assert len(task.target_files) == 2
    assert sorted(f.file_id for f in task.target_files) == [10, 11]


def test_version_edit_from_task():
    task = CompactionTask(
        level=0,
        input_files=[make_file(1, b"a", b"z", 1000)],
        output_level=1,
        target_files=[make_file(2, b"a", b"z", 1000)],
    )
    edit = task.to_edit(make_file(3, b"a", b"z", 2000))
    assert len(edit.deleted_files) == 2
    assert len(edit.new_files) == 1
    assert edit.deleted_files == [(0, 1), (1, 2)]
    assert edit.new_files[0][0] == 1


def test_all_input_files_order():
    task = CompactionTask(
        level=0,
        input_files=[make_file(1, b"a", b"b", 1)],
        output_level=1,
        target_files=[make_file(2, b"c", b"d", 1)],
    )
    assert [f.file_id for f in task.all_input_files()] == [1, 2]


def test_level_compaction_when_over_size():
    picker = CompactionPicker(make_config())
    vs = VersionSet()
    vs.add_file(1, make_file(5, b"a", b"k", 11 * 1024 * 1024))
    vs.add_file(2, make_file(6, b"c", b"e", 1000))
    vs.add_file(2, make_file(7, b"x", b"z", 1000))

    task = picker.pick(vs.current())
    assert task.level == 1
    assert task.output_level == 2
    assert [f.file_id for f in task.input_files] == [5]
    assert [f.file_id for f in task.target_files] == [6]


def test_max_bytes_for_level():
    picker = CompactionPicker(make_config())
    assert picker.max_bytes_for_level(1) == 10 * 1024 * 1024
    assert picker.max_bytes_for_level(2) == 100 * 1024 * 1024
    assert picker.max_bytes_for_level(3) == 1000 * 1024 * 1024


def test_applying_task_edit_moves_files():
    picker = CompactionPicker(make_config())
    vs = VersionSet()
    for i in range(4):
        vs.add_file(0, make_file(i, b"a", b"z", 1000))
    task = picker.pick(vs.current())
    vs.apply_edit(task.to_edit(make_file(99, b"a", b"z", 4000)))
    assert vs.l0_file_count() == 0
    assert [f.file_id for f in vs.current().level(1).files] == [99]
    assert picker.pick(vs.current()) is None