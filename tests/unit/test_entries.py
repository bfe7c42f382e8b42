import pytest

from zipit.core.builder import flatten_entries
from zipit.core.entries import EntryKind, ResolvedEntry, directory_entry, file_entry


def test_file_entry_requires_contents_and_directory_forbids_them() -> None:
    with pytest.raises(ValueError):
        ResolvedEntry(name="a", kind=EntryKind.FILE)
    with pytest.raises(ValueError):
        ResolvedEntry(name="a", kind=EntryKind.DIRECTORY, contents=b"x")


def test_reparent_prefixes_name_with_slash() -> None:
    entry = file_entry("leaf.txt", b"data", mode=0o100644)
    moved = entry.reparent("root").reparent("top")
    assert moved.name == "top/root/leaf.txt"
    assert moved.contents == b"data"
    assert moved.mode == 0o100644
    assert entry.name == "leaf.txt"


def test_flatten_entries_keeps_group_order() -> None:
    groups = [
        [directory_entry("dir"), file_entry("dir/a", b"1")],
        [file_entry("b", b"2")],
        [],
    ]
    assert [e.name for e in flatten_entries(groups)] == ["dir", "dir/a", "b"]


def test_flatten_entries_last_duplicate_wins_in_first_position() -> None:
    groups = [[file_entry("a.txt", b"one")], [file_entry("b.txt", b"b")], [file_entry("a.txt", b"two")]]
    flat = flatten_entries(groups)
    assert [e.name for e in flat] == ["a.txt", "b.txt"]
    assert flat[0].contents == b"two"
