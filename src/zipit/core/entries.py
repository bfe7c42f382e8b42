from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ResolvedEntry:
    """One archive record produced by resolving an input.

    ``name`` is archive-relative and always ``/`` separated. ``contents`` is set
    for files and ``None`` for directory markers.
    """

    name: str
    kind: EntryKind
    contents: bytes | None = None
    mode: int | None = None
    mtime: float | None = None

    def __post_init__(self) -> None:
        if self.kind is EntryKind.FILE and self.contents is None:
            raise ValueError(f"file entry {self.name!r} requires contents")
        if self.kind is EntryKind.DIRECTORY and self.contents is not None:
            raise ValueError(f"directory entry {self.name!r} cannot carry contents")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def reparent(self, parent: str) -> ResolvedEntry:
        return replace(self, name=f"{parent}/{self.name}")


def file_entry(
    name: str, contents: bytes, mode: int | None = None, mtime: float | None = None
) -> ResolvedEntry:
    return ResolvedEntry(name=name, kind=EntryKind.FILE, contents=contents, mode=mode, mtime=mtime)


def directory_entry(name: str, mode: int | None = None, mtime: float | None = None) -> ResolvedEntry:
    return ResolvedEntry(name=name, kind=EntryKind.DIRECTORY, mode=mode, mtime=mtime)
