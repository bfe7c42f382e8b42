from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass
from typing import List, Protocol


@dataclass(frozen=True)
class FileStatus:
    is_file: bool
    is_dir: bool
    mode: int | None = None
    mtime: float | None = None


class Filesystem(Protocol):
    """Blocking filesystem primitives used by the resolver.

    Implementations raise ``OSError`` (or ``FilesystemError``) on failure.
    """

    def stat(self, path: str) -> FileStatus: ...

    def read_dir(self, path: str) -> List[str]: ...

    def read_file(self, path: str) -> bytes: ...


class LocalFilesystem:
    """``Filesystem`` backed by the host operating system."""

    def stat(self, path: str) -> FileStatus:
        st = os.stat(path)
        return FileStatus(
            is_file=stat_module.S_ISREG(st.st_mode),
            is_dir=stat_module.S_ISDIR(st.st_mode),
            mode=st.st_mode,
            mtime=st.st_mtime,
        )

    def read_dir(self, path: str) -> List[str]:
        # os.listdir keeps the platform's enumeration order
        return os.listdir(path)

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()
