from __future__ import annotations

import io
import stat
import struct
import sys
import time
import zipfile
import zlib
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from zipit.core.entries import ResolvedEntry
from zipit.errors import EncodingError

COMPRESSION_METHODS = {
    "DEFLATE": zipfile.ZIP_DEFLATED,
    "STORE": zipfile.ZIP_STORED,
}

DEFAULT_FILE_MODE = stat.S_IFREG | 0o644
DEFAULT_DIR_MODE = stat.S_IFDIR | 0o755
MSDOS_DIRECTORY_FLAG = 0x10
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

# ZipInfo.create_system values
SYSTEM_FAT = 0
SYSTEM_UNIX = 3


class ArchiveEncoder(Protocol):
    def encode(
        self,
        entries: Sequence[ResolvedEntry],
        compression: str = "DEFLATE",
        platform: str = sys.platform,
    ) -> bytes: ...


@dataclass(frozen=True)
class ArchiveMember:
    name: str
    is_dir: bool
    contents: bytes
    mode: int


def _date_time(timestamp: float) -> tuple[int, int, int, int, int, int]:
    date_time = time.localtime(timestamp)[:6]
    return date_time if date_time[0] >= 1980 else ZIP_EPOCH


class ZipEncoder:
    """Encode resolved entries into an in-memory zip archive."""

    def __init__(self, compresslevel: int | None = None):
        self.compresslevel = compresslevel

    def encode(
        self,
        entries: Sequence[ResolvedEntry],
        compression: str = "DEFLATE",
        platform: str = sys.platform,
    ) -> bytes:
        method = COMPRESSION_METHODS.get(str(compression).upper())
        if method is None:
            raise EncodingError(
                f"Unsupported compression {compression!r}; expected one of {sorted(COMPRESSION_METHODS)}."
            )

        now = time.time()
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, mode="w", compression=method) as zf:
                for entry in entries:
                    info = self._zip_info(entry, method, platform, now)
                    zf.writestr(info, entry.contents or b"", compresslevel=self.compresslevel)
        except (ValueError, OSError, zlib.error, struct.error) as exc:
            raise EncodingError(str(exc)) from exc

        return buffer.getvalue()

    @staticmethod
    def _zip_info(entry: ResolvedEntry, method: int, platform: str, now: float) -> zipfile.ZipInfo:
        timestamp = entry.mtime if entry.mtime is not None else now
        if entry.is_dir:
            info = zipfile.ZipInfo(entry.name.rstrip("/") + "/", date_time=_date_time(timestamp))
            info.compress_type = zipfile.ZIP_STORED
            mode = entry.mode if entry.mode is not None else DEFAULT_DIR_MODE
            info.external_attr = (mode & 0xFFFF) << 16 | MSDOS_DIRECTORY_FLAG
        else:
            info = zipfile.ZipInfo(entry.name, date_time=_date_time(timestamp))
            info.compress_type = method
            mode = entry.mode if entry.mode is not None else DEFAULT_FILE_MODE
            info.external_attr = (mode & 0xFFFF) << 16
        info.create_system = SYSTEM_FAT if platform.startswith("win") else SYSTEM_UNIX
        return info


def read_archive(data: bytes) -> List[ArchiveMember]:
    """Decode an archive buffer into its members, in central-directory order."""

    try:
        with zipfile.ZipFile(io.BytesIO(data), mode="r") as zf:
            return [
                ArchiveMember(
                    name=info.filename,
                    is_dir=info.is_dir(),
                    contents=b"" if info.is_dir() else zf.read(info),
                    mode=info.external_attr >> 16,
                )
                for info in zf.infolist()
            ]
    except zipfile.BadZipFile as exc:
        raise EncodingError(f"Not a zip archive: {exc}") from exc
