from __future__ import annotations

from zipit.utils.archive import ArchiveMember


def format_size(num_bytes: int) -> str:
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024


def describe_member(member: ArchiveMember) -> str:
    if member.is_dir:
        return member.name
    return f"{member.name}\t{len(member.contents)}"
