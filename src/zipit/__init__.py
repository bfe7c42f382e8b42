from .core.builder import ArchiveBuilder, build_archive, build_archive_async, flatten_entries
from .core.entries import EntryKind, ResolvedEntry
from .core.inputs import InlineInput, PathInput, parse_input, parse_inputs
from .core.resolver import InputResolver
from .errors import EncodingError, FilesystemError, InvalidInputError, ZipitError
from .filesystem import FileStatus, Filesystem, LocalFilesystem
from .utils.archive import ArchiveMember, ZipEncoder, read_archive

zip = build_archive
zip_async = build_archive_async

__all__ = [
    "ArchiveBuilder",
    "ArchiveMember",
    "EncodingError",
    "EntryKind",
    "FileStatus",
    "Filesystem",
    "FilesystemError",
    "InlineInput",
    "InputResolver",
    "InvalidInputError",
    "LocalFilesystem",
    "PathInput",
    "ResolvedEntry",
    "ZipEncoder",
    "ZipitError",
    "build_archive",
    "build_archive_async",
    "flatten_entries",
    "parse_input",
    "parse_inputs",
    "read_archive",
    "zip",
    "zip_async",
]
