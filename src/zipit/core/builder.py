from __future__ import annotations

import asyncio
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from zipit.config.settings import Settings
from zipit.core.entries import ResolvedEntry
from zipit.core.inputs import Input, parse_inputs
from zipit.core.resolver import InputResolver
from zipit.filesystem import Filesystem, LocalFilesystem
from zipit.utils.archive import ArchiveEncoder, ZipEncoder
from zipit.utils.concurrency import gather_first_error

logger = logging.getLogger(__name__)


def flatten_entries(groups: Iterable[Sequence[ResolvedEntry]]) -> List[ResolvedEntry]:
    """Concatenate entry groups in order.

    A repeated name replaces the earlier entry's contents but keeps its position.
    """
    merged: Dict[str, ResolvedEntry] = {}
    for group in groups:
        for entry in group:
            if entry.name in merged:
                logger.debug("Replacing duplicate archive entry %s", entry.name)
            merged[entry.name] = entry
    return list(merged.values())


class ArchiveBuilder:
    """Resolve every input, then hand the flattened entries to the encoder."""

    def __init__(
        self,
        resolver: InputResolver,
        encoder: ArchiveEncoder,
        compression: str = "DEFLATE",
        platform: str = sys.platform,
    ):
        self.resolver = resolver
        self.encoder = encoder
        self.compression = compression
        self.platform = platform

    async def build(self, inputs: Sequence[Input], base_dir: str) -> bytes:
        resolved = await gather_first_error(
            self.resolver.resolve(item, base_dir) for item in inputs
        )
        entries = flatten_entries(resolved)
        logger.info(
            "Encoding %d entries from %d input(s) (compression=%s, platform=%s)",
            len(entries),
            len(inputs),
            self.compression,
            self.platform,
        )
        return self.encoder.encode(entries, compression=self.compression, platform=self.platform)


async def build_archive_async(
    input: Any,
    cwd: str | os.PathLike | None = None,
    *,
    settings: Optional[Settings] = None,
    filesystem: Optional[Filesystem] = None,
    encoder: Optional[ArchiveEncoder] = None,
    on_skip: Optional[Callable[[str], None]] = None,
) -> bytes:
    """Build a zip archive from paths and inline payloads.

    Args:
        input: A path, a ``{"name": ..., "data": ...}`` mapping, a parsed
            ``PathInput``/``InlineInput``, or a list/tuple of those.
        cwd: Base directory for relative paths. Defaults to the process cwd.
        settings: Build settings; loaded from the environment when omitted.
        filesystem: Filesystem capability. Defaults to ``LocalFilesystem``.
        encoder: Archive encoder. Defaults to ``ZipEncoder``.
        on_skip: Called with the path of every entry that is neither a
            regular file nor a directory.

    Returns:
        The archive bytes.

    Raises:
        InvalidInputError: An input has an unsupported shape.
        FilesystemError: A stat, listing or read failed.
        EncodingError: The encoder rejected the entries.
    """
    settings = settings or Settings()
    items = parse_inputs(input, settings.text_encoding)
    base_dir = os.fspath(cwd) if cwd is not None else os.getcwd()

    executor = ThreadPoolExecutor(max_workers=settings.max_workers, thread_name_prefix="zipit-fs")
    try:
        resolver = InputResolver(filesystem or LocalFilesystem(), executor, on_skip=on_skip)
        builder = ArchiveBuilder(
            resolver,
            encoder or ZipEncoder(compresslevel=settings.compresslevel),
            compression=settings.compression,
            platform=settings.platform,
        )
        return await builder.build(items, base_dir)
    finally:
        # In-flight reads may finish in the background; their results are dropped.
        executor.shutdown(wait=False, cancel_futures=True)


def build_archive(input: Any, cwd: str | os.PathLike | None = None, **kwargs: Any) -> bytes:
    """Blocking wrapper around ``build_archive_async``.

    Starts its own event loop, so it cannot be called from a coroutine; await
    ``build_archive_async`` there instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            "build_archive() cannot be called from a running event loop; await build_archive_async() instead"
        )
    return asyncio.run(build_archive_async(input, cwd, **kwargs))
