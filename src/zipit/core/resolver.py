from __future__ import annotations

import asyncio
import logging
import os
from concurrent.futures import Executor
from typing import Callable, List, Optional, TypeVar

from zipit.core.entries import ResolvedEntry, directory_entry, file_entry
from zipit.core.inputs import InlineInput, Input
from zipit.errors import FilesystemError
from zipit.filesystem import Filesystem
from zipit.utils.concurrency import gather_first_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InputResolver:
    """Turn parsed inputs into archive entries.

    Filesystem calls run on ``executor`` so siblings in a directory are stat'ed
    and read concurrently; results are always emitted in listing order.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        executor: Executor,
        on_skip: Optional[Callable[[str], None]] = None,
    ):
        self.filesystem = filesystem
        self.executor = executor
        self.on_skip = on_skip

    async def resolve(self, item: Input, base_dir: str) -> List[ResolvedEntry]:
        if isinstance(item, InlineInput):
            return [file_entry(item.name, item.data)]

        path = os.path.abspath(os.path.join(base_dir, item.path))
        return await self._resolve_path(path)

    async def _resolve_path(self, path: str) -> List[ResolvedEntry]:
        status = await self._run(self.filesystem.stat, path)
        name = os.path.basename(path)

        if status.is_file:
            contents = await self._run(self.filesystem.read_file, path)
            logger.debug("Read %s (%d bytes)", path, len(contents))
            return [file_entry(name, contents, mode=status.mode, mtime=status.mtime)]

        if status.is_dir:
            children = await self._run(self.filesystem.read_dir, path)
            logger.debug("Listing %s: %d child(ren)", path, len(children))
            nested = await gather_first_error(
                self._resolve_path(os.path.join(path, child)) for child in children
            )
            entries = [directory_entry(name, mode=status.mode, mtime=status.mtime)]
            for child_entries in nested:
                entries.extend(entry.reparent(name) for entry in child_entries)
            return entries

        logger.debug("Skipping %s: neither a regular file nor a directory", path)
        if self.on_skip is not None:
            self.on_skip(path)
        return []

    async def _run(self, func: Callable[[str], T], path: str) -> T:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(self.executor, func, path)
        except FilesystemError:
            raise
        except OSError as exc:
            raise FilesystemError(path, exc) from exc
