from __future__ import annotations

import asyncio
from typing import Awaitable, Iterable, List, TypeVar

T = TypeVar("T")


async def gather_first_error(aws: Iterable[Awaitable[T]]) -> List[T]:
    """Run awaitables concurrently and return their results in submission order.

    The first failure cancels every task still pending and is re-raised as-is;
    results of the other tasks are discarded.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    for task in pending:
        task.cancel()

    failed = [task for task in tasks if task in done and not task.cancelled() and task.exception()]
    if failed:
        raise failed[0].exception()

    return [task.result() for task in tasks]
