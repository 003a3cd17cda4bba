"""Bounded fan-out on top of ``asyncio.TaskGroup``."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

log = getLogger(__name__)

type Job = Callable[[], Awaitable[None]]


async def run_bounded(jobs: Iterable[Job], *, limit: int) -> None:
    """Run ``jobs`` with at most ``limit`` in flight and wait for all of them.

    Jobs start in iteration order. The first failure cancels the remaining jobs
    and is re-raised as-is rather than wrapped in an ``ExceptionGroup``.
    """

    if limit < 1:
        raise ValueError(f"Concurrency limit must be >= 1, got {limit}")

    semaphore = asyncio.Semaphore(limit)

    async def guarded(job: Job) -> None:
        async with semaphore:
            await job()

    try:
        async with asyncio.TaskGroup() as group:
            for job in jobs:
                group.create_task(guarded(job))
    except ExceptionGroup as exc_group:
        failures = _leaf_exceptions(exc_group)
        for extra in failures[1:]:
            log.error("Additional failure while draining work queue: %r", extra)
        raise failures[0] from None


def _leaf_exceptions(group: BaseExceptionGroup[BaseException]) -> list[BaseException]:
    leaves: list[BaseException] = []
    for exc in group.exceptions:
        if isinstance(exc, BaseExceptionGroup):
            leaves.extend(_leaf_exceptions(exc))
        else:
            leaves.append(exc)
    return leaves
