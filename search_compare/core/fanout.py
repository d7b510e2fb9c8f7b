"""Launch-all, wait-for-all parallel map shared by every fan-out site."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def gather_all(
    items: Sequence[T], task: Callable[[T], Awaitable[R]]
) -> list[R]:
    """Run ``task`` for every item concurrently and return results in input order.

    Each task owns its own result slot, so callers never need a lock. Tasks are
    expected to capture their own failures as data; an exception escaping a
    task cancels its siblings and propagates.
    """
    if not items:
        return []

    async with asyncio.TaskGroup() as tg:
        handles = [tg.create_task(_await(task(item))) for item in items]

    return [handle.result() for handle in handles]


async def _await(awaitable: Awaitable[R]) -> R:
    return await awaitable
