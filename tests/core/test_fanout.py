"""Tests for the gather_all fan-out primitive."""

import asyncio

import pytest

from search_compare.core.fanout import gather_all


class TestGatherAllOrdering:
    """Results come back index-aligned with the input, whatever the finish order."""

    async def test_empty_input_returns_empty_list(self) -> None:
        async def task(item: int) -> int:
            return item

        assert await gather_all([], task) == []

    async def test_results_follow_input_order_not_completion_order(self) -> None:
        delays = [0.03, 0.0, 0.01]

        async def task(delay: float) -> float:
            await asyncio.sleep(delay)
            return delay

        assert await gather_all(delays, task) == delays


class TestGatherAllConcurrency:
    """Every task is launched before any has to finish."""

    async def test_tasks_run_concurrently(self) -> None:
        items = ["a", "b", "c"]
        started: list[str] = []
        all_started = asyncio.Event()

        async def task(item: str) -> str:
            started.append(item)
            if len(started) == len(items):
                all_started.set()
            # Sequential execution would never reach the third start.
            await asyncio.wait_for(all_started.wait(), timeout=1.0)
            return item.upper()

        assert await gather_all(items, task) == ["A", "B", "C"]

    async def test_escaping_exception_propagates(self) -> None:
        async def task(item: int) -> int:
            if item == 2:
                raise ValueError("boom")
            return item

        with pytest.raises(ExceptionGroup):
            await gather_all([1, 2, 3], task)
