"""Tests for async helpers."""

import asyncio
import pytest
from origami import primitives


class TestCall:
    @pytest.mark.asyncio
    async def test_sync_function(self):
        assert await primitives.call(lambda a, b: a * b, 3, 4) == 12

    @pytest.mark.asyncio
    async def test_async_function(self):
        async def add(a, b):
            return a + b

        assert await primitives.call(add, 3, 4) == 7


class TestMap:
    @pytest.mark.asyncio
    async def test_keeps_order(self):
        async def delayed(x: int) -> int:
            await asyncio.sleep(0.001 * (5 - x))
            return x * 10

        assert await primitives.map(range(5), delayed) == [0, 10, 20, 30, 40]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await primitives.map([], str) == []


class TestGatherAll:
    @pytest.mark.asyncio
    async def test_results_in_order(self):
        async def delayed(x: int) -> int:
            await asyncio.sleep(0.001 * (3 - x))
            return x

        assert await primitives.gather_all(delayed(x) for x in range(3)) == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_failure_cancels_others(self):
        cancelled = []

        async def fail():
            raise RuntimeError("boom")

        async def slow(x: int) -> int:
            try:
                await asyncio.sleep(1)
            except asyncio.CancelledError:
                cancelled.append(x)
                raise
            return x

        with pytest.raises(RuntimeError, match="boom"):
            await primitives.gather_all([slow(1), fail(), slow(2)])
        assert sorted(cancelled) == [1, 2]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await primitives.gather_all([]) == []
