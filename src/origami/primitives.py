"""Async helpers shared by the fold strategies."""

from __future__ import annotations
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import TypeVar, Awaitable, Callable, Iterable
import asyncio
import inspect

T = TypeVar("T")
U = TypeVar("U")


async def call(fn: Callable[..., T], *args) -> T:
    """Call fn, awaiting the result if it is awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def limiter(max_concurrency: int | None) -> AbstractAsyncContextManager:
    """Semaphore capping concurrent work; a no-op when unbounded."""
    if max_concurrency is None:
        return nullcontext()
    return asyncio.Semaphore(max_concurrency)


async def gather_all(aws: Iterable[Awaitable[T]]) -> list[T]:
    """
    Await all awaitables concurrently, results in input order.

    If any of them raises, the unfinished ones are cancelled and awaited
    before the exception propagates.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def map(
    items: Iterable[T],
    fn: Callable[[T], U],
    max_concurrency: int | None = None,
) -> list[U]:
    """
    Apply fn to every item concurrently, keeping input order.

    fn may be sync or async. The first exception propagates and the
    remaining calls are cancelled.
    """
    limit = limiter(max_concurrency)

    async def apply(item: T) -> U:
        async with limit:
            return await call(fn, item)

    return await gather_all(apply(item) for item in items)
