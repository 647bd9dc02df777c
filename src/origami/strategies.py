"""
Execution strategies for folds.

A strategy decides the order and concurrency in which adjacent elements
are combined. Only associativity is assumed, never commutativity: every
strategy returns the same value as a left-to-right fold.

    tree = Tree(max_concurrency=8)
    total = await tree.fold(items, combine_fn)

combine_fn may be a plain function or an async one, which makes the
concurrent strategies worthwhile for expensive combines such as remote
or LLM calls.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Callable, Awaitable, Iterable, Union
import logging

from .config import FoldOptions
from .primitives import call, gather_all, limiter

T = TypeVar("T")

CombineFunc = Callable[[T, T], Union[T, Awaitable[T]]]

logger = logging.getLogger(__name__)

_MISSING = object()


class Strategy(ABC, Generic[T]):
    """Base class for fold strategies."""

    def __init__(self, max_concurrency: int | None = None):
        """
        Args:
            max_concurrency: Maximum combines running at once.
                             None means unbounded.
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self.max_concurrency = max_concurrency

    @abstractmethod
    async def fold(self, items: Iterable[T], combine: CombineFunc[T]) -> T | None:
        """Combine all items, returning None for an empty input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_concurrency={self.max_concurrency})"


class Sequential(Strategy[T]):
    """Left-to-right fold, one combine at a time."""

    def __init__(self) -> None:
        super().__init__(max_concurrency=1)

    async def fold(self, items: Iterable[T], combine: CombineFunc[T]) -> T | None:
        it = iter(items)
        acc = next(it, _MISSING)
        if acc is _MISSING:
            return None
        for value in it:
            acc = await call(combine, acc, value)
        return acc

    def __repr__(self) -> str:
        return "Sequential()"


class Chunked(Strategy[T]):
    """
    Fold consecutive chunks concurrently, then fold the partial results.

    Each chunk is folded sequentially; chunks run side by side, at most
    max_concurrency at a time. Partial results are combined in chunk
    order.
    """

    def __init__(self, chunk_size: int, max_concurrency: int | None = None):
        super().__init__(max_concurrency)
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.chunk_size = chunk_size

    async def fold(self, items: Iterable[T], combine: CombineFunc[T]) -> T | None:
        values = list(items)
        if not values:
            return None

        chunks = [
            values[i:i + self.chunk_size]
            for i in range(0, len(values), self.chunk_size)
        ]
        logger.debug("Chunked fold: %d items in %d chunks", len(values), len(chunks))

        limit = limiter(self.max_concurrency)
        sequential = Sequential()

        async def fold_chunk(chunk: list[T]) -> T:
            async with limit:
                return await sequential.fold(chunk, combine)

        partials = await gather_all(fold_chunk(chunk) for chunk in chunks)
        return await sequential.fold(partials, combine)

    def __repr__(self) -> str:
        return (
            f"Chunked(chunk_size={self.chunk_size}, "
            f"max_concurrency={self.max_concurrency})"
        )


class Tree(Strategy[T]):
    """
    Pairwise tree reduction.

    Each round combines adjacent pairs in parallel, halving the number
    of values; an odd trailing value carries over to the next round.
    n items take ceil(log2(n)) rounds and n - 1 combines in total.
    """

    async def fold(self, items: Iterable[T], combine: CombineFunc[T]) -> T | None:
        level = list(items)
        if not level:
            return None

        limit = limiter(self.max_concurrency)

        async def combine_pair(a: T, b: T) -> T:
            async with limit:
                return await call(combine, a, b)

        rounds = 0
        size = len(level)
        while len(level) > 1:
            carry = level[-1:] if len(level) % 2 else []
            pairs = zip(level[0::2], level[1::2])
            combined = await gather_all(combine_pair(a, b) for a, b in pairs)
            level = [*combined, *carry]
            rounds += 1

        logger.debug("Tree fold: %d items in %d rounds", size, rounds)
        return level[0]


def default_strategy(options: FoldOptions | None = None) -> Strategy:
    """Build the strategy described by options (or the environment)."""
    if options is None:
        options = FoldOptions.from_env()

    if options.strategy == "sequential":
        return Sequential()
    if options.strategy == "chunked":
        return Chunked(options.chunk_size, options.max_concurrency)
    return Tree(options.max_concurrency)
