"""
Async folds over semigroups and monoids.

Counterparts of `origami.folds` that run through a `Strategy`. Results
match the sequential folds for every strategy; only the schedule of
combines differs. Without an explicit strategy, one is built from
`FoldOptions.from_env()`.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Iterable
import logging

from . import primitives
from .errors import EmptyFoldError
from .folds import infer_monoid
from .strategies import Strategy, CombineFunc, default_strategy
from .traits import combine, unit

T = TypeVar("T")
A = TypeVar("A")

logger = logging.getLogger(__name__)


async def afold(
    items: Iterable[T],
    combine_fn: CombineFunc[T],
    *,
    strategy: Strategy | None = None,
) -> T | None:
    """
    Fold items with an arbitrary associative combine function.

    Args:
        items: Values to combine, in order.
        combine_fn: Associative (a, b) -> c; may be async.
        strategy: Execution strategy; defaults to `default_strategy()`.

    Returns:
        The combined value, or None for an empty input.
    """
    if strategy is None:
        strategy = default_strategy()
    logger.debug("Folding with %r", strategy)
    return await strategy.fold(items, combine_fn)


async def afold_nonempty(
    items: Iterable[T],
    *,
    strategy: Strategy | None = None,
) -> T | None:
    """Combine items with their semigroup; None if empty."""
    return await afold(items, combine, strategy=strategy)


async def afold_monoid(
    items: Iterable[T],
    monoid: type[T] | None = None,
    *,
    strategy: Strategy | None = None,
) -> T:
    """
    Combine items with their monoid; `unit(monoid)` if empty.

    Raises:
        EmptyFoldError: items is empty and monoid was not given.
    """
    values = list(items)
    if monoid is None:
        if not values:
            raise EmptyFoldError()
        monoid = type(values[0])
    identity = unit(monoid)
    result = await afold(values, combine, strategy=strategy)
    return identity if result is None else result


async def afold_map(
    items: Iterable[T],
    f: Callable[[T], A],
    monoid: type[A] | None = None,
    *,
    strategy: Strategy | None = None,
) -> A:
    """
    Map each element to a monoid concurrently, then combine.

    `f` may be async. Mapping calls share the strategy's
    max_concurrency limit.

    Example:
        async def score(doc: str) -> Sum[int]:
            return Sum(await llm.score(doc))

        total = await afold_map(docs, score, Sum, strategy=Tree(8))
    """
    if strategy is None:
        strategy = default_strategy()
    mapped = await primitives.map(items, f, strategy.max_concurrency)
    return await afold_monoid(mapped, infer_monoid(f, monoid), strategy=strategy)


async def afold_map_nonempty(
    items: Iterable[T],
    f: Callable[[T], A],
    *,
    strategy: Strategy | None = None,
) -> A | None:
    """Map each element to a semigroup concurrently, then combine; None if empty."""
    if strategy is None:
        strategy = default_strategy()
    mapped = await primitives.map(items, f, strategy.max_concurrency)
    return await afold_nonempty(mapped, strategy=strategy)
