"""
Sequential folds over semigroups, monoids and reducers.

Every function accepts any iterable, including one-shot iterators, and
consumes it exactly once, left to right.
"""

from __future__ import annotations
from functools import reduce
from itertools import chain
from typing import TypeVar, Callable, Iterable, Iterator

from .errors import EmptyFoldError, NoInstanceError
from .traits import Reducer, combine, is_monoid, unit

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")

_MISSING = object()


def fold_monoid(items: Iterable[T], monoid: type[T] | None = None) -> T:
    """
    Fold items with their monoid, starting from its unit.

    Args:
        items: Values of a single monoid type.
        monoid: The monoid type. Inferred from the first element when
                omitted, which needs a non-empty input.

    Returns:
        The combined value, or `unit(monoid)` for an empty input.

    Raises:
        EmptyFoldError: items is empty and monoid was not given.
        NoInstanceError: the type is not a monoid.

    Example:
        fold_monoid([Sum(1), Sum(2), Sum(3)])  # Sum(6)
        fold_monoid([], Sum)                   # Sum(0)
    """
    it = iter(items)
    if monoid is None:
        first = next(it, _MISSING)
        if first is _MISSING:
            raise EmptyFoldError()
        monoid = type(first)
        it = chain([first], it)
    return reduce(combine, it, unit(monoid))


def fold_nonempty(items: Iterable[T]) -> T | None:
    """
    Fold items with their semigroup, starting from the first element.

    Returns None for an empty input.

    Example:
        fold_nonempty([Product(1), Product(2), Product(3)])  # Product(6)
    """
    it = iter(items)
    first = next(it, _MISSING)
    if first is _MISSING:
        return None
    return reduce(combine, it, first)


def infer_monoid(f: Callable, monoid: type | None) -> type | None:
    # fold_map(xs, Sum) needs no separate monoid argument
    if monoid is None and isinstance(f, type) and is_monoid(f):
        return f
    return monoid


def fold_map(
    items: Iterable[T],
    f: Callable[[T], A],
    monoid: type[A] | None = None,
) -> A:
    """
    Map each element to a monoid, then combine the results.

    When `f` is itself a monoid type (e.g. `Sum`), it doubles as the
    monoid, so empty inputs need no explicit `monoid`.

    Example:
        fold_map([True, False, True], All).into_inner()  # False
    """
    return fold_monoid(map(f, items), infer_monoid(f, monoid))


def fold_map_nonempty(items: Iterable[T], f: Callable[[T], A]) -> A | None:
    """Map each element to a semigroup, then combine; None if empty."""
    return fold_nonempty(map(f, items))


def _reduce_str(first: str, rest: Iterator[str]) -> str:
    return "".join(chain([first], rest))


def _reduce_list(first: Iterable, rest: Iterator[Iterable]) -> list:
    result = list(first)
    for chunk in rest:
        result.extend(chunk)
    return result


_BUILTIN_REDUCERS: dict[type, Callable[[object, Iterator], object]] = {
    str: _reduce_str,
    list: _reduce_list,
}


def _check_reducer(reducer: type) -> None:
    if reducer in _BUILTIN_REDUCERS:
        return
    if not (isinstance(reducer, type) and issubclass(reducer, Reducer)):
        raise NoInstanceError(reducer, "reducer")


def fold_reduce_nonempty(items: Iterable[T], reducer: type[R]) -> R | None:
    """
    Accumulate raw elements into a reducer; None for an empty input.

    `str` joins strings in one pass and `list` extends a single list
    with each iterable element. Other reducers are `Reducer` subclasses:
    the first element goes through `from_value`, the rest through
    `combine_right`.
    """
    _check_reducer(reducer)
    it = iter(items)
    first = next(it, _MISSING)
    if first is _MISSING:
        return None

    builtin = _BUILTIN_REDUCERS.get(reducer)
    if builtin is not None:
        return builtin(first, it)

    acc = reducer.from_value(first)
    for value in it:
        acc = acc.combine_right(value)
    return acc


def fold_reduce(items: Iterable[T], reducer: type[R]) -> R:
    """
    Accumulate raw elements into a reducer that is also a monoid.

    Example:
        fold_reduce(["Applejack", "Fluttershy", "Rarity"], str)
        # "ApplejackFluttershyRarity"
    """
    _check_reducer(reducer)
    identity = unit(reducer)
    result = fold_reduce_nonempty(items, reducer)
    return identity if result is None else result
