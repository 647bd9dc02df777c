"""
Semigroup, monoid and reducer abstractions.

A semigroup is a type with an associative combining operation:

    combine(combine(a, b), c) == combine(a, combine(b, c))

A monoid is a semigroup with a unit that leaves values unchanged:

    combine(unit(T), x) == x == combine(x, unit(T))

Classes opt in by subclassing `Semigroup` or `Monoid`. Types the library
does not own (builtins, third-party classes) get instances through
`register`; `str`, `list`, `tuple` and `None` come pre-registered.

Many types form semigroups in more than one way, e.g. integers under
either addition or multiplication, so plain `int` has no instance. Pick
one with a wrapper from `origami.wrappers` (`Sum`, `Product`, ...).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable

from .errors import NoInstanceError

T = TypeVar("T")
V = TypeVar("V")

S = TypeVar("S", bound="Semigroup")
M = TypeVar("M", bound="Monoid")
R = TypeVar("R", bound="Reducer")

CombineFunc = Callable[[T, T], T]


class Semigroup(ABC):
    """A type with an associative `combine`."""

    @abstractmethod
    def combine(self: S, other: S) -> S:
        ...


class Monoid(Semigroup):
    """A semigroup with an identity element."""

    @classmethod
    @abstractmethod
    def unit(cls: type[M]) -> M:
        ...


class Reducer(Semigroup, Generic[V]):
    """
    A semigroup with a canonical mapping from elements of type V.

    Folding with a reducer avoids wrapping every element first: the
    accumulator absorbs raw values via `combine_right`. Override
    `combine_right` (and `combine_left`) when the accumulator can grow
    in place.

    Example:
        @dataclass
        class Count(Reducer[str]):
            n: int

            @classmethod
            def from_value(cls, value: str) -> Count:
                return cls(1)

            def combine(self, other: Count) -> Count:
                return Count(self.n + other.n)

        fold_reduce_nonempty(["a", "b", "c"], Count)  # Count(3)
    """

    @classmethod
    @abstractmethod
    def from_value(cls: type[R], value: V) -> R:
        ...

    def combine_left(self: R, value: V) -> R:
        return type(self).from_value(value).combine(self)

    def combine_right(self: R, value: V) -> R:
        return self.combine(type(self).from_value(value))


class Wrapper:
    """Single-field types; the wrapped value lives in `value`."""

    value: object

    @classmethod
    def from_inner(cls, value):
        return cls(value)

    def into_inner(self):
        return self.value


@dataclass(frozen=True)
class Instance(Generic[T]):
    """Semigroup (and optionally monoid) operations for one type."""
    combine: CombineFunc[T]
    unit: Callable[[type[T]], T] | None = None


_INSTANCES: dict[type, Instance] = {}


def register(
    cls: type[T],
    combine: CombineFunc[T],
    unit: Callable[[], T] | None = None,
) -> None:
    """
    Register a semigroup instance for `cls`.

    Args:
        cls: Type to register. Subclasses inherit the instance.
        combine: Associative binary operation.
        unit: Zero-argument factory for the identity element. When
              given, `cls` is also a monoid.
    """
    _INSTANCES[cls] = Instance(
        combine=combine,
        unit=None if unit is None else (lambda _cls: unit()),
    )


def instance_for(cls: type) -> Instance:
    """Find the instance for `cls`, following its MRO."""
    for klass in cls.__mro__:
        instance = _INSTANCES.get(klass)
        if instance is not None:
            return instance
    raise NoInstanceError(cls)


def is_semigroup(cls: type) -> bool:
    return any(klass in _INSTANCES for klass in cls.__mro__)


def is_monoid(cls: type) -> bool:
    if not is_semigroup(cls):
        return False
    return instance_for(cls).unit is not None


def combine(a: T | None, b: T | None) -> T | None:
    """
    Combine two values using their semigroup instance.

    `None` acts as the optional semigroup: it is skipped, so
    `combine(None, x) == x` and `combine(x, None) == x`.
    """
    if a is None:
        return b
    if b is None:
        return a
    return instance_for(type(a)).combine(a, b)


def unit(cls: type[T]) -> T:
    """Return the identity element of monoid type `cls`."""
    instance = instance_for(cls)
    if instance.unit is None:
        raise NoInstanceError(cls, "monoid")
    return instance.unit(cls)


def _concat_list(a: list, b: list) -> list:
    return [*a, *b]


_INSTANCES[Semigroup] = Instance(combine=lambda a, b: a.combine(b))
_INSTANCES[Monoid] = Instance(
    combine=lambda a, b: a.combine(b),
    unit=lambda cls: cls.unit(),
)
_INSTANCES[type(None)] = Instance(
    combine=lambda a, b: None,
    unit=lambda cls: None,
)
register(str, lambda a, b: a + b, str)
register(list, _concat_list, list)
register(tuple, lambda a, b: a + b, tuple)
