"""
Wrapper types selecting a semigroup structure for their value.

    fold_monoid([Sum(1), Sum(2), Sum(3)])         # Sum(6)
    fold_map([1, 2, 3], Product)                  # Product(6)
    fold_map([True, False], All).into_inner()     # False
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Generic

from .traits import Monoid, Semigroup, Wrapper

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Sum(Wrapper, Monoid, Generic[T]):
    """Values under addition."""
    value: T

    def combine(self, other: Sum[T]) -> Sum[T]:
        return type(self)(self.value + other.value)

    @classmethod
    def unit(cls) -> Sum[T]:
        return cls(0)


@dataclass(frozen=True, order=True)
class Product(Wrapper, Monoid, Generic[T]):
    """Values under multiplication."""
    value: T

    def combine(self, other: Product[T]) -> Product[T]:
        return type(self)(self.value * other.value)

    @classmethod
    def unit(cls) -> Product[T]:
        return cls(1)


@dataclass(frozen=True, order=True)
class All(Wrapper, Monoid):
    """Booleans under logical and."""
    value: bool

    def combine(self, other: All) -> All:
        return type(self)(self.value and other.value)

    @classmethod
    def unit(cls) -> All:
        return cls(True)


@dataclass(frozen=True, order=True)
class Any(Wrapper, Monoid):
    """Booleans under logical or."""
    value: bool

    def combine(self, other: Any) -> Any:
        return type(self)(self.value or other.value)

    @classmethod
    def unit(cls) -> Any:
        return cls(False)


# Semigroups without a unit; fold them with fold_nonempty.

@dataclass(frozen=True, order=True)
class Min(Wrapper, Semigroup, Generic[T]):
    value: T

    def combine(self, other: Min[T]) -> Min[T]:
        return self if self.value <= other.value else other


@dataclass(frozen=True, order=True)
class Max(Wrapper, Semigroup, Generic[T]):
    value: T

    def combine(self, other: Max[T]) -> Max[T]:
        return self if self.value >= other.value else other


@dataclass(frozen=True)
class First(Wrapper, Semigroup, Generic[T]):
    value: T

    def combine(self, other: First[T]) -> First[T]:
        return self


@dataclass(frozen=True)
class Last(Wrapper, Semigroup, Generic[T]):
    value: T

    def combine(self, other: Last[T]) -> Last[T]:
        return other
