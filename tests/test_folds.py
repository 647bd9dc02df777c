"""Tests for sequential folds."""

from dataclasses import dataclass

import pytest
from origami import (
    Reducer,
    Monoid,
    Sum,
    Product,
    All,
    Any,
    Max,
    EmptyFoldError,
    NoInstanceError,
    fold_monoid,
    fold_nonempty,
    fold_map,
    fold_map_nonempty,
    fold_reduce,
    fold_reduce_nonempty,
)


@dataclass
class Count(Reducer[str]):
    n: int

    @classmethod
    def from_value(cls, value: str) -> "Count":
        return cls(1)

    def combine(self, other: "Count") -> "Count":
        return Count(self.n + other.n)


@dataclass
class Chars(Reducer[str], Monoid):
    """Collects characters in place."""
    chars: list

    @classmethod
    def from_value(cls, value: str) -> "Chars":
        return cls(list(value))

    @classmethod
    def unit(cls) -> "Chars":
        return cls([])

    def combine(self, other: "Chars") -> "Chars":
        return Chars(self.chars + other.chars)

    def combine_right(self, value: str) -> "Chars":
        self.chars.extend(value)
        return self


class TestFoldMonoid:
    def test_sum(self):
        assert fold_monoid([Sum(1), Sum(2), Sum(3)]) == Sum(6)

    def test_empty_with_monoid(self):
        assert fold_monoid([], Sum) == Sum(0)
        assert fold_monoid([], str) == ""

    def test_empty_without_monoid(self):
        with pytest.raises(EmptyFoldError):
            fold_monoid([])

    def test_iterator_consumed_once(self):
        assert fold_monoid(iter([Product(2), Product(5)])) == Product(10)

    def test_strings(self):
        assert fold_monoid(["a", "b", "c"]) == "abc"

    def test_optional_values(self):
        assert fold_monoid([None, Sum(1), None, Sum(2)], Sum) == Sum(3)

    def test_all_none(self):
        assert fold_monoid([None, None]) is None

    def test_not_a_monoid(self):
        with pytest.raises(NoInstanceError):
            fold_monoid([Max(1), Max(2)])

    def test_order_preserved(self):
        assert fold_monoid([[1], [2], [3]]) == [1, 2, 3]


class TestFoldNonempty:
    def test_product(self):
        assert fold_nonempty([Product(1), Product(2), Product(3)]) == Product(6)

    def test_empty(self):
        assert fold_nonempty([]) is None

    def test_semigroup_only(self):
        assert fold_nonempty([Max(3), Max(9), Max(4)]) == Max(9)

    def test_single(self):
        assert fold_nonempty([Sum(4)]) == Sum(4)


class TestFoldMap:
    def test_all(self):
        assert fold_map([True, False, True], All).into_inner() is False

    def test_any(self):
        assert fold_map([False, False, True], Any) == Any(True)

    def test_empty_infers_monoid_from_wrapper(self):
        assert fold_map([], Sum) == Sum(0)

    def test_lambda_needs_monoid_when_empty(self):
        with pytest.raises(EmptyFoldError):
            fold_map([], lambda x: Sum(x * 2))
        assert fold_map([], lambda x: Sum(x * 2), Sum) == Sum(0)

    def test_lambda(self):
        assert fold_map([1, 2, 3], lambda x: Sum(x * x)) == Sum(14)

    def test_nonempty(self):
        assert fold_map_nonempty([5, 2, 8], Max) == Max(8)
        assert fold_map_nonempty([], Max) is None


class TestFoldReduce:
    def test_str(self):
        names = ["Applejack", "Fluttershy", "Rarity"]
        assert fold_reduce(names, str) == "ApplejackFluttershyRarity"

    def test_str_empty(self):
        assert fold_reduce([], str) == ""
        assert fold_reduce_nonempty([], str) is None

    def test_list_from_slices(self):
        assert fold_reduce([[1, 2], (3,), [4]], list) == [1, 2, 3, 4]

    def test_list_does_not_alias_input(self):
        first = [1]
        result = fold_reduce([first, [2]], list)
        assert result == [1, 2]
        assert first == [1]

    def test_custom_reducer(self):
        assert fold_reduce_nonempty(["a", "b", "c"], Count) == Count(3)

    def test_custom_reducer_without_unit(self):
        with pytest.raises(NoInstanceError):
            fold_reduce([], Count)

    def test_in_place_reducer(self):
        assert fold_reduce(["ab", "c"], Chars) == Chars(["a", "b", "c"])
        assert fold_reduce([], Chars) == Chars([])

    def test_combine_left(self):
        assert Chars(["b"]).combine_left("a") == Chars(["a", "b"])

    def test_unknown_reducer(self):
        with pytest.raises(NoInstanceError):
            fold_reduce(["a"], int)


class TestReducerErrors:
    def test_non_type_reducer(self):
        with pytest.raises(NoInstanceError, match="5"):
            fold_reduce(["a"], 5)
        with pytest.raises(NoInstanceError):
            fold_reduce_nonempty(["a"], 5)
