"""
Origami: folds over semigroups and monoids.

Separates what a fold combines (the semigroup or monoid) from how it
runs (sequentially, in chunks, or as a parallel tree reduction).

Usage:
    from origami import Sum, All, fold_monoid, fold_map, fold_reduce, afold, Tree

    # Sequential folds
    total = fold_monoid([Sum(1), Sum(2), Sum(3)])      # Sum(6)
    every = fold_map([True, False], All)               # All(False)
    text = fold_reduce(["ab", "cd"], str)              # "abcd"

    # Parallel tree reduction with an async combine
    merged = await afold(docs, llm_merge, strategy=Tree(max_concurrency=8))
"""

from .errors import OrigamiError, NoInstanceError, EmptyFoldError
from .traits import (
    Semigroup,
    Monoid,
    Reducer,
    Wrapper,
    combine,
    unit,
    register,
    is_semigroup,
    is_monoid,
)
from .wrappers import Sum, Product, All, Any, Min, Max, First, Last
from .folds import (
    fold_monoid,
    fold_nonempty,
    fold_map,
    fold_map_nonempty,
    fold_reduce,
    fold_reduce_nonempty,
)
from .strategies import Strategy, Sequential, Chunked, Tree, default_strategy
from .parallel import (
    afold,
    afold_monoid,
    afold_nonempty,
    afold_map,
    afold_map_nonempty,
)
from .config import FoldOptions

__version__ = "0.1.1"
__all__ = [
    # Algebra
    "Semigroup",
    "Monoid",
    "Reducer",
    "Wrapper",
    "combine",
    "unit",
    "register",
    "is_semigroup",
    "is_monoid",
    # Wrappers
    "Sum",
    "Product",
    "All",
    "Any",
    "Min",
    "Max",
    "First",
    "Last",
    # Sequential folds
    "fold_monoid",
    "fold_nonempty",
    "fold_map",
    "fold_map_nonempty",
    "fold_reduce",
    "fold_reduce_nonempty",
    # Async folds
    "afold",
    "afold_monoid",
    "afold_nonempty",
    "afold_map",
    "afold_map_nonempty",
    # Execution
    "Strategy",
    "Sequential",
    "Chunked",
    "Tree",
    "default_strategy",
    "FoldOptions",
    # Errors
    "OrigamiError",
    "NoInstanceError",
    "EmptyFoldError",
]
