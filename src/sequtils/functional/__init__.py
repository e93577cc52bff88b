"""Functional primitives for sequtils.

This module provides the sequence helpers of the package: searching,
top-N selection, deduplication, positional mutation and indexing. Apart from
the helpers documented as mutating (``swap``, ``move``, ``insert``,
``for_each`` and ``fill``), every function returns a new object and leaves its
inputs untouched.
"""

from sequtils.functional.dedup import coalesce, distinct, merge, unique_filter
from sequtils.functional.generation import (
    fill,
    flatten,
    index,
    is_falsy_or_empty,
    range_,
)
from sequtils.functional.mutation import for_each, insert, move, swap, tail
from sequtils.functional.search import (
    binary_search,
    common_prefix_length,
    contains,
    equals,
    find_first,
    first,
    first_index,
)
from sequtils.functional.selection import top

__all__ = [
    "binary_search",
    "find_first",
    "first_index",
    "first",
    "contains",
    "common_prefix_length",
    "equals",
    "top",
    "distinct",
    "unique_filter",
    "merge",
    "coalesce",
    "tail",
    "swap",
    "move",
    "insert",
    "for_each",
    "index",
    "flatten",
    "range_",
    "fill",
    "is_falsy_or_empty",
]
