"""Reusable type definitions for the sequtils functional helpers.

This module provides the callable aliases shared by the search, selection,
dedup and indexing helpers so that signatures read the same across modules.

Type Aliases:
    Comparator: Maps a pair of elements to a negative, zero or positive int.
    EqualityFn: Maps a pair of elements to a bool.
    Predicate: Maps a single element to a bool.
    KeyFn: Maps an element to a hashable identity key (usually a str).
    Indexer: Same shape as KeyFn, used by ``index``.
    Merger: Combines an element with the value already stored under its key.
"""

import typing as tp

__all__ = [
    "T",
    "R",
    "Comparator",
    "EqualityFn",
    "Predicate",
    "KeyFn",
    "Indexer",
    "Merger",
    "default_compare",
]

T = tp.TypeVar("T")
R = tp.TypeVar("R")

Comparator = tp.Callable[[T, T], int]
EqualityFn = tp.Callable[[T, T], bool]
Predicate = tp.Callable[[T], bool]
KeyFn = tp.Callable[[T], tp.Hashable]
Indexer = tp.Callable[[T], tp.Hashable]
Merger = tp.Callable[[T, tp.Optional[R]], R]


def default_compare(a: tp.Any, b: tp.Any) -> int:
    """Natural-order comparator built on ``<`` and ``>``.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        -1, 0 or 1.
    """
    return int(a > b) - int(a < b)
