"""Deduplication, merging and filtering of sequences.

Two notions of identity are used here:
    - **Equality scan**: ``distinct`` without a key function keeps an element
      only when no earlier element compares equal to it. This is quadratic but
      works for unhashable elements and custom ``__eq__``.
    - **Key set**: every helper taking a key or hash function tracks the keys
      it has already seen in a set.
"""

import math
import typing as tp

import numpy as np

from sequtils.core.types import T, KeyFn, Predicate
from sequtils.logger.logger import logger

__all__ = [
    "distinct",
    "unique_filter",
    "merge",
    "coalesce",
]


def _same(a: tp.Any, b: tp.Any) -> bool:
    if a is b:
        return True
    # array-valued or failed comparisons (e.g. ndarray rows) count as different
    try:
        result = a == b
    except ValueError:
        return False
    return bool(result) if isinstance(result, (bool, np.bool_)) else False


def _is_nan(element: tp.Any) -> bool:
    return isinstance(element, float) and math.isnan(element)


def distinct(seq: tp.Sequence[T], key_fn: tp.Optional[KeyFn] = None) -> tp.List[T]:
    """Remove duplicates while keeping first-occurrence order.

    Args:
        seq: Input sequence. Not modified.
        key_fn: Optional function returning the identity key of an element.
            Without it, each element is checked by identity, then with
            ``==``, against every element kept so far.

    Returns:
        A new list holding the first element of each group of duplicates.
    """
    items = list(seq)
    if key_fn is None:
        kept: tp.List[T] = []
        for element in items:
            if not any(_same(previous, element) for previous in kept):
                kept.append(element)
        return kept

    return list(filter(unique_filter(key_fn), items))


def unique_filter(key_fn: KeyFn) -> Predicate:
    """Build a predicate that accepts each key only once.

    The returned callable remembers every key it has accepted for as long as
    it lives; create a new filter to start over.

    Example:
        >>> is_new = unique_filter(str.lower)
        >>> [is_new(w) for w in ["a", "B", "A", "b", "c"]]
        [True, True, False, False, True]
    """
    seen: tp.Set[tp.Hashable] = set()

    def _is_unique(element: T) -> bool:
        key = key_fn(element)
        if key in seen:
            return False

        seen.add(key)
        return True

    return _is_unique


def merge(
    sequences: tp.Sequence[tp.Sequence[T]], hash_fn: tp.Optional[KeyFn] = None
) -> tp.List[T]:
    """Concatenate sequences, optionally dropping elements with a repeated hash.

    Args:
        sequences: Sequences to concatenate, in order.
        hash_fn: When given, only the first element per ``hash_fn`` value across
            all sequences is kept.

    Returns:
        A new list.
    """
    if hash_fn is None:
        return [element for sequence in sequences for element in sequence]

    is_new = unique_filter(hash_fn)
    result = [
        element for sequence in sequences for element in sequence if is_new(element)
    ]
    logger.debug(
        f"merge: {len(sequences)} sequences merged into {len(result)} elements"
    )
    return result


def coalesce(seq: tp.Optional[tp.Sequence[T]]) -> tp.Optional[tp.Sequence[T]]:
    """Drop falsy elements (``None``, ``0``, ``""``, empty containers, ...) and NaN.

    The input is never modified. ``None`` is returned unchanged, and a
    ``numpy.ndarray`` is filtered with a boolean mask so the result stays an
    ndarray.
    """
    if seq is None:
        return seq

    if isinstance(seq, np.ndarray):
        mask = seq.astype(bool)
        if np.issubdtype(seq.dtype, np.floating):
            mask &= ~np.isnan(seq)
        return seq[mask]

    return [element for element in seq if element and not _is_nan(element)]
