"""Search and comparison primitives over ordered sequences.

The binary searches in this module trust their preconditions: ``binary_search``
expects input sorted by the comparator and ``find_first`` expects the predicate
to be monotonic over the sequence. Neither is validated; violating them gives
an unspecified index rather than an error.

Examples:
    >>> from sequtils.functional.search import binary_search, find_first
    >>> binary_search([1, 3, 5, 7], 5)
    2
    >>> binary_search([1, 3, 5, 7], 4)
    -3
    >>> find_first([1, 3, 5, 7], lambda x: x > 4)
    2
"""

import operator
import typing as tp

from sequtils.core.types import T, Comparator, EqualityFn, Predicate, default_compare

__all__ = [
    "binary_search",
    "find_first",
    "first_index",
    "first",
    "contains",
    "common_prefix_length",
    "equals",
]


def binary_search(
    seq: tp.Sequence[T], key: T, comparator: Comparator = default_compare
) -> int:
    """Locate ``key`` in a sequence sorted ascending by ``comparator``.

    Args:
        seq: Sequence sorted ascending per ``comparator``.
        key: Element to look for.
        comparator: Ordering used to sort ``seq``. Defaults to natural order.

    Returns:
        The index of an element comparing equal to ``key``. When absent,
        ``-(insertion_point + 1)`` where ``insertion_point`` is the index at
        which ``key`` would keep ``seq`` sorted.
    """
    low, high = 0, len(seq) - 1

    while low <= high:
        mid = (low + high) // 2
        comp = comparator(seq[mid], key)
        if comp < 0:
            low = mid + 1
        elif comp > 0:
            high = mid - 1
        else:
            return mid
    return -(low + 1)


def find_first(seq: tp.Sequence[T], predicate: Predicate) -> int:
    """Find the first index satisfying a monotonic predicate.

    ``seq`` must be partitioned so that every element for which ``predicate``
    is false precedes every element for which it is true.

    Args:
        seq: Partitioned sequence.
        predicate: Monotonic predicate over ``seq``.

    Returns:
        The least index ``i`` with ``predicate(seq[i])``, or ``len(seq)`` when
        no element satisfies it.
    """
    low, high = 0, len(seq)
    if high == 0:
        return 0

    while low < high:
        mid = (low + high) // 2
        if predicate(seq[mid]):
            high = mid
        else:
            low = mid + 1
    return low


def first_index(seq: tp.Sequence[T], fn: Predicate) -> int:
    """Linear scan for the first element satisfying ``fn``; -1 if none does."""
    for i, element in enumerate(seq):
        if fn(element):
            return i
    return -1


def first(
    seq: tp.Sequence[T], fn: Predicate, not_found_value: tp.Optional[T] = None
) -> tp.Optional[T]:
    """Return the first element satisfying ``fn`` or ``not_found_value``."""
    i = first_index(seq, fn)
    return not_found_value if i < 0 else seq[i]


def contains(seq: tp.Sequence[T], item: T) -> bool:
    return item in seq


def common_prefix_length(
    one: tp.Sequence[T], other: tp.Sequence[T], equals: EqualityFn = operator.eq
) -> int:
    """Count the leading positions at which both sequences agree.

    Args:
        one: First sequence.
        other: Second sequence.
        equals: Element equality. Defaults to ``==``.

    Returns:
        Number of leading equal pairs, at most ``min(len(one), len(other))``.
    """
    result = 0
    for a, b in zip(one, other):
        if not equals(a, b):
            break
        result += 1
    return result


def equals(
    one: tp.Sequence[T], other: tp.Sequence[T], item_equals: EqualityFn = operator.eq
) -> bool:
    """Check two sequences for equal length and pairwise equal elements."""
    if len(one) != len(other):
        return False

    return all(item_equals(a, b) for a, b in zip(one, other))
