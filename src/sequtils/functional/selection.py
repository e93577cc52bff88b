"""Bounded top-N selection.

``top`` keeps a sorted buffer of at most ``n`` candidates and only touches it
when an incoming element beats the current largest candidate. For an input of
``m`` elements this costs ``O(m)`` comparisons plus ``O(log n)`` search and
``O(n)`` shift per accepted element, which beats a full ``O(m log m)`` sort
when ``m`` is much larger than ``n``.

Example:
    >>> from sequtils.functional.selection import top
    >>> top([5, 3, 8, 1, 9, 2], lambda a, b: a - b, 3)
    [1, 2, 3]
"""

import functools
import typing as tp

from sequtils.core.types import T, Comparator
from sequtils.functional.search import find_first
from sequtils.logger.logger import logger

__all__ = ["top"]


def top(seq: tp.Sequence[T], comparator: Comparator, n: int) -> tp.List[T]:
    """Return the ``n`` smallest elements of ``seq`` in ascending order.

    The result is identical to ``sorted(seq, key=cmp_to_key(comparator))[:n]``,
    ties included: an incoming element that compares equal to kept candidates
    is placed after them, as a stable sort would.

    Args:
        seq: Unsorted input sequence. Not modified.
        comparator: Ordering of the elements.
        n: Number of elements to keep. Non-positive values yield ``[]``.

    Returns:
        A new list of ``min(n, len(seq))`` elements sorted ascending.
    """
    if n <= 0:
        return []

    items = list(seq)
    result = sorted(items[:n], key=functools.cmp_to_key(comparator))

    replaced = 0
    for element in items[n:]:
        if comparator(element, result[-1]) < 0:
            result.pop()
            # first kept candidate strictly greater than the new element
            j = find_first(result, lambda e: comparator(element, e) < 0)
            result.insert(j, element)
            replaced += 1

    logger.debug(
        f"top: kept {len(result)} of {len(items)} elements, {replaced} replacements"
    )
    return result
