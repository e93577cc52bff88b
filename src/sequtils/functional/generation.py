"""Sequence building, flattening and indexing helpers."""

import typing as tp

import numpy as np

from sequtils.core.types import T, R, Indexer, Merger
from sequtils.logger.logger import logger

__all__ = [
    "index",
    "flatten",
    "range_",
    "fill",
    "is_falsy_or_empty",
]


def _replace(element: T, _previous: tp.Any) -> T:
    return element


@tp.overload
def index(seq: tp.Sequence[T], indexer: Indexer) -> tp.Dict[tp.Hashable, T]: ...


@tp.overload
def index(
    seq: tp.Sequence[T], indexer: Indexer, merger: Merger
) -> tp.Dict[tp.Hashable, R]: ...


def index(seq, indexer, merger=None):
    """Build a mapping from ``indexer(element)`` to element.

    Args:
        seq: Input sequence.
        indexer: Computes the key of each element.
        merger: Called as ``merger(element, previous)`` where ``previous`` is
            the value already stored under the key (``None`` the first time).
            Defaults to keeping the latest element.

    Returns:
        A dict ordered by the first appearance of each key.

    Example:
        >>> words = ["apple", "avocado", "banana"]
        >>> index(words, lambda w: w[0], lambda w, n: (n or 0) + 1)
        {'a': 2, 'b': 1}
    """
    merger = merger or _replace
    result = {}
    for element in seq:
        key = indexer(element)
        result[key] = merger(element, result.get(key))
    return result


def flatten(seqs: tp.Sequence[tp.Sequence[T]]) -> tp.List[T]:
    """Concatenate a sequence of sequences into a single list."""
    return [element for seq in seqs for element in seq]


def range_(to: int, from_: int = 0) -> tp.List[int]:
    """Ascending integers from ``from_`` (inclusive) to ``to`` (exclusive)."""
    return list(range(from_, to))


def fill(
    num: int,
    value_fn: tp.Callable[[], T],
    seq: tp.Optional[tp.MutableSequence[T]] = None,
) -> tp.MutableSequence[T]:
    """Write ``num`` freshly computed values into the head of ``seq``.

    Positions ``0`` to ``num - 1`` are overwritten and the list grows when it
    is shorter than ``num``. ``value_fn`` is called once per position.

    Args:
        num: Number of positions to fill.
        value_fn: Zero-argument factory for each value.
        seq: Target list. A new list is created when omitted.

    Returns:
        The filled list (``seq`` itself when it was given).
    """
    if seq is None:
        seq = []

    for i in range(num):
        if i < len(seq):
            seq[i] = value_fn()
        else:
            seq.append(value_fn())

    if num > 0:
        logger.debug(f"fill: wrote {num} values, list length is {len(seq)}")
    return seq


def is_falsy_or_empty(obj: tp.Any) -> bool:
    """True unless ``obj`` is a non-empty list, tuple or ``numpy.ndarray``."""
    if isinstance(obj, np.ndarray):
        return obj.size == 0
    if isinstance(obj, (list, tuple)):
        return len(obj) == 0
    return True
