"""In-place positional helpers for lists.

These helpers never raise on bad positions. A slot outside ``[0, len(seq))``
reads as ``None``; writing past the end pads the list with ``None`` and
writing to a negative slot is dropped. Only ``move`` lets a negative source
position count from the end; elsewhere negative positions never wrap around
the way plain list indexing does.
"""

import typing as tp

from sequtils.core.types import T
from sequtils.logger.logger import logger

__all__ = [
    "tail",
    "swap",
    "move",
    "insert",
    "for_each",
]


def _get(seq: tp.Sequence[T], position: int) -> tp.Optional[T]:
    if 0 <= position < len(seq):
        return seq[position]
    return None


def _set(seq: tp.MutableSequence[T], position: int, value: tp.Optional[T]) -> None:
    if position < 0:
        logger.debug(f"ignoring write to negative slot {position}")
        return
    if position >= len(seq):
        logger.debug(f"padding list from {len(seq)} to {position + 1} slots")
        seq.extend([None] * (position + 1 - len(seq)))
    seq[position] = value


def tail(seq: tp.Sequence[T], n: int = 0) -> tp.Optional[T]:
    """Return the ``n``-th element from the end (``0`` is the last one).

    Args:
        seq: Input sequence.
        n: Offset from the end.

    Returns:
        ``seq[len(seq) - (1 + n)]`` or ``None`` when that slot does not exist.
    """
    return _get(seq, len(seq) - (1 + n))


def swap(seq: tp.MutableSequence[T], pos1: int, pos2: int) -> None:
    """Exchange the elements at ``pos1`` and ``pos2`` in place."""
    element1 = _get(seq, pos1)
    element2 = _get(seq, pos2)

    _set(seq, pos1, element2)
    _set(seq, pos2, element1)


def move(seq: tp.MutableSequence[T], from_: int, to: int) -> None:
    """Move the element at ``from_`` so that it ends up at ``to``.

    A negative ``from_`` counts from the end of the list, and one reaching
    past the start resolves to ``0``. ``to`` is interpreted against the list
    after the element was removed and is clamped the way ``list.insert``
    clamps it.
    """
    if from_ < 0:
        from_ = max(from_ + len(seq), 0)
    if from_ < len(seq):
        element = seq.pop(from_)
    else:
        logger.debug(f"move: slot {from_} is absent, moving None")
        element = None
    seq.insert(to, element)


def insert(seq: tp.MutableSequence[T], element: T) -> tp.Callable[[], None]:
    """Append ``element`` and return a callable that takes it out again.

    The returned callable removes the appended instance (matched by identity,
    not equality) the first time it finds it. Later calls, or calls after the
    instance was removed some other way, do nothing.

    Example:
        >>> items = [1, 2]
        >>> remove = insert(items, 3)
        >>> items
        [1, 2, 3]
        >>> remove()
        >>> items
        [1, 2]
    """
    seq.append(element)
    removed = False

    def _remove() -> None:
        nonlocal removed
        if removed:
            return
        for i, item in enumerate(seq):
            if item is element:
                del seq[i]
                removed = True
                return

    return _remove


def for_each(
    seq: tp.MutableSequence[T],
    callback: tp.Callable[[T, tp.Callable[[], None]], None],
) -> None:
    """Visit every element, allowing the callback to remove the current one.

    ``callback`` receives the element and a ``remove`` callable. Calling
    ``remove()`` deletes the element being visited and rewinds the cursor, so
    the following element is still visited exactly once.

    Args:
        seq: List to iterate. Elements removed through ``remove`` are deleted
            from it in place.
        callback: Called as ``callback(element, remove)``.
    """
    i = 0
    length = len(seq)
    removed = False

    def _remove() -> None:
        nonlocal i, length, removed
        # at most one removal per visited element
        if removed or not 0 <= i < len(seq):
            return
        del seq[i]
        i -= 1
        length -= 1
        removed = True

    while i < length:
        removed = False
        callback(seq[i], _remove)
        i += 1
