"""sequtils: search, dedup, merge, partial-sort and mutation helpers for sequences."""

from sequtils.functional import *  # noqa: F401,F403
from sequtils.functional import __all__ as _functional_all

__all__ = list(_functional_all)
