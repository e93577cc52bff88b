"""Core type definitions and configuration."""

from sequtils.core.config import Settings, settings
from sequtils.core.types import (
    Comparator,
    EqualityFn,
    Indexer,
    KeyFn,
    Merger,
    Predicate,
    default_compare,
)

__all__ = [
    "Settings",
    "settings",
    "Comparator",
    "EqualityFn",
    "Indexer",
    "KeyFn",
    "Merger",
    "Predicate",
    "default_compare",
]
