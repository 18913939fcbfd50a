"""Minimal sort consumer for raw-comparable keys."""

from __future__ import annotations

from mr_keys.sort.sorter import hash_partition, sort_encoded, sort_keys, sort_spans
from mr_keys.sort.spans import KeySpan, iter_key_spans

__all__ = [
    "KeySpan",
    "hash_partition",
    "iter_key_spans",
    "sort_encoded",
    "sort_keys",
    "sort_spans",
]
