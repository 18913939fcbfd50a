"""Sorting and partitioning with an injected comparator."""

from __future__ import annotations

from functools import cmp_to_key
import logging
from typing import Callable, Iterable

from mr_keys.core.errors import PreconditionError
from mr_keys.keys.comparator import RawComparableKey, RawComparator, compare_pairs
from mr_keys.keys.pair import FloatStringPair
from mr_keys.sort.spans import KeySpan, iter_key_spans

logger = logging.getLogger(__name__)


def sort_spans(spans: Iterable[KeySpan], comparator: RawComparator) -> list[KeySpan]:
    """Stable sort of spans by ``comparator``; the text is never decoded."""

    def _cmp(a: KeySpan, b: KeySpan) -> int:
        return comparator.compare(
            a.buffer, a.offset, a.length, b.buffer, b.offset, b.length
        )

    return sorted(spans, key=cmp_to_key(_cmp))


def sort_encoded(
    buffer: bytes,
    key_type: type[RawComparableKey] = FloatStringPair,
    comparator: RawComparator | None = None,
) -> bytes:
    """Sort a buffer of back-to-back key encodings and re-concatenate it."""
    active = comparator if comparator is not None else key_type.raw_comparator()
    spans = sort_spans(iter_key_spans(buffer, key_type), active)
    logger.debug("sorted %d encoded keys with %r", len(spans), active)
    return b"".join(span.to_bytes() for span in spans)


def sort_keys(
    keys: Iterable[FloatStringPair],
    compare: Callable[[FloatStringPair, FloatStringPair], int] = compare_pairs,
) -> list[FloatStringPair]:
    return sorted(keys, key=cmp_to_key(compare))


def hash_partition(key: FloatStringPair, num_partitions: int) -> int:
    """Partition index from the key's process-stable hash."""
    if num_partitions <= 0:
        raise PreconditionError(f"num_partitions must be positive: {num_partitions}")
    return (key.stable_hash() & 0x7FFFFFFF) % num_partitions
