"""Float/string pair key and its comparators."""

from __future__ import annotations

from mr_keys.keys.comparator import (
    FloatStringPairComparator,
    RawComparableKey,
    RawComparator,
    compare_bytes,
    compare_encoded,
    compare_pairs,
)
from mr_keys.keys.pair import FloatStringPair

__all__ = [
    "FloatStringPair",
    "FloatStringPairComparator",
    "RawComparableKey",
    "RawComparator",
    "compare_bytes",
    "compare_encoded",
    "compare_pairs",
]
