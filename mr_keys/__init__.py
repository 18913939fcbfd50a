"""Float/string composite sort key with a raw-byte comparator."""

from __future__ import annotations

from mr_keys.core import (
    EncodingError,
    PreconditionError,
    RangeCheck,
    SortKeyError,
    StreamError,
    configure_logging,
)
from mr_keys.keys import (
    FloatStringPair,
    FloatStringPairComparator,
    compare_encoded,
    compare_pairs,
)

__version__ = "0.1.0"

__all__ = [
    "EncodingError",
    "FloatStringPair",
    "FloatStringPairComparator",
    "PreconditionError",
    "RangeCheck",
    "SortKeyError",
    "StreamError",
    "__version__",
    "compare_encoded",
    "compare_pairs",
    "configure_logging",
]
