"""Core primitives for sort keys."""

from __future__ import annotations

from mr_keys.core.config import RANGE_CHECK_ENV, RangeCheck, range_check_from_env
from mr_keys.core.errors import (
    EncodingError,
    PreconditionError,
    SortKeyError,
    StreamError,
)
from mr_keys.core.floats import FLOAT32_SIZE, format_float32, to_float32
from mr_keys.core.hashing import (
    INT32_MAX,
    INT32_MIN,
    hash_pair_i32,
    hash_text_i32,
    truncate_to_int32,
    wrap_int32,
)
from mr_keys.core.log import LOG_FORMAT, ROOT_LOGGER_NAME, configure_logging

__all__ = [
    "EncodingError",
    "FLOAT32_SIZE",
    "INT32_MAX",
    "INT32_MIN",
    "LOG_FORMAT",
    "PreconditionError",
    "RANGE_CHECK_ENV",
    "ROOT_LOGGER_NAME",
    "RangeCheck",
    "SortKeyError",
    "StreamError",
    "configure_logging",
    "format_float32",
    "hash_pair_i32",
    "hash_text_i32",
    "range_check_from_env",
    "to_float32",
    "truncate_to_int32",
    "wrap_int32",
]
