"""Process-stable 32-bit hashing utilities."""

from __future__ import annotations

import math

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT32_MAX else value


def truncate_to_int32(value: float) -> int:
    """Float-to-int cast with NaN -> 0 and saturation at the int32 bounds."""
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return int(value)


def hash_text_i32(text: str) -> int:
    """31-multiplier polynomial hash over UTF-16 code units."""
    data = text.encode("utf-16-be", errors="surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    return wrap_int32(h)


def hash_pair_i32(left: float, right: str) -> int:
    return wrap_int32(truncate_to_int32(left) + hash_text_i32(right))
